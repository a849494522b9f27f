"""
Pytest configuration and shared fixtures.
"""

import io

import pytest

from payroll_desk.app import Console
from payroll_desk.department import PayrollDepartment
from payroll_desk.logger import StructuredLogger, reset_logger


@pytest.fixture(autouse=True)
def _isolated_global_logger():
    """Never let a test reuse (or leak) the process-wide logger."""
    reset_logger()
    yield
    reset_logger()


@pytest.fixture
def quiet_logger(tmp_path) -> StructuredLogger:
    """Logger writing only to a file under tmp_path."""
    logger = StructuredLogger(
        name="payroll_desk.test",
        level="DEBUG",
        log_dir=tmp_path,
        enable_console=False,
    )
    yield logger
    logger.close()


@pytest.fixture
def department(quiet_logger) -> PayrollDepartment:
    """Empty department wired to the test logger."""
    return PayrollDepartment(logger=quiet_logger)


@pytest.fixture
def scenario_a(department) -> PayrollDepartment:
    """Flat(100) and Bonus(200, 10)."""
    department.add_regular_job(100)
    department.add_bonus_job(200, 10)
    return department


@pytest.fixture
def make_console():
    """Factory: Console fed with the given input lines -> (console, stdout, stderr)."""
    def _make(*lines: str):
        stdin = io.StringIO("".join(f"{line}\n" for line in lines))
        stdout = io.StringIO()
        stderr = io.StringIO()
        return Console(stdin=stdin, stdout=stdout, stderr=stderr), stdout, stderr
    return _make

import argparse
import sys
from pathlib import Path
from typing import Optional, TextIO

from . import __version__
from .department import PayrollDepartment
from .env import LOG_LEVELS, Settings, load_env, load_settings
from .errors import PayrollError
from .logger import get_logger
from .schema import parse_amount

MENU_TEXT = (
    "\nMenu:\n"
    "1. Add regular job\n"
    "2. Add bonus job\n"
    "3. Calculate average pay\n"
    "4. Show jobs info\n"
    "0. Exit\n"
)
MENU_PROMPT = "Choose an option: "
EXIT_CHOICE = 0


class Console:
    """Input/output streams for the menu loop (stdin/stdout/stderr by default)."""

    def __init__(
        self,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
    ):
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.stderr = stderr if stderr is not None else sys.stderr

    def prompt(self, text: str) -> Optional[str]:
        """Show a prompt and read one line. Returns None at end of input."""
        self.stdout.write(text)
        self.stdout.flush()
        line = self.stdin.readline()
        if line == "":
            return None
        return line.strip()

    def say(self, text: str) -> None:
        print(text, file=self.stdout)

    def error(self, text: str) -> None:
        print(text, file=self.stderr)


def _read_amount(console: Console, text: str) -> Optional[float]:
    raw = console.prompt(text)
    if raw is None:
        return None
    try:
        return parse_amount(raw)
    except ValueError:
        console.error(f"Error: not a number: {raw!r}")
        return None


def cmd_add_regular(department: PayrollDepartment, console: Console) -> None:
    base_pay = _read_amount(console, "Enter base pay for the regular job: ")
    if base_pay is None:
        return
    try:
        department.add_regular_job(base_pay)
    except PayrollError as e:
        console.error(f"Error: {e}")
        return
    console.say("Regular job added.")


def cmd_add_bonus(department: PayrollDepartment, console: Console) -> None:
    base_pay = _read_amount(console, "Enter base pay for the bonus job: ")
    if base_pay is None:
        return
    bonus_rate = _read_amount(console, "Enter bonus rate in percent (0-100): ")
    if bonus_rate is None:
        return
    try:
        department.add_bonus_job(base_pay, bonus_rate)
    except PayrollError as e:
        console.error(f"Error: {e}")
        return
    console.say("Bonus job added.")


def cmd_average(department: PayrollDepartment, console: Console, currency: str) -> None:
    try:
        average = department.calculate_average_pay()
    except PayrollError as e:
        console.error(f"Error: {e}")
        return
    console.say(f"Average pay: {average:g} {currency}")


def cmd_show(department: PayrollDepartment, console: Console) -> None:
    for line in department.display_jobs_info():
        console.say(line)


def run_menu(
    department: PayrollDepartment,
    console: Optional[Console] = None,
    currency: str = "rub.",
) -> None:
    """
    Interactive loop: show the menu, dispatch the choice, repeat until 0.

    Bad menu input is reported and re-prompted. End of input behaves like
    choosing 0.
    """
    console = console or Console()
    handlers = {
        1: lambda: cmd_add_regular(department, console),
        2: lambda: cmd_add_bonus(department, console),
        3: lambda: cmd_average(department, console, currency),
        4: lambda: cmd_show(department, console),
    }

    while True:
        console.stdout.write(MENU_TEXT)
        raw = console.prompt(MENU_PROMPT)
        if raw is None:
            console.say("")
            choice = EXIT_CHOICE
        else:
            try:
                choice = int(raw)
            except ValueError:
                department.logger.debug("Unparseable menu input", raw=raw)
                console.error("Invalid input. Try again.")
                continue

        if choice == EXIT_CHOICE:
            console.say("Exiting.")
            return
        handler = handlers.get(choice)
        if handler is None:
            console.error("Invalid choice. Try again.")
            continue
        handler()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="payroll-desk", description="Payroll desk: interactive job pay bookkeeping")
    parser.add_argument("--version", action="store_true", help="Show version")
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, help="Log level (or set PAYROLL_LOG_LEVEL)")
    parser.add_argument("--log-dir", help="Directory for log files (or set PAYROLL_LOG_DIR, default: logs)")
    parser.add_argument("--no-log-file", action="store_true", help="Do not write a log file")
    parser.add_argument("--log-console", action="store_true", help="Echo log records to stdout")
    parser.add_argument("--currency", help="Currency label for the average pay (or set PAYROLL_CURRENCY)")
    return parser


def apply_overrides(settings: Settings, args: argparse.Namespace) -> Settings:
    return Settings(
        log_level=args.log_level or settings.log_level,
        log_dir=Path(args.log_dir) if args.log_dir else settings.log_dir,
        log_file=settings.log_file and not args.no_log_file,
        log_console=settings.log_console or args.log_console,
        currency=args.currency or settings.currency,
    )


def main(argv: Optional[list] = None) -> None:
    # Load .env if present (PAYROLL_LOG_LEVEL, PAYROLL_CURRENCY, etc.)
    load_env()
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.version:
        print(__version__)
        return

    try:
        settings = apply_overrides(load_settings(), args)
    except ValueError as e:
        raise SystemExit(str(e))

    logger = get_logger(
        level=settings.log_level,
        log_dir=settings.log_dir,
        enable_file=settings.log_file,
        enable_console=settings.log_console,
    )
    logger.info("Session started", version=__version__)
    department = PayrollDepartment(logger=logger)
    try:
        run_menu(department, currency=settings.currency)
    except KeyboardInterrupt:
        print("\nExiting.")
    finally:
        logger.log_metrics_summary()


if __name__ == "__main__":
    main()

"""
Payroll department: the ordered collection of jobs and its aggregates.
"""

from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from .errors import EmptyCollection, InvalidArgument
from .jobs import BonusJob, Job, RegularJob
from .logger import StructuredLogger, get_logger

NO_JOBS_MESSAGE = "No job data available."
JOBS_HEADER = "Jobs info:"


@dataclass(frozen=True)
class JobInfo:
    index: int
    kind: str
    base_pay: float
    pay: float


class PayrollDepartment:
    """
    Owns every job added during a session, in insertion order.

    Failed adds propagate InvalidArgument and leave the collection as it
    was; the caller decides how to report them.
    """

    def __init__(self, logger: Optional[StructuredLogger] = None):
        self._jobs: List[Job] = []
        self._logger = logger

    @property
    def logger(self) -> StructuredLogger:
        if self._logger is None:
            # core use stays silent unless main() configured the logger first
            self._logger = get_logger(enable_file=False, enable_console=False)
        return self._logger

    @property
    def jobs(self) -> Tuple[Job, ...]:
        return tuple(self._jobs)

    def __len__(self) -> int:
        return len(self._jobs)

    def __iter__(self) -> Iterator[Job]:
        return iter(tuple(self._jobs))

    def add_regular_job(self, base_pay: float) -> RegularJob:
        try:
            job = RegularJob(base_pay)
        except InvalidArgument as e:
            self._log_rejected(RegularJob.kind, e, base_pay=base_pay)
            raise
        self._append(job)
        return job

    def add_bonus_job(self, base_pay: float, bonus_rate: float) -> BonusJob:
        try:
            job = BonusJob(base_pay, bonus_rate)
        except InvalidArgument as e:
            self._log_rejected(BonusJob.kind, e, base_pay=base_pay, bonus_rate=bonus_rate)
            raise
        self._append(job)
        return job

    def calculate_average_pay(self) -> float:
        if not self._jobs:
            self.logger.record_error(EmptyCollection.__name__)
            raise EmptyCollection("No job data to calculate the average pay.")

        total_pay = 0.0
        for job in self._jobs:
            total_pay += job.calculate_pay()
        average = total_pay / len(self._jobs)

        self.logger.record_average_computed()
        self.logger.debug("Average pay computed", jobs=len(self._jobs), average=average)
        return average

    def jobs_info(self) -> List[JobInfo]:
        """Enumerate (index, base pay, pay) for every job, 1-based."""
        return [
            JobInfo(index=i, kind=job.kind, base_pay=job.get_base_pay(), pay=job.calculate_pay())
            for i, job in enumerate(self._jobs, start=1)
        ]

    def display_jobs_info(self) -> List[str]:
        """
        Display lines for the job listing.

        An empty department yields the single no-data line rather than
        raising.
        """
        rows = self.jobs_info()
        if not rows:
            return [NO_JOBS_MESSAGE]
        lines = [JOBS_HEADER]
        for row in rows:
            lines.append(
                f"Job {row.index}: base pay = {row.base_pay:g}, total pay = {row.pay:g}"
            )
        return lines

    def _append(self, job: Job) -> None:
        self._jobs.append(job)
        self.logger.record_job_added(job.kind)
        self.logger.info(
            "Job added",
            kind=job.kind,
            base_pay=job.get_base_pay(),
            pay=job.calculate_pay(),
            position=len(self._jobs),
        )

    def _log_rejected(self, kind: str, error: InvalidArgument, **context) -> None:
        self.logger.record_job_rejected(type(error).__name__)
        self.logger.warning(f"Rejected {kind} job: {error}", **context)

class PayrollError(Exception):
    """Base exception for payroll rule violations."""
    pass


class InvalidArgument(PayrollError, ValueError):
    """Raised when a base pay or bonus rate violates the job invariants."""
    pass


class EmptyCollection(PayrollError, LookupError):
    """Raised when an aggregate is requested over a department with no jobs."""
    pass

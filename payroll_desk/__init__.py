"""payroll-desk: console payroll bookkeeping."""

__version__ = "0.1.0"

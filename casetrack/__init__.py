"""casetrack: lifecycle tracking and result snapshots for test cases."""

__version__ = "0.1.0"

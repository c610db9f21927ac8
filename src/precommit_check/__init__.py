"""Pre-commit check runner: sequential gates, then concurrent checks."""

__version__ = "0.1.0"

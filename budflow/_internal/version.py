"""Version information for BudFlow SDK."""

__version__ = "0.1.0"

"""Version information for the BagelPay SDK."""

__version__ = "1.0.3"

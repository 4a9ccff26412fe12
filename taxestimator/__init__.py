"""Tax Estimator: federal and state income tax estimation."""

__version__ = "0.1.0"

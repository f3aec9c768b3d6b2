"""onesecond: how many operations fit in one second, per error-handling strategy."""

__version__ = "0.1.0"

"""Daily puzzle solutions for days 0 to 25 and a runner to solve and time them."""

__version__ = "0.1.0"
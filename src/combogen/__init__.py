"""Daily meal combo generation with calorie, taste and variety rules."""

__version__ = "0.1.0"

"""trekk: legal chess move generation with algebraic move text."""

__version__ = "0.1.0"

"""Building blocks for a kubectl plugin manager: search, notices, setup checks and platform validation."""

__version__ = "0.1.0"
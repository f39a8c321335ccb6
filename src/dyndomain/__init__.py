"""dyndomain — integer domains as unions of intervals."""

__version__ = "0.1.0"

"""Classic array algorithms and binary searches over sorted and rotated sequences."""

__version__ = "0.1.0"
__all__ = ["arrays", "searching", "rotated"]
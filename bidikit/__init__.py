"""Unicode bidi types, run lists, Arabic cursive joining and bidi mark removal."""

__version__ = "0.1.0"
__all__ = ["types", "joining_types", "joining", "runs", "marks"]
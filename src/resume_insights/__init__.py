"""AI resume analysis: fit scoring, entity extraction and resume drafting."""

__version__ = "0.1.0"

"""Classic algorithms, data structures and algorithm problems for study."""

__version__ = "0.1.0"
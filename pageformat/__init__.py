"""Plain-text formatter with fixed line width, paragraph indents and page numbers."""

__version__ = "0.1.0"
__all__ = ["cli", "formatter"]
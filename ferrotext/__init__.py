"""Text-editor building blocks: line endings, graphemes, text metrics, key mapping, cell grids and widgets."""

__version__ = "0.1.0"
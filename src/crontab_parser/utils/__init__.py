"""Text helpers shared by the parsers."""

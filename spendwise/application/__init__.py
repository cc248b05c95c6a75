"""Application workflows built on the parsers and runtime services."""

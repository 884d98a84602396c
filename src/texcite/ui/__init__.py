"""User interfaces for texcite."""

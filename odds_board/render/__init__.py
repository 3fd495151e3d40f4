"""Display surfaces for normalized odds tables."""

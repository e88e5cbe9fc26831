"""tmplhier — template hierarchy resolution for page views."""

__version__ = "0.1.0"

"""tree-hygiene: repository hygiene checks for large multi-platform source trees."""

__version__ = "0.3.0"

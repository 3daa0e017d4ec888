"""Feed Enhancer: allow-list and block-list filtering for feed documents."""

__version__ = "0.1.0"

"""Record files, text tables and reports for a small veterinary clinic."""

__version__ = "0.1.0"
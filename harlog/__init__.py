"""harlog: HTTP Archive (HAR 1.2) document model and JSON codec."""

__version__ = "0.1.0"

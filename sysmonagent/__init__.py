"""Collect and report CPU, memory and network metrics of the local machine."""

__version__ = "0.1.0"
"""Personal command-line time tracker."""

__version__ = "0.3.0"

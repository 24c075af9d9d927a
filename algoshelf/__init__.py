"""Graph algorithms and compact solutions to classic programming problems."""

__version__ = "0.1.0"
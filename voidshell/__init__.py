"""Core pieces of a small POSIX-style shell: variables, command nodes, builtins, line reading."""

__version__ = "0.1.0"
__all__ = ["builtins", "commands", "environment", "linereader", "strutils"]
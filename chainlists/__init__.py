"""Singly and doubly linked list containers, their exceptions and a demo command."""

__version__ = "0.1.0"
__all__ = ["errors", "singly", "doubly", "cli"]
"""Singly and doubly linked lists holding arbitrary objects, with a small demo."""

__version__ = "0.1.0"
__all__ = ["singly", "doubly", "demo"]
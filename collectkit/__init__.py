"""Singly linked lists, stacks, and red-black tree tables and sets."""

__version__ = "0.1.0"
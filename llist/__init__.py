"""Singly linked lists of floats with element-wise arithmetic, splitting and quicksort."""

__version__ = "0.1.0"
__all__ = ["linked_list", "demo"]
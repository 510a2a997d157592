"""Classic algorithm routines: two pointers, heaps, stacks and binary trees."""

__version__ = "0.1.0"
__all__ = ["two_pointers", "heaps", "stack", "trees"]
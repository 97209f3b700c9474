"""Classic data structures in plain Python: lists, heaps, trees and graphs."""

__version__ = "0.1.0"

__all__ = [
    "array_list",
    "binary_tree",
    "bst",
    "graph",
    "heaps",
    "linked_lists",
]
"""Classic data structures and a linked-list versus tree lookup benchmark."""

__version__ = "0.1.0"
__all__ = [
    "arraylist",
    "arrays",
    "binary_tree",
    "bst",
    "fifo",
    "heap",
    "linkedlist",
    "search_bench",
    "stack",
    "wallet",
]
"""Classic array, string, number, linked-list, tree and stack algorithms."""

__version__ = "0.1.0"

__all__ = ["arrays", "inplace", "linked_list", "numbers", "searching", "stack", "strings", "trees"]
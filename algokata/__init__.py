"""Classic algorithm exercises over linked lists, sequences, arrays, strings, numbers and matrices."""

__version__ = "0.1.0"
__all__ = ["arrays", "linked_list", "matrix", "numbers", "sequences", "strings"]
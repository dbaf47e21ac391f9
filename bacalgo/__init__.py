"""Graph representations, sorts, dynamic programming, string search, a linked list and input multiplexing."""

__version__ = "0.1.0"

__all__ = ["dynamic", "graphs", "linked_list", "multiplexing", "sorting", "strings"]
"""Classic data structures and algorithms: searching, bit tricks, lists, trees, heaps and graphs."""

__version__ = "0.1.0"
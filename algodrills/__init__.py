"""Algorithm drills: number bases, factoring, list exercises, Big O examples and sorts."""

__version__ = "0.1.0"
__all__ = ["bigo", "cli", "lists", "numbers", "person", "sorting"]
"""Two-stack integer sorting with a limited instruction set, and a checker for it."""

__version__ = "0.1.0"
__all__ = ["parsing", "stacks", "small", "chunks", "push_swap", "checker"]
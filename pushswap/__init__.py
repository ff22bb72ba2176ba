"""Two-stack integer sorting that reports the sequence of stack operations."""

__version__ = "1.0.0"
__all__ = ["cli", "ranks", "sorting", "stacks", "validation"]
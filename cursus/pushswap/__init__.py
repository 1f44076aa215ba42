"""Sorting integers with two stacks and a fixed set of operations."""

__all__ = ["parsing", "stacks", "moves", "sorter"]
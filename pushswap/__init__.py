"""Sort integers with two stacks and print the operations used, plus small string, memory and I/O helpers."""

__version__ = "1.0.0"
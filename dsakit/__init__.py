"""Teaching implementations of stacks, queues, linked lists and infix notation conversion."""

__version__ = "0.1.0"
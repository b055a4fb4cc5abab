"""Solutions to classic programming exercises: sorting, numbers, queues and stacks."""

__version__ = "0.1.0"
__all__ = ["numbers", "queues", "sorting", "stacks"]
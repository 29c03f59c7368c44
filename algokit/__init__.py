"""Classic data structures and algorithms: stacks, queues, heaps, trees, hashing and sorting."""

__version__ = "0.1.0"
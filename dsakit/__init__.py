"""Classic data structures and algorithms: linked lists, stacks, queues, trees, graphs, sorting and expressions."""

__version__ = "0.1.0"

__all__ = [
    "circular_list",
    "doubly_list",
    "expressions",
    "graphs",
    "linked_list",
    "queues",
    "sorting",
    "stack",
    "trees",
]
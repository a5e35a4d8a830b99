"""Search trees, linked lists, stacks, queues and Tower of Hanoi, with interactive menus."""

__version__ = "0.1.0"

__all__ = [
    "binary_tree",
    "bst",
    "circular_list",
    "hanoi",
    "linked_list",
    "queues",
    "stack",
]
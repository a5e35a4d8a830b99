"""A plain binary tree whose root can be given a left and a right child."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator
from dataclasses import dataclass

from dsakit.bst import (
    _ask,
    _inorder_nodes,
    _menu,
    _postorder_nodes,
    _preorder_nodes,
    _tokens,
)

_BUILD_MENU = "Enter where you want to add a new node:\n1. LEFT\n2. RIGHT\n3. EXIT\n"
_EXPLORE_MENU = (
    "1. INORDER TRAVERSAL\n2. POSTORDER TRAVERSAL\n"
    "3. PREORDER TRAVERSAL\n4. SEARCH NODE\n5. EXIT\n"
)


class ChildExistsError(Exception):
    """Raised when a child is added where one already exists."""


@dataclass(eq=False)
class Node:
    value: int
    left: Node | None = None
    right: Node | None = None


class BinaryTree:
    """A binary tree grown by attaching children to the root."""

    def __init__(self, root_value: int) -> None:
        self.root = Node(root_value)

    def add_left(self, value: int) -> Node:
        if self.root.left is not None:
            raise ChildExistsError("Left node already exists.")
        self.root.left = Node(value)
        return self.root.left

    def add_right(self, value: int) -> Node:
        if self.root.right is not None:
            raise ChildExistsError("Right node already exists.")
        self.root.right = Node(value)
        return self.root.right

    def inorder(self) -> Iterator[int]:
        return (node.value for node in _inorder_nodes(self.root))

    def preorder(self) -> Iterator[int]:
        return (node.value for node in _preorder_nodes(self.root))

    def postorder(self) -> Iterator[int]:
        return (node.value for node in _postorder_nodes(self.root))

    def search(self, value: int) -> Node | None:
        """Return the first node in preorder holding ``value``, or None."""
        return next((node for node in _preorder_nodes(self.root) if node.value == value), None)


def _build(tokens: Iterator[str]) -> BinaryTree:
    print("Creating tree:")
    tree = BinaryTree(_ask("Enter data for node: ", tokens))
    print("Root node is created")
    sides = {1: ("left", tree.add_left), 2: ("right", tree.add_right)}

    def handle(choice: int) -> bool:
        if choice == 3:
            print("exiting.....")
            return False
        if choice not in sides:
            print("Invalid choice.")
            return True
        side, add = sides[choice]
        if getattr(tree.root, side) is not None:
            raise ChildExistsError(f"{side.capitalize()} node already exists.")
        add(_ask("Enter data for node: ", tokens))
        return True

    _menu(
        tokens,
        _BUILD_MENU,
        "Enter choice: ",
        handle,
        invalid="Invalid choice.",
        errors=(ChildExistsError,),
    )
    return tree


def _explore(tree: BinaryTree, tokens: Iterator[str]) -> None:
    traversals = {
        1: ("\nInorder traversal of the tree:", tree.inorder),
        2: ("\nPostorder traversal:", tree.postorder),
        3: ("\nPreorder traversal:", tree.preorder),
    }

    def handle(choice: int) -> bool:
        if choice in traversals:
            title, walk = traversals[choice]
            print(title)
            print(*walk())
        elif choice == 4:
            key = _ask("Enter value to search in tree: ", tokens)
            if tree.search(key) is not None:
                print(f"Node with value {key} found!")
            else:
                print(f"Node with value {key} not found in the tree.")
        elif choice == 5:
            return False
        return True

    _menu(tokens, _EXPLORE_MENU, "enter choice:- ", handle)


def main(argv: list[str] | None = None) -> int:
    """Build a tree from standard input, then traverse and search it."""
    argparse.ArgumentParser(description="Interactive binary tree.").parse_args(argv)
    tokens = _tokens(sys.stdin)
    try:
        _explore(_build(tokens), tokens)
    except EOFError:
        print()
    except ValueError:
        print("Invalid value.")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
"""Binary search tree with deletion, mirroring and node statistics."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any

_MENU = """
--- Binary Search Tree Menu ---
1. Insert Element
2. Search Element
3. Delete Element
4. Inorder Traversal
5. Preorder Traversal
6. Postorder Traversal
7. Total Nodes
8. Leaf Nodes
9. Internal Nodes
10. Height of Tree
11. Mirror Image
12. Exit
"""


class _BadInput(ValueError):
    """A token read from the input is not an integer."""


def _tokens(stream: Iterable[str]) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _ask(prompt: str, tokens: Iterator[str]) -> int:
    """Prompt, then read one integer token; EOFError when input runs out."""
    print(prompt, end="", flush=True)
    token = next(tokens, None)
    if token is None:
        raise EOFError
    try:
        return int(token)
    except ValueError:
        raise _BadInput(token) from None


def _menu(
    tokens: Iterator[str],
    menu: str,
    prompt: str,
    handle: Callable[[int], bool],
    invalid: str | None = None,
    errors: tuple[type[Exception], ...] = (),
) -> None:
    """Show ``menu`` and dispatch choices to ``handle`` until it returns False."""
    while True:
        print(menu, end="")
        try:
            if not handle(_ask(prompt, tokens)):
                return
        except _BadInput:
            if invalid is not None:
                print(invalid)
        except errors as exc:
            print(exc)


def _preorder_nodes(root: Any) -> Iterator[Any]:
    """Yield the nodes of a binary tree in preorder without recursion."""
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        yield node
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def _inorder_nodes(root: Any) -> Iterator[Any]:
    """Yield the nodes of a binary tree in order without recursion."""
    stack: list[Any] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node
        node = node.right


def _postorder_nodes(root: Any) -> Iterator[Any]:
    """Yield the nodes of a binary tree in postorder without recursion."""
    order: list[Any] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        order.append(node)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    yield from reversed(order)


@dataclass(eq=False)
class TreeNode:
    """A node of a binary search tree."""

    data: int
    left: TreeNode | None = None
    right: TreeNode | None = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def _delete(root: TreeNode | None, value: int) -> TreeNode | None:
    """Delete one node holding ``value`` from the subtree and return its new root."""
    parent: TreeNode | None = None
    went_left = False
    node = root
    while node is not None:
        if value < node.data:
            parent, went_left, node = node, True, node.left
        elif value > node.data:
            parent, went_left, node = node, False, node.right
        elif node.left is None or node.right is None:
            child = node.right if node.left is None else node.left
            if parent is None:
                return child
            if went_left:
                parent.left = child
            else:
                parent.right = child
            return root
        else:
            successor = node.right
            while successor.left is not None:
                successor = successor.left
            node.data = value = successor.data
            parent, went_left, node = node, False, node.right
    return root


class BinarySearchTree:
    """An unbalanced binary search tree; equal values go to the right."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.root: TreeNode | None = None
        for value in values:
            self.insert(value)

    def insert(self, value: int) -> TreeNode:
        """Insert ``value`` and return the new node."""
        new = TreeNode(value)
        if self.root is None:
            self.root = new
            return new
        node = self.root
        while True:
            if value < node.data:
                if node.left is None:
                    node.left = new
                    return new
                node = node.left
            else:
                if node.right is None:
                    node.right = new
                    return new
                node = node.right

    def search(self, value: int) -> TreeNode | None:
        """Return the node holding ``value``, or None."""
        node = self.root
        while node is not None and node.data != value:
            node = node.left if value < node.data else node.right
        return node

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.search(value) is not None

    def delete(self, value: int) -> None:
        """Remove one occurrence of ``value``; absent values are ignored."""
        self.root = _delete(self.root, value)

    def smallest(self) -> TreeNode | None:
        """Return the leftmost node, or None for an empty tree."""
        node = self.root
        while node is not None and node.left is not None:
            node = node.left
        return node

    def mirror(self) -> None:
        """Swap the children of every node in place."""
        for node in _preorder_nodes(self.root):
            node.left, node.right = node.right, node.left

    def __len__(self) -> int:
        return sum(1 for _ in _preorder_nodes(self.root))

    def leaf_count(self) -> int:
        return sum(1 for node in _preorder_nodes(self.root) if node.is_leaf)

    def internal_count(self) -> int:
        return sum(1 for node in _preorder_nodes(self.root) if not node.is_leaf)

    def height(self) -> int:
        """Number of levels; an empty tree has height 0."""
        level = [self.root] if self.root is not None else []
        depth = 0
        while level:
            depth += 1
            level = [child for node in level for child in (node.left, node.right) if child is not None]
        return depth

    def inorder(self) -> Iterator[int]:
        return (node.data for node in _inorder_nodes(self.root))

    def preorder(self) -> Iterator[int]:
        return (node.data for node in _preorder_nodes(self.root))

    def postorder(self) -> Iterator[int]:
        return (node.data for node in _postorder_nodes(self.root))

    def clear(self) -> None:
        self.root = None


def _run(tree: BinarySearchTree, choice: int, tokens: Iterator[str]) -> bool:
    match choice:
        case 1:
            tree.insert(_ask("Enter value to insert: ", tokens))
        case 2:
            value = _ask("Enter value to search: ", tokens)
            if value in tree:
                print(f"Value {value} found in BST.")
            else:
                print(f"Value {value} not found.")
        case 3:
            tree.delete(_ask("Enter value to delete: ", tokens))
        case 4:
            print("Inorder:", *tree.inorder())
        case 5:
            print("Preorder:", *tree.preorder())
        case 6:
            print("Postorder:", *tree.postorder())
        case 7:
            print(f"Total nodes = {len(tree)}")
        case 8:
            print(f"Leaf nodes = {tree.leaf_count()}")
        case 9:
            print(f"Internal nodes = {tree.internal_count()}")
        case 10:
            print(f"Height = {tree.height()}")
        case 11:
            tree.mirror()
            print("Mirror image created.")
        case 12:
            tree.clear()
            print("Tree deleted. Exiting.")
            return False
        case _:
            print("Invalid choice.")
    return True


def main(argv: list[str] | None = None) -> int:
    """Run the interactive binary search tree menu on standard input."""
    argparse.ArgumentParser(description="Interactive binary search tree.").parse_args(argv)
    tree = BinarySearchTree()
    tokens = _tokens(sys.stdin)
    try:
        _menu(
            tokens,
            _MENU,
            "Enter your choice: ",
            lambda choice: _run(tree, choice, tokens),
            invalid="Invalid choice.",
        )
    except EOFError:
        print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
"""Circular singly linked list."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from dsakit.bst import _ask, _menu, _tokens

_MENU = """
****MAIN MENU****
1. Create circular ll
2. Display circular ll
3. Insert at the beginning
4. Insert at the end
5. Delete at beginning
6. Delete at end
7. Delete a node after a given node
8. Exit

"""


class CircularListError(Exception):
    """Raised when an operation is not possible on the list as it stands."""


@dataclass(eq=False)
class _Node:
    data: int
    next: _Node | None = None


class CircularLinkedList:
    """A circular list; the last node links back to the first."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._tail: _Node | None = None
        for value in values:
            self.append(value)

    def _nodes(self) -> Iterator[_Node]:
        tail = self._tail
        if tail is None:
            return
        node = tail.next
        while True:
            yield node  # type: ignore[misc]
            if node is tail:
                return
            node = node.next  # type: ignore[union-attr]

    def __iter__(self) -> Iterator[int]:
        """Yield each value once, starting at the head."""
        for node in self._nodes():
            yield node.data

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def push_front(self, value: int) -> None:
        node = _Node(value)
        if self._tail is None:
            node.next = node
            self._tail = node
        else:
            node.next = self._tail.next
            self._tail.next = node

    def append(self, value: int) -> None:
        self.push_front(value)
        self._tail = self._tail.next  # type: ignore[union-attr]

    def pop_front(self) -> int:
        tail = self._tail
        if tail is None:
            raise CircularListError("list is empty")
        head = tail.next
        if head is tail:
            self._tail = None
        else:
            tail.next = head.next  # type: ignore[union-attr]
        return head.data  # type: ignore[union-attr]

    def pop_back(self) -> int:
        tail = self._tail
        if tail is None:
            raise CircularListError("list is empty")
        if tail.next is tail:
            self._tail = None
            return tail.data
        prev = tail.next
        while prev.next is not tail:  # type: ignore[union-attr]
            prev = prev.next  # type: ignore[union-attr]
        prev.next = tail.next  # type: ignore[union-attr]
        self._tail = prev
        return tail.data

    def remove_after(self, value: int) -> int:
        """Remove the node following the first ``value`` and return its data.

        Lists of two nodes or fewer are left untouched.
        """
        if self._tail is None:
            raise CircularListError("linked list is not created")
        if len(self) <= 2:
            raise CircularListError("circular list has only 2 nodes , cannot delete")
        node = next((n for n in self._nodes() if n.data == value), None)
        if node is None:
            raise ValueError(f"node with {value} data not found")
        removed = node.next
        node.next = removed.next  # type: ignore[union-attr]
        if removed is self._tail:
            self._tail = node
        return removed.data  # type: ignore[union-attr]


def _display(lst: CircularLinkedList) -> None:
    if not len(lst):
        print("list is empty")
    else:
        print("".join(f"{value}\t" for value in lst))


def _create(tokens: Iterator[str]) -> CircularLinkedList:
    count = _ask("input no. of nodes:-\n", tokens)
    lst = CircularLinkedList([_ask("input data:-\n", tokens)])
    for i in range(2, count + 1):
        lst.append(_ask(f"input value for node {i}:-\n", tokens))
    print("Linked list is created\n")
    return lst


def main(argv: list[str] | None = None) -> int:
    """Run the interactive circular list menu on standard input."""
    argparse.ArgumentParser(description="Interactive circular linked list.").parse_args(argv)
    tokens = _tokens(sys.stdin)
    state = {"list": CircularLinkedList()}

    def handle(choice: int) -> bool:
        lst = state["list"]
        if choice == 1:
            state["list"] = _create(tokens)
        elif choice == 2:
            _display(lst)
        elif choice == 3:
            lst.push_front(_ask("enter data of new node:\n ", tokens))
            _display(lst)
            print()
        elif choice == 4:
            lst.append(_ask("enter data of new node:\n ", tokens))
            print("element is added at the end")
        elif choice == 5:
            lst.pop_front()
            print("element is deleted\n")
        elif choice == 6:
            lst.pop_back()
            print("element is deleted")
        elif choice == 7:
            if not len(lst):
                raise CircularListError("linked list is not created")
            lst.remove_after(
                _ask("enter value of node after which you want to delete:- ", tokens)
            )
            print("node is deleted")
        elif choice == 8:
            print("exiting the program!")
            return False
        else:
            print("invalid choice")
        return True

    try:
        _menu(
            tokens,
            _MENU,
            "enter your choice:- \n",
            handle,
            invalid="invalid choice",
            errors=(CircularListError, ValueError),
        )
    except EOFError:
        print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
"""Singly linked list with head and tail references."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

_MENU = """
***MAIN MENU***
1. Create a list
2. Display the list
3. Add a node at the beginning
4. Add a node at the end
5. Add a node before a given node
6. Add a node after a given node
7. Delete a node at the beginning
8. Delete a node at the end
9. Delete a given node
10. Delete a node after a given node
11. Delete the entire list
12. sort the list
13. Reverse the list
14. Finding middle element in list
15. Finding cycle in list
16. Exit
"""


class EmptyListError(Exception):
    """Raised when an operation needs a non-empty list."""


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    data: int
    next: ListNode | None = None


def has_cycle(head: ListNode | None) -> bool:
    """Tell whether the chain starting at ``head`` loops back on itself."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next  # type: ignore[union-attr]
        fast = fast.next.next
        if fast is slow:
            return True
    return False


class LinkedList:
    """A singly linked list of integers."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.head: ListNode | None = None
        self.tail: ListNode | None = None
        for value in values:
            self.append(value)

    def _nodes(self) -> Iterator[ListNode]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[int]:
        for node in self._nodes():
            yield node.data

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def _find(self, target: int) -> ListNode:
        if self.head is None:
            raise EmptyListError("List is empty. you cannot delete anything")
        for node in self._nodes():
            if node.data == target:
                return node
        raise ValueError(f"node with {target} data not found")

    def push_front(self, value: int) -> None:
        self.head = ListNode(value, self.head)
        if self.tail is None:
            self.tail = self.head

    def append(self, value: int) -> None:
        node = ListNode(value)
        if self.tail is None:
            self.head = self.tail = node
        else:
            self.tail.next = node
            self.tail = node

    def insert_before(self, target: int, value: int) -> None:
        """Insert ``value`` before the first ``target``; append it if ``target`` is absent."""
        if self.head is None:
            raise EmptyListError("list is empty")
        if self.head.data == target:
            self.push_front(value)
            return
        prev = self.head
        while prev.next is not None and prev.next.data != target:
            prev = prev.next
        node = ListNode(value, prev.next)
        prev.next = node
        if node.next is None:
            self.tail = node

    def insert_after(self, target: int, value: int) -> None:
        """Insert ``value`` after the first ``target``."""
        if self.head is None:
            raise EmptyListError("list is empty")
        node = self._find(target)
        new = ListNode(value, node.next)
        node.next = new
        if node is self.tail:
            self.tail = new

    def pop_front(self) -> int:
        if self.head is None:
            raise EmptyListError("list is empty")
        node = self.head
        self.head = node.next
        if self.head is None:
            self.tail = None
        return node.data

    def pop_back(self) -> int:
        if self.head is None or self.tail is None:
            raise EmptyListError("list is empty")
        value = self.tail.data
        if self.head is self.tail:
            self.clear()
            return value
        prev = self.head
        while prev.next is not self.tail:
            prev = prev.next  # type: ignore[assignment]
        prev.next = None
        self.tail = prev
        return value

    def remove(self, value: int) -> None:
        """Remove the first node holding ``value``."""
        if self.head is None:
            raise EmptyListError("List is empty. you cannot delete anything")
        prev: ListNode | None = None
        for node in self._nodes():
            if node.data == value:
                break
            prev = node
        else:
            raise ValueError(f"node with {value} data not found")
        if prev is None:
            self.head = node.next
        else:
            prev.next = node.next
        if node is self.tail:
            self.tail = prev

    def remove_after(self, value: int) -> int:
        """Remove the node following the first ``value`` and return its data."""
        node = self._find(value)
        removed = node.next
        if removed is None:
            raise ValueError("reached at the end of linked list , cannot delete after node")
        node.next = removed.next
        if removed is self.tail:
            self.tail = node
        return removed.data

    def remove_before(self, value: int) -> int:
        """Remove the node preceding the first ``value`` and return its data."""
        if self.head is None:
            raise EmptyListError("List is empty. you cannot delete anything")
        if self.head.data == value:
            raise ValueError("At the beginning of linked list , cannot delete a node before")
        before: ListNode | None = None
        prev = self.head
        node = prev.next
        while node is not None and node.data != value:
            before, prev, node = prev, node, node.next
        if node is None:
            raise ValueError(f"node with {value} data not found")
        if before is None:
            self.head = node
        else:
            before.next = node
        return prev.data

    def clear(self) -> None:
        self.head = self.tail = None

    def sort(self) -> None:
        """Sort the values in ascending order, keeping the nodes in place."""
        for node, value in zip(list(self._nodes()), sorted(self)):
            node.data = value

    def reverse(self) -> None:
        prev: ListNode | None = None
        node = self.head
        while node is not None:
            node.next, prev, node = prev, node, node.next
        self.head, self.tail = prev, self.head

    def middle(self) -> int:
        """Return the middle value; with an even length, the second of the two."""
        if self.head is None:
            raise EmptyListError("list is empty")
        slow = fast = self.head
        while fast is not None and fast.next is not None:
            slow = slow.next  # type: ignore[assignment]
            fast = fast.next.next
        return slow.data


class _BadInput(Exception):
    pass


def _tokens(stream: Iterable[str]) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _ask(prompt: str, tokens: Iterator[str]) -> int:
    print(prompt, end="", flush=True)
    token = next(tokens, None)
    if token is None:
        raise EOFError
    try:
        return int(token)
    except ValueError:
        raise _BadInput from None


def _ask_node(tokens: Iterator[str]) -> int:
    print("enter newnode details:-")
    return _ask("enter value of newnode to add:- ", tokens)


def _display(lst: LinkedList) -> None:
    if not lst.head:
        print("List is empty")
    for value in lst:
        print(f"Data: {value}")


def _run(lst: LinkedList, choice: int, tokens: Iterator[str]) -> bool:
    match choice:
        case 1:
            count = _ask("Input number of nodes:\n", tokens)
            for i in range(1, count + 1):
                lst.append(_ask(f"enter data for node {i}:- ", tokens))
        case 2:
            print("list:- ")
            _display(lst)
        case 3:
            lst.push_front(_ask_node(tokens))
        case 4:
            lst.append(_ask_node(tokens))
        case 5:
            value = _ask_node(tokens)
            lst.insert_before(_ask("enter data you want to add before a node:-", tokens), value)
        case 6:
            value = _ask_node(tokens)
            lst.insert_after(_ask("enter data after you want to add node:-", tokens), value)
        case 7 | 8:
            (lst.pop_front if choice == 7 else lst.pop_back)()
            print("node is deleted" if lst.head else "now list is empty")
        case 9:
            if lst.head is None:
                raise EmptyListError("List is empty. you cannot delete anything")
            lst.remove(_ask("enter data of node which you want to delete:- ", tokens))
            print("node is deleted")
        case 10:
            if lst.head is None:
                raise EmptyListError("List is empty. you cannot delete anything")
            lst.remove_after(_ask("enter data of node after which you want to delete:- ", tokens))
            print("node is deleted")
        case 11:
            if lst.head is None:
                print("list is already empty")
            else:
                lst.clear()
                print("linked list is deleted")
        case 12:
            if lst.head is None:
                print("list is empty")
            else:
                lst.sort()
                print("list is sorted")
        case 13:
            if lst.head is None:
                print("list is empty")
            else:
                lst.reverse()
                print("list is reversed")
        case 14:
            print(f"the middle element is {lst.middle()} ")
        case 15:
            first = ListNode(_ask_node(tokens))
            second = ListNode(_ask_node(tokens))
            third = ListNode(_ask_node(tokens))
            first.next, second.next, third.next = second, third, second
            if has_cycle(first):
                print("Cycle is found in linked list")
            else:
                print("Cycle is not found in linked list")
        case 16:
            print("exiting program....")
            return False
        case _:
            print("Invalid choice")
    return True


def main(argv: list[str] | None = None) -> int:
    """Run the interactive linked list menu on standard input."""
    argparse.ArgumentParser(description="Interactive singly linked list.").parse_args(argv)
    lst = LinkedList()
    tokens = _tokens(sys.stdin)
    try:
        while True:
            print(_MENU, end="")
            try:
                if not _run(lst, _ask("enter your choice:- ", tokens), tokens):
                    break
            except (EmptyListError, ValueError) as exc:
                print(exc)
            except _BadInput:
                print("Invalid choice")
    except EOFError:
        print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
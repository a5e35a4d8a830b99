"""Stack built on a singly linked list."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from dsakit.bst import _ask, _tokens


class StackUnderflowError(Exception):
    """Raised when popping or peeking an empty stack."""


@dataclass(eq=False)
class _Node:
    data: int
    next: _Node | None = None


class LinkedStack:
    """A linked stack; the first of the initial values is the top."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._top: _Node | None = None
        self._size = 0
        for value in reversed(list(values)):
            self.push(value)

    def push(self, value: int) -> None:
        self._top = _Node(value, self._top)
        self._size += 1

    def pop(self) -> int:
        if self._top is None:
            raise StackUnderflowError("stack underflow , can't pop element")
        node = self._top
        self._top = node.next
        self._size -= 1
        return node.data

    def peek(self) -> int:
        if self._top is None:
            raise StackUnderflowError("stack is empty")
        return self._top.data

    def __iter__(self) -> Iterator[int]:
        node = self._top
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return self._size


def _display(stack: LinkedStack) -> None:
    if not stack:
        print("List is empty")
    for value in stack:
        print(f"Data: {value}")


def main(argv: list[str] | None = None) -> int:
    """Build a stack from standard input, then push, pop and peek once."""
    argparse.ArgumentParser(description="Linked stack demonstration.").parse_args(argv)
    tokens = _tokens(sys.stdin)
    try:
        count = _ask("enter no.of nodes:- ", tokens)
        stack = LinkedStack(
            [_ask(f"enter data for node {i}:- ", tokens) for i in range(1, count + 1)]
        )
        print("linked list is created")
        _display(stack)
        print("enter newnode details:-")
        stack.push(_ask("enter value of newnode to add:- ", tokens))
        print("linked list after push operation:- ")
        _display(stack)
        print("linked list after pop operation:-")
        stack.pop()
        _display(stack)
        try:
            print(f"element at the top is {stack.peek()}")
        except StackUnderflowError as exc:
            print(exc)
    except (EOFError, ValueError):
        print("\ninvalid input")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
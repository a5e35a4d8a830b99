"""Fixed-capacity linear and circular queues."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Iterator

from dsakit.bst import _ask, _menu, _tokens

DEFAULT_CAPACITY = 5


class QueueOverflowError(Exception):
    """Raised when a value is added to a full queue."""


class QueueUnderflowError(Exception):
    """Raised when a value is taken from an empty queue."""


def _check_capacity(capacity: int) -> int:
    if capacity < 1:
        raise ValueError("capacity must be at least 1")
    return capacity


class LinearQueue:
    """Array queue whose slots are only reclaimed once it has been emptied.

    Once ``capacity`` values have been enqueued, further inserts overflow
    until every value has been dequeued again.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self.capacity = _check_capacity(capacity)
        self._slots: list[int] = []
        self._front = 0

    def enqueue(self, value: int) -> None:
        if len(self._slots) == self.capacity:
            raise QueueOverflowError("overflow")
        self._slots.append(value)

    def dequeue(self) -> int:
        if not self:
            raise QueueUnderflowError("underflow")
        value = self._slots[self._front]
        self._front += 1
        if self._front == len(self._slots):
            self._slots.clear()
            self._front = 0
        return value

    def __iter__(self) -> Iterator[int]:
        return iter(self._slots[self._front:])

    def __len__(self) -> int:
        return len(self._slots) - self._front


class CircularQueue:
    """Queue whose slots are reused as soon as values are dequeued."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self.capacity = _check_capacity(capacity)
        self._items: deque[int] = deque()

    def enqueue(self, value: int) -> None:
        if len(self._items) == self.capacity:
            raise QueueOverflowError("overflow")
        self._items.append(value)

    def dequeue(self) -> int:
        if not self._items:
            raise QueueUnderflowError("underflow")
        return self._items.popleft()

    def __iter__(self) -> Iterator[int]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)


def main(argv: list[str] | None = None) -> int:
    """Run the interactive queue menu on standard input."""
    parser = argparse.ArgumentParser(description="Interactive fixed-size queue.")
    parser.add_argument("--circular", action="store_true", help="use a circular queue")
    parser.add_argument("--capacity", type=int, default=DEFAULT_CAPACITY)
    args = parser.parse_args(argv)
    if args.capacity < 1:
        parser.error("capacity must be at least 1")
    queue = (CircularQueue if args.circular else LinearQueue)(args.capacity)
    tokens = _tokens(sys.stdin)

    def handle(choice: int) -> bool:
        if choice == 1:
            num = _ask("enter the no. to be inserted:- \n", tokens)
            queue.enqueue(num)
            print(f"{num} is inserted in queue")
        elif choice == 2:
            print(f"{queue.dequeue()} is deleted from queue")
        elif choice == 3:
            print(*queue, sep="\t ")
        elif choice == 4:
            return False
        else:
            print("invalid choice")
        return True

    print("enter 1 to insert an element")
    print("enter 2 to delete an element")
    print("enter 3 to display")
    print("enter 4 to stop")
    try:
        _menu(
            tokens,
            "",
            "enter choice:- ",
            handle,
            invalid="invalid choice",
            errors=(QueueOverflowError, QueueUnderflowError),
        )
    except EOFError:
        print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
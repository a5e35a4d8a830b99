"""Tower of Hanoi move generator."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class Move:
    disk: int
    source: str
    destination: str

    def __str__(self) -> str:
        return f"Move disk {self.disk} from {self.source} to {self.destination}"


def moves(n: int, source: str = "S", auxiliary: str = "A", destination: str = "D") -> Iterator[Move]:
    """Yield the moves that transfer ``n`` disks from source to destination."""
    if n < 1:
        raise ValueError("number of disks must be at least 1")
    if n == 1:
        yield Move(1, source, destination)
        return
    yield from moves(n - 1, source, destination, auxiliary)
    yield Move(n, source, destination)
    yield from moves(n - 1, auxiliary, source, destination)


def main(argv: list[str] | None = None) -> int:
    """Print the moves for a tower of the given height."""
    parser = argparse.ArgumentParser(description="Solve the Tower of Hanoi.")
    parser.add_argument("disks", nargs="?", type=int, default=2)
    args = parser.parse_args(argv)
    if args.disks < 1:
        parser.error("number of disks must be at least 1")
    for move in moves(args.disks, "S", "A", "D"):
        print(move)
    return 0


if __name__ == "__main__":
    sys.exit(main())
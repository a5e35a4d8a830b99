# dsakit

A small collection of classic data structures and algorithms over integers.
Each one is a plain Python class or function, and each comes with a small
interactive program driven from standard input.

## Modules

- `dsakit.bst`: `BinarySearchTree` (nodes are `TreeNode`). Supports
  `insert`, `search` (returns the node or `None`), `in`, `delete` (absent
  values are ignored), `smallest`, `mirror` (swaps children in place),
  `len()`, `leaf_count`, `internal_count`, `height` (an empty tree has
  height 0), `clear`, and the generators `inorder`, `preorder` and
  `postorder`. Equal values go to the right subtree.
- `dsakit.binary_tree`: `BinaryTree(root_value)`, a plain binary tree whose
  root can be given one left and one right child with `add_left` and
  `add_right`. Adding a child that already exists raises
  `ChildExistsError`. Has `inorder`, `preorder`, `postorder` and `search`.
- `dsakit.hanoi`: `moves(n, source="S", auxiliary="A", destination="D")`
  yields `Move` objects. Each prints as `Move disk 1 from S to D`. It raises
  `ValueError` for fewer than one disk.
- `dsakit.queues`: `LinearQueue` and `CircularQueue`, both of fixed
  `capacity` (default 5), with `enqueue`, `dequeue`, iteration and `len()`.
  A full queue raises `QueueOverflowError`, and an empty one raises
  `QueueUnderflowError`. A `LinearQueue` only gets its slots back once it
  has been emptied completely. A `CircularQueue` can reuse a slot as soon
  as a value has been dequeued.
- `dsakit.stack`: `LinkedStack`, a stack built on linked nodes, with `push`,
  `pop`, `peek`, iteration from the top and `len()`. The first of the
  initial values is the top. `pop` and `peek` on an empty stack raise
  `StackUnderflowError`.
- `dsakit.linked_list`: `LinkedList` (nodes are `ListNode`) with the
  following methods:
  - `push_front` and `append`
  - `insert_before` and `insert_after`
  - `pop_front` and `pop_back`
  - `remove`, `remove_after` and `remove_before`
  - `clear`, `sort` and `reverse`
  - `middle`, which gives the second of the two middle values when the
    length is even

  Operations on an empty list raise `EmptyListError`. A value that is
  missing, or a removal with no neighbour to remove, raises `ValueError`.
  The function `has_cycle(head)` tells whether a chain of `ListNode`s loops
  back on itself.
- `dsakit.circular_list`: `CircularLinkedList`, whose last node links back
  to the first. It has `push_front`, `append`, `pop_front`, `pop_back`,
  `remove_after`, iteration (each value once) and `len()`. Each of these
  raises `CircularListError`:
  - removing from an empty list
  - calling `remove_after` on a list of two nodes or fewer

## Installation

```
pip install dsakit
```

No third-party libraries are needed.

## Using the library

```python
from dsakit.bst import BinarySearchTree

tree = BinarySearchTree([50, 30, 70, 20, 40])
tree.insert(60)
print(60 in tree)            # True
print(list(tree.inorder()))  # [20, 30, 40, 50, 60, 70]
tree.delete(30)
print(len(tree), tree.height())  # 5 3
```

```python
from dsakit.queues import CircularQueue

queue = CircularQueue(5)
for value in (1, 2, 3):
    queue.enqueue(value)
print(queue.dequeue())  # 1
print(list(queue))      # [2, 3]
```

```python
from dsakit.hanoi import moves

for move in moves(3, "S", "A", "D"):
    print(move)
```

```python
from dsakit.linked_list import LinkedList

items = LinkedList([5, 3, 9, 1])
items.sort()
items.reverse()
print(list(items), items.middle())  # [9, 5, 3, 1] 3
```

## Interactive programs

Each program reads whitespace-separated integers from standard input. It
stops when you choose the exit option or when the input runs out.

```
dsakit-bst        # binary search tree menu
dsakit-tree       # build a root with left/right children, then traverse and search
dsakit-hanoi 3    # print the moves for 3 disks (default 2)
dsakit-queue      # linear queue menu; add --circular and/or --capacity N
dsakit-stack      # build a stack, push one value, pop once, peek
dsakit-list       # singly linked list menu
dsakit-circular   # circular linked list menu
```

## Limits

All structures live in memory only. Nothing is saved between runs, and the
interactive programs keep no history. The trees are not self-balancing.

## Running the tests

```
pip install "dsakit[test]"
pytest
```
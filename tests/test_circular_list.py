import io

import pytest

from dsakit.circular_list import CircularLinkedList, CircularListError, main


@pytest.mark.parametrize("values", [[], [7], [4, 8, 15, 16]])
def test_iteration_visits_each_value_once(values):
    lst = CircularLinkedList(values)
    assert list(lst) == values
    assert len(lst) == len(values)


@pytest.mark.parametrize(
    ("initial", "front", "back", "expected"),
    [
        ([2], [1], [3], [1, 2, 3]),
        ([], [9], [], [9]),
        ([], [], [4, 5], [4, 5]),
    ],
)
def test_push_front_and_append(initial, front, back, expected):
    lst = CircularLinkedList(initial)
    for value in front:
        lst.push_front(value)
    for value in back:
        lst.append(value)
    assert list(lst) == expected


def test_pops_until_empty():
    lst = CircularLinkedList([1, 2, 3])
    popped = [lst.pop_front(), lst.pop_back()]
    assert popped == [1, 3]
    assert list(lst) == [2]
    assert lst.pop_back() == 2
    assert len(lst) == 0


@pytest.mark.parametrize("method", ["pop_front", "pop_back"])
def test_pop_empty_raises(method):
    with pytest.raises(CircularListError):
        getattr(CircularLinkedList(), method)()


@pytest.mark.parametrize(
    ("values", "target", "removed", "remaining"),
    [
        ([1, 2, 3, 4], 2, 3, [1, 2, 4]),
        ([1, 2, 3], 3, 1, [2, 3]),
        ([1, 2, 3], 2, 3, [1, 2]),
    ],
)
def test_remove_after(values, target, removed, remaining):
    lst = CircularLinkedList(values)
    assert lst.remove_after(target) == removed
    assert list(lst) == remaining


def test_remove_after_tail_then_append_keeps_order():
    lst = CircularLinkedList([1, 2, 3])
    lst.remove_after(2)
    lst.append(7)
    assert list(lst) == [1, 2, 7]


@pytest.mark.parametrize(
    ("stdin", "fragments"),
    [
        (
            "1 3 10 20 30 3 5 2 8",
            ["Linked list is created", "5\t10\t20\t30\t", "exiting the program!"],
        ),
        ("5 42 8", ["list is empty", "invalid choice"]),
    ],
)
def test_main(monkeypatch, capsys, stdin, fragments):
    monkeypatch.setattr("sys.stdin", io.StringIO(stdin))
    assert main([]) == 0
    out = capsys.readouterr().out
    for fragment in fragments:
        assert fragment in out
import pytest

from dsakit.hanoi import Move, main, moves


def test_two_disks():
    assert list(moves(2, "S", "A", "D")) == [
        Move(1, "S", "A"),
        Move(2, "S", "D"),
        Move(1, "A", "D"),
    ]


def test_move_text():
    assert str(Move(1, "S", "D")) == "Move disk 1 from S to D"


def test_single_disk():
    assert list(moves(1, "X", "Y", "Z")) == [Move(1, "X", "Z")]


@pytest.mark.parametrize("n", range(1, 8))
def test_moves_are_legal_and_complete(n):
    pegs = {"S": list(range(n, 0, -1)), "A": [], "D": []}
    for move in moves(n, "S", "A", "D"):
        assert pegs[move.source][-1] == move.disk
        disk = pegs[move.source].pop()
        assert not pegs[move.destination] or pegs[move.destination][-1] > disk
        pegs[move.destination].append(disk)
    assert pegs["D"] == list(range(n, 0, -1))
    assert pegs["S"] == pegs["A"] == []


@pytest.mark.parametrize("n", [0, -3])
def test_invalid_count(n):
    with pytest.raises(ValueError):
        list(moves(n))


def test_main_default(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [str(m) for m in moves(2, "S", "A", "D")]


def test_main_rejects_zero():
    with pytest.raises(SystemExit):
        main(["0"])
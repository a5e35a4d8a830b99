import io

import pytest

from dsakit.binary_tree import BinaryTree, ChildExistsError, main


@pytest.fixture
def tree():
    t = BinaryTree(1)
    t.add_left(2)
    t.add_right(3)
    return t


def test_inorder(tree):
    assert list(tree.inorder()) == [2, 1, 3]


def test_preorder(tree):
    assert list(tree.preorder()) == [1, 2, 3]


def test_postorder(tree):
    assert list(tree.postorder()) == [2, 3, 1]


def test_traversals_visit_same_values(tree):
    assert sorted(tree.inorder()) == sorted(tree.preorder()) == sorted(tree.postorder())


def test_single_node_traversals():
    t = BinaryTree(7)
    assert list(t.inorder()) == list(t.preorder()) == list(t.postorder()) == [7]


def test_add_returns_child(tree):
    assert tree.root.left.value == 2
    assert tree.root.right.value == 3


def test_add_left_twice_raises(tree):
    with pytest.raises(ChildExistsError):
        tree.add_left(9)
    assert tree.root.left.value == 2


def test_add_right_twice_raises(tree):
    with pytest.raises(ChildExistsError):
        tree.add_right(9)


def test_search(tree):
    assert tree.search(3) is tree.root.right
    assert tree.search(42) is None


def test_search_finds_first_in_preorder():
    t = BinaryTree(5)
    t.add_left(5)
    assert t.search(5) is t.root


def test_main_session(monkeypatch, capsys):
    data = "10 1 5 1 2 7 3 1 4 7 4 9 5\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(data))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Root node is created" in out
    assert "Left node already exists." in out
    assert "Node with value 7 found!" in out
    assert "Node with value 9 not found in the tree." in out
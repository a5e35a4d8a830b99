import io

import pytest

from dsakit.bst import BinarySearchTree, main

VALUES = [50, 30, 70, 20, 40, 60, 80]


@pytest.fixture
def tree():
    return BinarySearchTree(VALUES)


def test_inorder_is_sorted(tree):
    assert list(tree.inorder()) == sorted(VALUES)


def test_preorder_of_complete_tree(tree):
    assert list(tree.preorder()) == [50, 30, 20, 40, 70, 60, 80]


def test_postorder_ends_with_root(tree):
    post = list(tree.postorder())
    assert post[-1] == VALUES[0]
    assert sorted(post) == sorted(VALUES)


def test_counts(tree):
    assert len(tree) == len(VALUES)
    assert tree.leaf_count() == 4
    assert tree.leaf_count() + tree.internal_count() == len(tree)


def test_empty_tree():
    empty = BinarySearchTree()
    assert empty.height() == 0
    assert len(empty) == empty.leaf_count() == empty.internal_count()
    assert empty.smallest() is None
    assert list(empty.inorder()) == []


def test_chain_height_equals_size():
    values = list(range(2000))
    chain = BinarySearchTree(values)
    assert chain.height() == len(values)
    assert list(chain.inorder()) == values
    assert len(chain) == len(values)


def test_search(tree):
    assert tree.search(40).data == 40
    assert tree.search(45) is None
    assert 60 in tree
    assert 61 not in tree


def test_smallest(tree):
    assert tree.smallest().data == min(VALUES)


@pytest.mark.parametrize("value", [20, 60, 30, 50, 70])
def test_delete_keeps_order(tree, value):
    tree.delete(value)
    expected = sorted(VALUES)
    expected.remove(value)
    assert list(tree.inorder()) == expected
    assert value not in tree


def test_delete_missing_is_noop(tree):
    tree.delete(99)
    assert list(tree.inorder()) == sorted(VALUES)


def test_delete_only_node():
    single = BinarySearchTree([5])
    single.delete(5)
    assert single.root is None


def test_duplicates_kept_and_removed_one_at_a_time():
    dup = BinarySearchTree([5, 3, 5, 5])
    assert list(dup.inorder()) == sorted([5, 3, 5, 5])
    dup.delete(5)
    assert list(dup.inorder()).count(5) == 2


def test_mirror_reverses_inorder(tree):
    tree.mirror()
    assert list(tree.inorder()) == sorted(VALUES, reverse=True)
    tree.mirror()
    assert list(tree.inorder()) == sorted(VALUES)


def test_clear(tree):
    tree.clear()
    assert len(tree) == len(BinarySearchTree())


def test_main_session(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1 5 1 3 2 3 2 9 4 12\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Value 3 found in BST." in out
    assert "Value 9 not found." in out
    assert "Inorder: 3 5" in out
    assert "Tree deleted. Exiting." in out


def test_main_invalid_choice(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("42\n"))
    main([])
    assert "Invalid choice." in capsys.readouterr().out
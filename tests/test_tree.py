import functools

import pytest

from rosezip import InvalidChild, Tree, build, unfold
from rosezip._lib.tree import all_trees, empty, is_tree


def payloads(trees):
    return [tree.payload for tree in trees]


def test_build_wraps_children():
    tree = build(1, [2, build(3, [4])])
    assert tree.children[0] == Tree(2, ())
    assert tree.children[1].children == (Tree(4, ()),)


def test_kinds():
    assert empty().is_empty()
    assert not empty().is_leaf()
    assert build(None).is_empty()
    assert build(1).is_leaf()
    assert build(1, [2]).is_parent()
    assert not build(1, [2]).is_leaf()


def test_shape_checks():
    assert is_tree(build(1))
    assert not is_tree((1, ()))
    assert all_trees([])
    assert not all_trees([build(1), 2])


def test_empty_tree_is_truthy():
    assert empty()


def test_payload():
    tree = build(1, [2])
    assert tree.set_payload(5).payload == 5
    assert tree.map_payload(lambda p: p * 10).payload == 10
    assert tree.payload == 1


def test_set_children_wraps():
    tree = build(1).set_children([2, build(3)])
    assert tree.children == (Tree(2, ()), Tree(3, ()))


def test_map_children():
    tree = build(1, [2, 3]).map_children(
        lambda c: c.map_payload(lambda p: p + 1),
    )
    assert payloads(tree.children) == [3, 4]


def test_map_children_must_return_trees():
    tree = build(1, [2, 3])
    with pytest.raises(InvalidChild):
        tree.map_children(lambda c: c.payload)
    assert payloads(tree.children) == [2, 3]


def test_invalid_child_is_both_kinds_of_error():
    assert issubclass(InvalidChild, ValueError)


def test_has_child():
    tree = build(1, [2, 3])
    assert tree.has_child(lambda c: c.payload == 3)
    assert not tree.has_child(lambda c: c.payload == 4)
    assert not build(1).has_child(lambda c: True)


def test_prepend_and_append_child():
    tree = build(0, [2])
    assert payloads(tree.prepend_child(1).children) == [1, 2]
    assert payloads(tree.append_child(build(3)).children) == [2, 3]


def test_insert_child():
    tree = build(0, [1, 2, 3])
    assert payloads(tree.insert_child(9, 1).children) == [1, 9, 2, 3]
    assert payloads(tree.insert_child(9, 0).children) == [9, 1, 2, 3]


def test_insert_child_clamps():
    tree = build(0, [1, 2, 3])
    assert payloads(tree.insert_child(9, 10).children) == [1, 2, 3, 9]
    assert payloads(tree.insert_child(9, -10).children) == [9, 1, 2, 3]


def test_insert_child_negative_index():
    tree = build(0, [1, 2, 3])
    assert payloads(tree.insert_child(9, -1).children) == [1, 2, 9, 3]


def test_remove_child():
    tree, removed = build(0, [8, 6, 4, 2]).remove_child(2)
    assert payloads(tree.children) == [8, 6, 2]
    assert removed == Tree(4, ())


def test_remove_child_negative_index():
    tree, removed = build(0, [8, 6, 4, 2]).remove_child(-1)
    assert payloads(tree.children) == [8, 6, 4]
    assert removed.payload == 2


@pytest.mark.parametrize('index', [4, 10, -5])
def test_remove_child_out_of_range(index):
    tree = build(0, [8, 6, 4, 2])
    assert tree.remove_child(index) == (tree, None)


def test_pop_children():
    tree = build(0, [1, 2, 3])
    rest, first = tree.pop_first_child()
    assert first.payload == 1
    assert payloads(rest.children) == [2, 3]

    rest, last = tree.pop_last_child()
    assert last.payload == 3
    assert payloads(rest.children) == [1, 2]

    leaf = build(0)
    assert leaf.pop_first_child() == (leaf, None)
    assert leaf.pop_last_child() == (leaf, None)


def expand(x):
    return str(x), range(x)


def test_unfold():
    # every seed expands into its own node: 3:{0, 1:{0}, 2:{0, 1:{0}}}
    tree = unfold(3, expand)
    assert tree.payload == '3'
    assert payloads(tree.children) == ['0', '1', '2']
    assert tree.children[2] == build('2', [build('0'), build('1', ['0'])])
    assert tree.count() == 8


def test_unfold_leaf():
    assert unfold(3, lambda x: (x, [])) == Tree(3, ())


def test_unfold_deep_tree_doesnt_recurse():
    tree = unfold(5000, lambda x: (x, [x - 1] if x else []))
    assert tree.count() == 5001


def test_preorder_iter():
    tree = build(1, [build(2, [3, 4]), build(5, [build(6, [7])]), 8])
    assert list(tree.preorder_iter()) == [1, 2, 3, 4, 5, 6, 7, 8]


def test_preorder_iter_is_lazy_and_restartable():
    tree = build(1, [2, 3])
    it = tree.preorder_iter()
    assert next(it) == 1
    assert list(tree.preorder_iter()) == [1, 2, 3]
    assert list(it) == [2, 3]


def test_preorder_iter_with_sequence_tools():
    tree = unfold(3, expand)
    total = functools.reduce(
        lambda acc, p: acc + int(p), tree.preorder_iter(), 0,
    )
    assert total == 7
    assert '2' in tree.preorder_iter()
    assert '7' not in tree.preorder_iter()


def test_empty_tree_has_nothing_to_iterate():
    assert list(empty().preorder_iter()) == []
    assert empty().count() == 0


def test_membership_looks_at_every_payload():
    tree = build(1, [build(2, [3]), 4])
    assert 4 in tree
    assert 3 in tree
    assert 1 in tree
    assert 5 not in tree
    assert tree.children not in tree


def test_membership_of_the_empty_tree():
    assert None not in empty()
    assert 1 not in empty()


def test_membership_keeps_replace_working():
    tree = build(1, [2])
    assert tree._replace(payload=9) == build(9, [2])
    assert 9 not in tree

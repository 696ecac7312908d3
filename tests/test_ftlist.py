import pytest

from sollong.ftlist import (
    Node,
    iter_nodes,
    lst_add_back,
    lst_add_front,
    lst_clear,
    lst_del_one,
    lst_iter,
    lst_last,
    lst_map,
    lst_new,
    lst_size,
)


def build(items):
    head = None
    for item in items:
        head = lst_add_back(head, lst_new(item))
    return head


def test_lst_new_holds_content_and_no_link():
    node = lst_new("abc")
    assert node.content == "abc"
    assert node.next is None


def test_add_back_keeps_order():
    items = ["a", "b", "c", "d"]
    head = build(items)
    assert list(head) == items


def test_add_front_reverses_order():
    items = [1, 2, 3]
    head = None
    for item in items:
        head = lst_add_front(head, lst_new(item))
    assert list(head) == list(reversed(items))


def test_add_front_missing_node_raises():
    with pytest.raises(ValueError):
        lst_add_front(None, None)


def test_add_back_to_empty_returns_node():
    node = lst_new(5)
    assert lst_add_back(None, node) is node


def test_add_back_missing_node_keeps_head():
    head = build([1, 2])
    assert lst_add_back(head, None) is head
    assert lst_size(head) == 2


def test_size_matches_items():
    items = list(range(7))
    assert lst_size(build(items)) == len(items)
    assert lst_size(None) == 0


def test_last():
    items = ["x", "y", "z"]
    head = build(items)
    assert lst_last(head).content == items[-1]
    assert lst_last(None) is None


def test_iter_nodes_yields_nodes_in_order():
    head = build([10, 20, 30])
    nodes = list(iter_nodes(head))
    assert nodes[0] is head
    assert [n.content for n in nodes] == [10, 20, 30]
    assert nodes[-1].next is None


def test_lst_iter_visits_all_contents():
    seen = []
    items = ["p", "q", "r"]
    lst_iter(build(items), seen.append)
    assert seen == items


def test_lst_map_applies_func_and_keeps_original():
    items = [1, 2, 3]
    head = build(items)
    mapped = lst_map(head, lambda value: value * 10, lambda value: None)
    assert list(mapped) == [value * 10 for value in items]
    assert list(head) == items
    assert mapped is not head


def test_lst_map_missing_arguments_gives_none():
    head = build([1])
    assert lst_map(None, str, print) is None
    assert lst_map(head, None, print) is None
    assert lst_map(head, str, None) is None


def test_lst_map_failure_releases_partial_list():
    released = []

    def func(value):
        if value == 3:
            raise RuntimeError("boom")
        return value

    with pytest.raises(RuntimeError):
        lst_map(build([1, 2, 3]), func, released.append)
    assert sorted(released) == [1, 2]


def test_del_one_calls_delete_and_unlinks():
    released = []
    head = build(["a", "b"])
    lst_del_one(head, released.append)
    assert released == ["a"]
    assert head.next is None


def test_del_one_without_delete_does_nothing():
    head = build(["a", "b"])
    lst_del_one(head, None)
    assert list(head) == ["a", "b"]


def test_clear_releases_last_to_first():
    released = []
    items = [1, 2, 3]
    assert lst_clear(build(items), released.append) is None
    assert released == list(reversed(items))


def test_clear_without_delete_keeps_list():
    head = build([1, 2])
    assert lst_clear(head, None) is head
    assert list(head) == [1, 2]


def test_node_iteration_single():
    assert list(Node("only")) == ["only"]
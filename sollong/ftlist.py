"""Singly linked list of arbitrary contents.

Functions that would rewrite the caller's head pointer return the new
head instead.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False)
class Node:
    """One list cell holding a value and a link to the next cell."""

    content: Any
    next: Node | None = field(default=None, repr=False)

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in iter_nodes(self))


def iter_nodes(head: Node | None) -> Iterator[Node]:
    """Yield each node of the list starting at head."""
    node = head
    while node is not None:
        yield node
        node = node.next


def lst_new(content: Any) -> Node:
    """Return a single unlinked node holding content."""
    return Node(content)


def lst_add_front(head: Node | None, node: Node) -> Node:
    """Put node in front of head and return it as the new head."""
    if node is None:
        raise ValueError("lst_add_front: missing node")
    node.next = head
    return node


def lst_add_back(head: Node | None, node: Node | None) -> Node | None:
    """Append node after the last node and return the head.

    An empty list becomes node itself; a missing node leaves head unchanged.
    """
    if node is None:
        return head
    if head is None:
        return node
    last = lst_last(head)
    assert last is not None
    last.next = node
    return head


def lst_size(head: Node | None) -> int:
    """Number of nodes in the list."""
    return sum(1 for _ in iter_nodes(head))


def lst_last(head: Node | None) -> Node | None:
    """Last node of the list, or None for an empty list."""
    last = None
    for last in iter_nodes(head):
        pass
    return last


def lst_iter(head: Node | None, func: Callable[[Any], Any]) -> None:
    """Call func on the content of every node, front to back."""
    for node in iter_nodes(head):
        func(node.content)


def lst_map(
    head: Node | None,
    func: Callable[[Any], Any] | None,
    delete: Callable[[Any], Any] | None,
) -> Node | None:
    """Build a new list from func applied to each content.

    Returns None when the list, func or delete is missing. If func fails
    part way, the contents already built are released with delete and the
    error propagates.
    """
    if head is None or func is None or delete is None:
        return None
    new_head: Node | None = None
    tail: Node | None = None
    try:
        for node in iter_nodes(head):
            cell = Node(func(node.content))
            if tail is None:
                new_head = cell
            else:
                tail.next = cell
            tail = cell
    except Exception:
        lst_clear(new_head, delete)
        raise
    return new_head


def lst_del_one(node: Node | None, delete: Callable[[Any], Any] | None) -> None:
    """Release one node's content with delete and unlink the node."""
    if node is None or delete is None:
        return
    delete(node.content)
    node.content = None
    node.next = None


def lst_clear(
    head: Node | None, delete: Callable[[Any], Any] | None
) -> Node | None:
    """Release every node, last to first, and return the emptied head (None).

    Without a delete function the list is left untouched and returned.
    """
    if delete is None:
        return head
    for node in reversed(list(iter_nodes(head))):
        lst_del_one(node, delete)
    return None
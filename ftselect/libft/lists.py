"""A singly linked list of byte payloads."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterator, Optional, Union

Payload = Union[bytes, bytearray, memoryview]


@dataclass
class Node:
    """One list element holding a copy of its content and that content's size."""

    content: Optional[bytes] = None
    content_size: int = 0
    next: Optional["Node"] = None

    def __iter__(self) -> Iterator["Node"]:
        node: Optional[Node] = self
        while node is not None:
            yield node
            node = node.next


def lstnew(content: Optional[Payload]) -> Node:
    """A new node with a copy of ``content``; empty or missing content gives None."""
    if content is None or len(content) == 0:
        return Node()
    data = bytes(content)
    return Node(data, len(data))


def lstadd(head: Optional[Node], node: Optional[Node]) -> Optional[Node]:
    """Put ``node`` in front of ``head``; returns the new head."""
    if node is None:
        return head
    node.next = head
    return node


def lstdelone(
    node: Optional[Node], delete: Optional[Callable[[Optional[bytes], int], None]]
) -> None:
    """Hand the node's content and size to ``delete`` and empty the node."""
    if node is None or delete is None:
        return
    delete(node.content, node.content_size)
    node.content = None
    node.content_size = 0
    node.next = None


def lstdel(
    head: Optional[Node], delete: Optional[Callable[[Optional[bytes], int], None]]
) -> None:
    """Delete every node from ``head`` onwards, in list order."""
    if head is None or delete is None:
        return
    for node in list(head):
        lstdelone(node, delete)


def lstiter(head: Optional[Node], f: Optional[Callable[[Node], None]]) -> None:
    """Call ``f`` on every node from ``head`` onwards."""
    if head is None or f is None:
        return
    for node in head:
        f(node)


def lstmap(
    head: Optional[Node], f: Optional[Callable[[Node], Optional[Node]]]
) -> Optional[Node]:
    """A new list of the nodes ``f`` makes from each node.

    If ``f`` fails to make a node for any element, nothing is returned.
    """
    if head is None or f is None:
        return None
    made = []
    for node in head:
        result = f(node)
        if result is None:
            return None
        made.append(Node(result.content, result.content_size))
    new_head: Optional[Node] = None
    for node in reversed(made):
        new_head = lstadd(new_head, node)
    return new_head
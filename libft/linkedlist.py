"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

Deleter = Optional[Callable[[Any], Any]]


@dataclass(eq=False)
class Node:
    """One link of a list: a content and the node after it."""

    content: Any = None
    next: Optional[Node] = None

    def release(self, delete: Deleter = None) -> None:
        """Hand the content to *delete* and detach this node."""
        if delete is not None:
            delete(self.content)
        self.content = None
        self.next = None


class LinkedList:
    """A singly linked list held by its first node."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        tail: Optional[Node] = None
        for item in items:
            node = Node(item)
            if tail is None:
                self.head = node
            else:
                tail.next = node
            tail = node

    @staticmethod
    def _check_node(node: Any) -> None:
        if not isinstance(node, Node):
            raise TypeError(f"expected a Node, got {type(node).__name__}")

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            following = node.next
            yield node
            node = following

    def push_front(self, node: Node) -> None:
        """Make *node* the first node of the list."""
        self._check_node(node)
        node.next = self.head
        self.head = node

    def push_back(self, node: Node) -> None:
        """Attach *node* (and any nodes after it) at the end of the list."""
        self._check_node(node)
        last = self.last()
        if last is None:
            self.head = node
        else:
            last.next = node

    def last(self) -> Optional[Node]:
        """Return the final node, or None for an empty list."""
        last = None
        for last in self._nodes():
            pass
        return last

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def clear(self, delete: Deleter = None) -> None:
        """Release every node in order, passing each content to *delete*."""
        for node in self._nodes():
            node.release(delete)
        self.head = None

    def iterate(self, f: Callable[[Any], Any]) -> None:
        """Call *f* on every content, in order."""
        for content in self:
            f(content)

    def map(self, f: Callable[[Any], Any], delete: Deleter = None) -> LinkedList:
        """Return a new list holding ``f(content)`` for every content.

        If *f* raises, the contents built so far are passed to *delete*
        and the error propagates.
        """
        result = LinkedList()
        tail: Optional[Node] = None
        try:
            for content in self:
                node = Node(f(content))
                if tail is None:
                    result.head = node
                else:
                    tail.next = node
                tail = node
        except BaseException:
            result.clear(delete)
            raise
        return result
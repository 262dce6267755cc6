"""A singly linked list of nodes holding arbitrary content."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional

Deleter = Optional[Callable[[Any], Any]]


@dataclass(eq=False)
class Node:
    """One link of a list: its content and the node after it."""

    content: Any
    next: Optional["Node"] = None

    def __repr__(self) -> str:
        return f"Node({self.content!r})"


def delete_one(node: Optional[Node], delete: Deleter) -> None:
    """Release ``node``: pass its content to ``delete`` and unlink it."""
    if node is None or delete is None:
        return
    delete(node.content)
    node.content = None
    node.next = None


class LinkedList:
    """A singly linked list starting at ``head``."""

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self.head: Optional[Node] = None
        if items is not None:
            for item in items:
                self.add_back(Node(item))

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def add_front(self, node: Optional[Node]) -> None:
        """Put ``node`` at the start of the list."""
        if node is None:
            return
        node.next = self.head
        self.head = node

    def add_back(self, node: Optional[Node]) -> None:
        """Attach ``node`` after the last node of the list."""
        if node is None:
            return
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def last(self) -> Optional[Node]:
        """The last node, or None for an empty list."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def clear(self, delete: Deleter = None) -> None:
        """Remove every node, passing each content to ``delete`` when given."""
        node = self.head
        while node is not None:
            following = node.next
            if delete is not None:
                delete(node.content)
            node.content = None
            node.next = None
            node = following
        self.head = None

    def iterate(self, func: Optional[Callable[[Any], Any]]) -> None:
        """Call ``func`` on the content of each node in order."""
        if func is None:
            return
        for content in self:
            func(content)

    def map(self, func: Callable[[Any], Any], delete: Deleter = None) -> "LinkedList":
        """Return a new list of ``func`` applied to each content.

        If ``func`` returns None, the nodes built so far are cleared with
        ``delete`` and ValueError is raised.
        """
        result = LinkedList()
        for content in self:
            new_content = func(content)
            if new_content is None:
                result.clear(delete)
                raise ValueError("mapping function returned None")
            result.add_back(Node(new_content))
        return result
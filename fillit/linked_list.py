"""A singly linked list of arbitrary values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, List, Optional, TextIO

from fillit.output import putendl
from fillit.text_build import strsplit

__all__ = ["Node", "LinkedList", "split_to_list"]


@dataclass
class Node:
    """One link of a :class:`LinkedList`."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list that keeps only a reference to its first node."""

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self.head: Optional[Node] = None
        for item in items or ():
            self.add_back(item)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            following = node.next
            yield node
            node = following

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def add_front(self, content: Any) -> Node:
        """Put ``content`` in a new node at the front and return the node."""
        self.head = Node(content, self.head)
        return self.head

    def add_back(self, content: Any) -> Node:
        """Put ``content`` in a new node at the back and return the node."""
        node = Node(content)
        if self.head is None:
            self.head = node
        else:
            tail = self.head
            while tail.next is not None:
                tail = tail.next
            tail.next = node
        return node

    def last(self) -> Any:
        """The content of the last node; IndexError when the list is empty."""
        if self.head is None:
            raise IndexError("last() of an empty list")
        tail = self.head
        while tail.next is not None:
            tail = tail.next
        return tail.content

    def pop_front(self, on_delete: Optional[Callable[[Any], None]] = None) -> Any:
        """Remove the first node and return its content.

        ``on_delete`` is called with the content before it is returned.
        Raises IndexError when the list is empty.
        """
        if self.head is None:
            raise IndexError("pop_front() from an empty list")
        node = self.head
        self.head = node.next
        node.next = None
        if on_delete is not None:
            on_delete(node.content)
        return node.content

    def clear(self, on_delete: Optional[Callable[[Any], None]] = None) -> None:
        """Remove every node, calling ``on_delete`` on each content in order."""
        while self.head is not None:
            self.pop_front(on_delete)

    def each(self, f: Callable[[Any], None]) -> None:
        """Call ``f`` on every content from front to back."""
        for node in self._nodes():
            f(node.content)

    def map(self, f: Callable[[Any], Any]) -> "LinkedList":
        """A new list holding ``f`` of every content, in the same order."""
        return LinkedList(f(content) for content in self)

    def print_strings(self, file: Optional[TextIO] = None) -> None:
        """Write each content on its own line, stopping at the first None."""
        for content in self:
            if content is None:
                break
            putendl(content, file)


def split_to_list(s: str, c: str) -> LinkedList:
    """A list of the non-empty words of ``s`` separated by the character ``c``."""
    words: List[str] = strsplit(s, c)
    return LinkedList(words)
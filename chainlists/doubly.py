"""A doubly linked list."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional, TextIO

from chainlists.errors import EmptyListError, IntegrityError
from chainlists.singly import _check_sortable


@dataclass(eq=False, repr=False, slots=True)
class Node:
    """A node holding one value and links to its neighbours."""

    value: Any
    next: Optional[Node] = None
    prev: Optional[Node] = None

    def __repr__(self) -> str:
        return f"Node({self.value!r})"


class DoublyLinkedList:
    """A list of values linked in both directions, with head and tail."""

    _separator = " <-> "

    def __init__(self, values: Optional[Iterable[Any]] = None) -> None:
        self.head: Optional[Node] = None
        self.tail: Optional[Node] = None
        self._size = 0
        if values is not None:
            self.from_iterable(values)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def _node_at(self, index: int) -> Node:
        node = self.head
        for _ in range(index):
            node = node.next
        return node

    def _unlink(self, node: Node) -> Any:
        """Detach a node that is not the head."""
        node.prev.next = node.next
        if node.next is not None:
            node.next.prev = node.prev
        self._size -= 1
        return node.value

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.value

    def __reversed__(self) -> Iterator[Any]:
        node = self.tail
        while node is not None:
            yield node.value
            node = node.prev

    def __contains__(self, value: Any) -> bool:
        return any(item == value for item in self)

    def __str__(self) -> str:
        return self._separator.join(map(str, self))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_list()!r})"

    def is_empty(self) -> bool:
        """Return True if the list holds no elements."""
        return self._size == 0

    def clear(self) -> None:
        """Remove every element."""
        self.head = None
        self.tail = None
        self._size = 0

    def to_list(self) -> list:
        """Return the values as a Python list, head first."""
        return list(self)

    def from_iterable(self, values: Iterable[Any]) -> None:
        """Replace the contents with the given values."""
        if values is None:
            raise TypeError("cannot create list from None")
        items = list(values)
        self.clear()
        for value in items:
            self.append(value)

    def merge(self, other: Iterable[Any]) -> None:
        """Append every value of other to this list."""
        if other is None:
            raise TypeError("cannot merge with None")
        for value in list(other):
            self.append(value)

    def get(self, index: int) -> Any:
        """Return the value at index."""
        if not 0 <= index < self._size:
            raise IndexError("index out of bounds")
        return self._node_at(index).value

    def unique(self) -> None:
        """Remove repeated values, keeping the first occurrence of each."""
        if self.head is None:
            raise EmptyListError("list is empty")
        node = self.head
        seen = {node.value}
        while node.next is not None:
            if node.next.value in seen:
                node.next = node.next.next
                if node.next is not None:
                    node.next.prev = node
                self._size -= 1
            else:
                seen.add(node.next.value)
                node = node.next
        self.tail = node

    def sort(self) -> None:
        """Sort in ascending order; values must be all int, all str or all float."""
        if self._size <= 1:
            return
        values = self.to_list()
        _check_sortable(values)
        for node, value in zip(self._nodes(), sorted(values)):
            node.value = value

    def format_reverse(self) -> str:
        """Return the values from tail to head, joined by double arrows."""
        return self._separator.join(map(str, reversed(self)))

    def print(self, file: Optional[TextIO] = None) -> None:
        """Write the values from head to tail on one line."""
        print(str(self), file=file)

    def print_reverse(self, file: Optional[TextIO] = None) -> None:
        """Write the values from tail to head on one line."""
        print(self.format_reverse(), file=file)

    def prepend(self, value: Any) -> None:
        """Add a value at the front."""
        node = Node(value, self.head)
        if self.head is not None:
            if self.head.prev is not None:
                raise IntegrityError("head node's prev pointer is not None")
            self.head.prev = node
        else:
            if self.tail is not None:
                raise IntegrityError("inconsistent list state: head is None but tail is not")
            self.tail = node
        self.head = node
        self._size += 1

    def append(self, value: Any) -> None:
        """Add a value at the end."""
        node = Node(value, None, self.tail)
        if self.tail is not None:
            if self.tail.next is not None:
                raise IntegrityError("tail node's next pointer is not None")
            self.tail.next = node
        else:
            if self.head is not None:
                raise IntegrityError("inconsistent list state: tail is None but head is not")
            self.head = node
        self.tail = node
        self._size += 1

    def search(self, value: Any) -> int:
        """Return the index of the first occurrence of value."""
        index = next((i for i, item in enumerate(self) if item == value), -1)
        if index < 0:
            raise ValueError("value not found")
        return index

    def shift(self) -> Any:
        """Remove and return the first value."""
        if self.head is None:
            raise EmptyListError("list is empty nothing to delete")
        removed = self.head
        self.head = removed.next
        if self.head is not None:
            self.head.prev = None
        else:
            self.tail = None
        self._size -= 1
        return removed.value

    def pop(self) -> Any:
        """Remove and return the last value."""
        if self.head is None:
            raise EmptyListError("list is empty nothing to delete")
        removed = self.tail
        if self.head is self.tail:
            self.clear()
            return removed.value
        self.tail = removed.prev
        self.tail.next = None
        self._size -= 1
        return removed.value

    def delete(self, value: Any) -> None:
        """Remove the first occurrence of value."""
        if self.head is None:
            raise EmptyListError("list is empty nothing to delete")
        if self.head.value == value:
            self.shift()
            return
        if self.tail.value == value:
            self.pop()
            return
        node = next((n for n in self._nodes() if n.value == value), None)
        if node is None:
            raise ValueError("value not found in the list")
        self._unlink(node)

    def insert(self, value: Any, index: int) -> None:
        """Insert value before position index."""
        if not 0 <= index <= self._size:
            raise IndexError(f"index out of bounds: index {index}, size {self._size}")
        if index == 0:
            self.prepend(value)
            return
        if index == self._size:
            self.append(value)
            return
        following = self._node_at(index)
        node = Node(value, following, following.prev)
        following.prev.next = node
        following.prev = node
        self._size += 1

    def delete_at(self, index: int) -> Any:
        """Remove and return the value at index."""
        if not 0 <= index < self._size:
            raise IndexError("index out of bounds")
        if index == 0:
            return self.shift()
        if index == self._size - 1:
            return self.pop()
        return self._unlink(self._node_at(index))

    def reverse(self) -> None:
        """Reverse the order of the elements in place."""
        if self.head is None:
            raise EmptyListError("cannot reverse empty list")
        if self._size <= 1:
            return
        node = self.head
        self.tail = node
        while node is not None:
            following = node.next
            node.next, node.prev = node.prev, following
            if following is None:
                self.head = node
            node = following

    def validate(self) -> None:
        """Raise IntegrityError if the links, tail or size are inconsistent."""
        if self.head is None:
            if self.tail is not None:
                raise IntegrityError("head is None but tail is not")
            if self._size != 0:
                raise IntegrityError("empty list has non-zero size")
            return
        if self.head.prev is not None:
            raise IntegrityError("head node has non-None prev pointer")
        if self.tail is None or self.tail.next is not None:
            raise IntegrityError("tail node has non-None next pointer")
        count = 0
        last = None
        for count, node in enumerate(self._nodes(), 1):
            if count > self._size:
                raise IntegrityError("list contains more nodes than size indicates")
            if node.next is not None and node.next.prev is not node:
                raise IntegrityError("broken bidirectional link found")
            last = node
        if count != self._size:
            raise IntegrityError(
                f"actual node count ({count}) differs from size ({self._size})"
            )
        if last is not self.tail:
            raise IntegrityError("tail pointer does not point to last node")
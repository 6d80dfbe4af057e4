"""A singly linked list."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional, TextIO

from chainlists.errors import EmptyListError, IntegrityError

_SORTABLE = (int, str, float)


def _check_sortable(values: list) -> None:
    """Raise TypeError unless the values are all int, all str or all float."""
    for current, following in zip(values, values[1:]):
        if type(current) not in _SORTABLE:
            raise TypeError("unsupported type for sorting")
        if type(following) is not type(current):
            raise TypeError("mismatched types in list")


@dataclass(eq=False, repr=False, slots=True)
class Node:
    """A node holding one value and a link to the next node."""

    value: Any
    next: Optional[Node] = None

    def __repr__(self) -> str:
        return f"Node({self.value!r})"


class SinglyLinkedList:
    """A list of values linked from head to tail in one direction."""

    _separator = " -> "

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

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.value

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
        """Return the values from tail to head, joined by arrows."""
        return self._separator.join(map(str, reversed(self.to_list())))

    def print(self, file: Optional[TextIO] = None) -> None:
        """Write the values from head to tail on one line."""
        print(str(self), file=file)

    def print_reverse(self, file: Optional[TextIO] = None) -> None:
        """Write the values from tail to head on one line."""
        print(self.format_reverse(), file=file)

    def prepend(self, value: Any) -> None:
        """Add a value at the front."""
        node = Node(value, self.head)
        self.head = node
        if self.tail is None:
            self.tail = node
        self._size += 1

    def append(self, value: Any) -> None:
        """Add a value at the end."""
        node = Node(value)
        if self.tail is None:
            self.head = node
        else:
            self.tail.next = node
        self.tail = node
        self._size += 1

    def search(self, value: Any) -> int:
        """Return the index of the first occurrence of value, or -1."""
        return next((i for i, item in enumerate(self) if item == value), -1)

    def shift(self) -> Any:
        """Remove and return the first value."""
        if self.head is None:
            raise EmptyListError("list is empty, nothing to delete")
        removed = self.head
        self.head = removed.next
        if self.head is None:
            self.tail = None
        self._size -= 1
        return removed.value

    def _remove_after(self, prev: Node) -> Any:
        removed = prev.next
        prev.next = removed.next
        if removed is self.tail:
            self.tail = prev
        self._size -= 1
        return removed.value

    def pop(self) -> Any:
        """Remove and return the last value."""
        if self.head is None:
            raise EmptyListError("list is empty nothing to delete")
        if self.head.next is None:
            return self.shift()
        return self._remove_after(self._node_at(self._size - 2))

    def delete(self, value: Any) -> None:
        """Remove the first occurrence of value."""
        if self.head is None:
            raise EmptyListError("list is empty nothing to delete")
        if self.head.value == value:
            self.shift()
            return
        prev = self.head
        while prev.next is not None and prev.next.value != value:
            prev = prev.next
        if prev.next is None:
            raise ValueError("value not found in the list")
        self._remove_after(prev)

    def insert(self, value: Any, index: int) -> None:
        """Insert value before position index.

        Index 0 places the value at the end, as append does.
        """
        if not 0 <= index <= self._size:
            raise IndexError("index out of bounds")
        if index in (0, self._size):
            self.append(value)
            return
        prev = self._node_at(index - 1)
        prev.next = Node(value, prev.next)
        self._size += 1

    def delete_at(self, index: int) -> Any:
        """Remove and return the value at index."""
        if not 0 <= index < self._size:
            raise IndexError("index out of bounds")
        if index == 0:
            return self.shift()
        return self._remove_after(self._node_at(index - 1))

    def reverse(self) -> None:
        """Reverse the order of the elements in place."""
        prev = None
        node = self.head
        self.tail = node
        while node is not None:
            following = node.next
            node.next = prev
            prev = node
            node = following
        self.head = prev

    def get_middle(self) -> Any:
        """Return the middle value; the first of the two middles for even lengths."""
        if self.head is None:
            raise EmptyListError("list is empty")
        slow = fast = self.head
        while fast.next is not None and fast.next.next is not None:
            slow = slow.next
            fast = fast.next.next
        return slow.value

    def _has_cycle(self) -> bool:
        slow = fast = self.head
        while fast is not None and fast.next is not None:
            slow = slow.next
            fast = fast.next.next
            if slow is fast:
                return True
        return False

    def validate(self) -> None:
        """Raise IntegrityError if the node chain disagrees with the recorded size."""
        if self.head is None and self._size != 0:
            raise IntegrityError("empty list has non-zero size")
        count = 0
        for count, _ in enumerate(self._nodes(), 1):
            if count > self._size:
                raise IntegrityError("list contains more nodes than size indicates")
        if count != self._size:
            raise IntegrityError(
                f"actual node count ({count}) differs from size ({self._size})"
            )
        if self._has_cycle():
            raise IntegrityError("list contains a cycle")
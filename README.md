# chainlists

Two linked-list containers: `SinglyLinkedList` in `chainlists.singly` and
`DoublyLinkedList` in `chainlists.doubly`. Both store values in linked nodes.
Along with the usual list operations they offer sorting, de-duplication,
merging and structural validation.

## Installation

```
pip install .
```

## Usage

```python
from chainlists.singly import SinglyLinkedList
from chainlists.doubly import DoublyLinkedList

items = SinglyLinkedList([5, 3, 4, 1, 2])
items.sort()
print(items)               # 1 -> 2 -> 3 -> 4 -> 5
items.reverse()
print(items.get_middle())  # 3

chain = DoublyLinkedList()
chain.append(1)
chain.append(2)
chain.prepend(0)
chain.insert(1.5, 2)
print(chain)                  # 0 <-> 1 <-> 1.5 <-> 2
chain.delete(1.5)
print(list(reversed(chain)))  # [2, 1, 0]
chain.validate()              # raises IntegrityError if the links are broken
```

Both containers support the following:

- `len()`, iteration, `in` and `str()`. `str()` joins the values with ` -> `
  for singly linked lists and with ` <-> ` for doubly linked lists.
- `is_empty()`, `clear()`, `to_list()`, and `from_iterable()`, which replaces
  the current contents.
- `prepend()`, `append()`, `insert(value, index)`, `get(index)`.
- `shift()` and `pop()`, which remove and return the first or the last value.
  `delete_at(index)` removes and returns the value at a position.
- `delete(value)`, which removes the first occurrence of a value.
- `search(value)`, `reverse()`, `unique()` (keeps the first occurrence of each
  value), `merge(other)` (appends every value of any iterable) and `sort()`.
- `validate()`, `format_reverse()`, `print(file=None)` and
  `print_reverse(file=None)`.

`DoublyLinkedList` also supports `reversed()`. `SinglyLinkedList` has
`get_middle()`, which returns the first of the two middle values when the
length is even.

The two types differ in a few places:

- `search()` on a singly linked list returns `-1` when the value is missing.
  On a doubly linked list it raises `ValueError`.
- `insert(value, 0)` on a singly linked list adds the value at the end, the
  same way `append()` does. On a doubly linked list it adds the value at the front.
- `reverse()` on an empty doubly linked list raises `EmptyListError`. An empty
  singly linked list is left as it is.

`sort()` only handles lists whose values are all `int`, all `float` or all
`str`. Any other mix raises `TypeError`.

## Errors

`chainlists.errors` defines:

- `LinkedListError`: the base class.
- `EmptyListError`: the operation needs a non-empty list. It is raised by
  `shift()`, `pop()`, `delete()`, `unique()` and `get_middle()`, and by
  `reverse()` on a doubly linked list. It is also an `IndexError`.
- `IntegrityError`: the node structure is inconsistent. `validate()` raises it,
  and so do the doubly linked `append()` and `prepend()` when they find broken
  links.

The standard exceptions are used as well:

- `IndexError` for an index out of range.
- `ValueError` when `delete()` cannot find the value.
- `TypeError` when `from_iterable()` or `merge()` is given `None`, and for
  values that cannot be sorted.

## Demo

```
chainlists-demo
```

This runs through the operations of both list types and prints each result to
standard output. The functions `demonstrate_singly(out)` and
`demonstrate_doubly(out)` in `chainlists.cli` write the same walkthroughs to
any text stream.
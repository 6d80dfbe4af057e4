"""Command that walks through the operations of both linked list types."""

from __future__ import annotations

import argparse
import sys
from typing import Iterable, Optional, Sequence, TextIO

from chainlists.doubly import DoublyLinkedList
from chainlists.errors import IntegrityError
from chainlists.singly import SinglyLinkedList


def _format_values(values: Iterable[object]) -> str:
    """Render values in square brackets, separated by spaces."""
    return "[" + " ".join(map(str, values)) + "]"


def _format_bool(flag: bool) -> str:
    return "true" if flag else "false"


def demonstrate_singly(out: Optional[TextIO] = None) -> None:
    """Run the singly linked list walkthrough, writing to out."""
    out = sys.stdout if out is None else out
    chain = SinglyLinkedList()

    print("Adding elements...", file=out)
    chain.append(1)
    chain.append(2)
    chain.prepend(0)
    chain.print(out)

    print("\nInserting 1.5 at index 2...", file=out)
    chain.insert(1.5, 2)
    chain.print(out)

    print("Deleting value 1.5...", file=out)
    chain.delete(1.5)
    chain.print(out)

    print(f"As slice: {_format_values(chain.to_list())}", file=out)
    print(f"As array: {_format_values(chain)}", file=out)

    print(f"Index of 1: {chain.search(1)}", file=out)
    try:
        value = chain.get(1)
    except IndexError:
        pass
    else:
        print(f"Value at index 1: {value}", file=out)

    chain.pop()
    out.write("After Pop: ")
    chain.print(out)

    chain.shift()
    out.write("After Shift: ")
    chain.print(out)

    chain.from_iterable([5, 3, 4, 1, 2])
    out.write("New list from slice: ")
    chain.print(out)

    chain.sort()
    out.write("After sorting: ")
    chain.print(out)

    chain.reverse()
    out.write("After reversal: ")
    chain.print(out)

    print(f"Middle element: {chain.get_middle()}", file=out)


def demonstrate_doubly(out: Optional[TextIO] = None) -> None:
    """Run the doubly linked list walkthrough, writing to out."""
    out = sys.stdout if out is None else out
    chain = DoublyLinkedList()

    print("Adding elements...", file=out)
    chain.append(1)
    chain.append(2)
    chain.prepend(0)
    chain.print(out)

    print("\nInserting 1.5 at index 2...", file=out)
    chain.insert(1.5, 2)
    chain.print(out)

    print("Deleting value 1.5...", file=out)
    chain.delete(1.5)
    chain.print(out)

    print(f"As slice: {_format_values(chain.to_list())}", file=out)

    try:
        index = chain.search(1)
    except ValueError:
        pass
    else:
        print(f"Index of 1: {index}", file=out)

    try:
        chain.validate()
    except IntegrityError:
        pass
    else:
        print("List structure is valid", file=out)

    chain.pop()
    out.write("After Pop: ")
    chain.print(out)

    chain.shift()
    out.write("After Shift: ")
    chain.print(out)

    chain.from_iterable([5, 3, 4, 1, 2])
    out.write("New list from slice: ")
    chain.print(out)

    chain.sort()
    out.write("After sorting: ")
    chain.print(out)

    chain.reverse()
    out.write("After reversal: ")
    chain.print(out)

    print("Printing in reverse order:", file=out)
    chain.print_reverse(out)

    chain.append(1)
    chain.append(2)
    chain.unique()
    out.write("After removing duplicates: ")
    chain.print(out)

    print(f"Is empty? {_format_bool(chain.is_empty())}", file=out)
    chain.clear()
    print(f"Is empty after clear? {_format_bool(chain.is_empty())}", file=out)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the walkthrough of both list types to standard output."""
    parser = argparse.ArgumentParser(
        description="Show the operations of singly and doubly linked lists."
    )
    parser.parse_args(argv)

    out = sys.stdout
    print("=== Singly Linked List Demo ===", file=out)
    demonstrate_singly(out)

    print("\n=== Doubly Linked List Demo ===", file=out)
    demonstrate_doubly(out)
    return 0


if __name__ == "__main__":
    sys.exit(main())
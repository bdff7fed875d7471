"""Small walkthroughs of both list types, runnable from the command line."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from chainlists.doubly import DoublyLinkedList
from chainlists.singly import SinglyLinkedList


def singly_demo() -> list[str]:
    """Exercise a singly linked list and return the lines it reports."""
    lst = SinglyLinkedList()
    str_data = "hello world"
    char_data = "*"
    names = ["Alice", "John", "Bob"]
    int_data = 25
    int_arr_data = [1, 2, 3, 4, 5]
    num_float = 1.2

    lst.insert_head(str_data)
    lst.insert_head(int_data)
    lst.insert_tail(int_arr_data)
    lst.insert_tail(char_data)
    lst.insert_head(names)
    lst.insert_tail(num_float)

    lines = [
        lst.search(char_data).data,
        lst.search(str_data).data,
        str(lst.search(int_data).data),
    ]
    lines.extend(str(value) for value in lst.search(int_arr_data).data)
    lines.extend(f"name: {name}" for name in lst.search(names).data)
    lines.append(f"{lst.search(num_float).data:f}")

    lst.delete(names)
    lines.append(str(len(lst)))
    lst.clear()
    return lines


def doubly_demo() -> list[str]:
    """Exercise a doubly linked list and return the lines it reports."""
    lst = DoublyLinkedList()
    names = ["John", "Alice"]
    num = 1.2

    lst.insert_head(names)
    lst.insert_tail(10)
    lst.insert_head("Hello World")
    lst.insert_tail(num)

    lst.delete(10)
    lst.delete(num)

    lst.insert_head(120)

    lines = [
        lst.search(names).data[0],
        lst.search("Hello World").data,
        str(lst.search(120).data),
    ]
    lst.clear()
    return lines


def main(argv: Sequence[str] | None = None) -> int:
    """Print the output of the chosen walkthroughs."""
    parser = argparse.ArgumentParser(prog="chainlists", description=__doc__)
    parser.add_argument(
        "which",
        nargs="?",
        choices=("singly", "doubly", "both"),
        default="both",
        help="which walkthrough to run",
    )
    args = parser.parse_args(argv)
    if args.which in ("singly", "both"):
        for line in singly_demo():
            print(line)
    if args.which in ("doubly", "both"):
        for line in doubly_demo():
            print(line)
    return 0
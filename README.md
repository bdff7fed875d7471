# chainlists

Two small linked-list containers that hold arbitrary Python objects:

- `SinglyLinkedList` in `chainlists.singly`. Each node links to the next node, and the list keeps references to its head and its tail.
- `DoublyLinkedList` in `chainlists.doubly`. Each node links to the next node and to the previous one, so you can also walk the list backwards with `reversed()`.

An item matches if it is the stored object itself (`is`) or compares equal to it (`==`).

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install .[test]
```

## Common features

Both lists accept an optional iterable. Its items are appended in order:

```python
from chainlists.doubly import DoublyLinkedList

dll = DoublyLinkedList(["a", "b", "c"])
```

Both containers support:

- `len()`
- iteration over the stored data
- truth testing, where an empty list is false
- the `head` and `tail` properties, which give the first and last node or `None`
- `insert_head(data)` and `insert_tail(data)`, which return the new node
- `search(data)`, which returns the first matching node or `None`
- `delete(data)`, which removes every matching node and returns how many were removed
- `clear()`

A `SinglyNode` has the attributes `data` and `next`. A `DoublyNode` also has `prev`.

## Singly linked list

```python
from chainlists.singly import SinglyLinkedList, EmptyListError

names = ["Alice", "John", "Bob"]

items = SinglyLinkedList()
items.insert_head("hello world")
items.insert_tail(names)

node = items.search(names)
print(node.data[0])          # Alice

print(items.delete(names))   # 1
print(len(items))            # 1

items.clear()
try:
    items.search("hello world")
except EmptyListError:
    print("list is empty")
```

On an empty list, `search`, `delete` and `clear` raise `EmptyListError`, which is a subclass of `LookupError`.

## Doubly linked list

```python
from chainlists.doubly import DoublyLinkedList

dll = DoublyLinkedList(["a", "b", "c"])
dll.insert_head("start")
print(list(dll))            # ['start', 'a', 'b', 'c']
print(list(reversed(dll)))  # ['c', 'b', 'a', 'start']
print(dll.head.data, dll.tail.data)
```

On an empty list, `DoublyLinkedList` does not raise: `search` returns `None`, `delete` returns `0`, and `clear` does nothing.

## Demo

The package includes a short walkthrough of both lists. The walkthrough prints the values it finds:

```
chainlists-demo
chainlists-demo singly
chainlists-demo doubly
```

The optional argument is `singly`, `doubly` or `both`, and the default is `both`. The same walkthroughs are available as `chainlists.demo.singly_demo()` and `chainlists.demo.doubly_demo()`. Each function returns its output lines as a list of strings.
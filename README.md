# dsakit

Compact, readable implementations of the classic data structures met in a
first course on the subject, plus infix-notation conversion, with a small
menu-driven command for trying them out.

## Modules

- `dsakit.stack` — `Stack(capacity=None)`, a LIFO stack holding at most
  `capacity` items (`None` means unbounded), with `push`, `pop`, `peek`,
  `is_empty`, `is_full`, `len()` and iteration from top to bottom. Also the
  helpers `is_operator(char)` (true for `+ - * / ^`) and `precedence(op)`
  (1 for `+ -`, 2 for `* /`, 3 for `^`, otherwise -1).
- `dsakit.notation` — `infix_to_postfix(expression)` and
  `infix_to_prefix(expression)`. Operands are single characters, whitespace
  is ignored, and every operator, `^` included, groups left to right.
  Unbalanced parentheses raise `ValueError`.
- `dsakit.linear_queue` — `LinearQueue(capacity)`, a FIFO queue whose slots
  are used once each: after `capacity` items have been enqueued it reports
  full, however many have been dequeued since.
- `dsakit.circular_queue` — `CircularQueue(capacity)`, a FIFO queue over a
  ring buffer that reuses freed slots.
- `dsakit.linked_list` — `LinkedList(values=())`, a singly linked list with
  `insert_at_end`, `insert_at_beginning`, `insert_after(key, value)`,
  `insert_before(key, value)`, `insert_after_position(position, value)`,
  `insert_before_position(position, value)`, `delete_at_end`,
  `delete_at_beginning`, `delete_after(key)`, `delete_before(key)` and
  `delete_after_position(position)`. Keys match the first node holding that
  value; positions are 1-based, and a position below 1 means the first node.
  The delete methods return the value they removed.

## Errors

Running out of room or taking from an empty structure raises an exception
rather than printing a message:

- `StackOverflowError`, `StackUnderflowError` (`dsakit.stack`)
- `QueueFullError`, `QueueEmptyError` (`dsakit.linear_queue`, also raised by
  `CircularQueue`)
- `EmptyListError` for an operation on an empty list, `NodeNotFoundError` for
  a missing key or a missing neighbour of a key, and `IndexError` for a
  position past the end of the list, for inserting before the first position,
  or for deleting after the last node (`dsakit.linked_list`)

## Usage

```python
from dsakit.stack import Stack
from dsakit.notation import infix_to_postfix, infix_to_prefix
from dsakit.linear_queue import LinearQueue
from dsakit.linked_list import LinkedList

s = Stack(10)
s.push("a")
s.push("b")
print(s.peek())      # b
print(s.pop())       # b
print(len(s))        # 1

print(infix_to_postfix("a+b*c"))   # abc*+
print(infix_to_prefix("a+b*c"))    # +a*bc

q = LinearQueue(5)
q.enqueue(1)
q.enqueue(2)
print(q.dequeue())   # 1
print(list(q))       # [2]

items = LinkedList([1, 2, 3])
items.insert_after(2, 7)
items.delete_at_beginning()
print(list(items))   # [2, 7, 3]
```

## Command line

Installing the package provides the `dsakit` command. It takes one
subcommand:

```
dsakit linked-list
dsakit queue [--capacity N]            # default 5
dsakit circular-queue [--capacity N]   # default 5
dsakit stack [--capacity N]            # default 10
dsakit postfix [EXPRESSION]
dsakit prefix [EXPRESSION]
```

The first four open a numbered menu read from standard input as
whitespace-separated tokens. Choose `0` to leave the linked-list menu and `4`
to leave the queue and stack menus; the menus also end when the input runs
out. The linked-list menu prints the list after every operation. Integers are
stored in the list and the queues; the stack holds whole tokens as text.

`postfix` and `prefix` convert the expression given, or read one token from
standard input when it is left out, and print the result. They exit with
status 1 when no expression is given or its parentheses do not balance.

## Limits

The linked list has no operation that deletes the node before a given
position. Nothing is saved between runs of the command.

## Running the tests

```
pip install .[test]
pytest
```
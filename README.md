# listkit

Two classic list structures in Python, with a small interactive shell for each.

- `listkit.chain_table`: `LinkedList` is a named singly linked list of integers
  with a sentinel head node. It offers head, tail and positional insertion and
  deletion, in-place reversal, and a search for the adjacent pair with the
  largest sum. `merge_sorted` merges two ascending lists into a new unnamed list.
  List names longer than 63 characters are cut short.
- `listkit.linear_table`: `SeqList` is a sequential list of integers with a
  fixed capacity (100 by default). It raises `ListFullError` when inserting into
  a full list, `ListEmptyError` when deleting, renewing or querying an empty one,
  and `IndexError` for a position out of range.
- `listkit.chain_app`: `ListPool` holds up to 100 named lists; `ChainShell` runs
  text commands against a pool.
- `listkit.linear_app`: `LinearShell` runs numeric commands against one `SeqList`.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install .[test]
pytest
```

## Library use

```python
from listkit.chain_table import LinkedList, merge_sorted

numbers = LinkedList("numbers")
numbers.push_back(1)
numbers.push_back(5)
numbers.push_front(0)
numbers.insert(1, 3)          # position 1, counting from 0
print(list(numbers))          # [0, 3, 1, 5]
print(numbers.render())       # {LIST-numbers:4}-[0]-[3]-[1]-[5]
numbers.reverse()
print(numbers.pop_front())    # 5
print(numbers.adjacent_max()) # (first node of the best pair, its sum), or None

from listkit.linear_table import SeqList, ListFullError

table = SeqList(100)
table.append(7)
table.insert(0, 3)
print(table.query(1))         # 7
print(table.render())         # |3|-|7|-
```

`LinkedList.pop_front`, `pop_back`, `delete`, `insert` and `node_at` raise
`IndexError` when the position does not exist or the list is empty.

## Shells

`listkit-chain` manages a pool of named linked lists. Before each command it
prints a menu and an `enter:` prompt, echoes the line it read, and prints `ok!`
after a command that succeeded. Type `7` to list every command. For example:

```
1 1 nums        create a list called "nums"
2 1 -2 nums 10  append 10 to "nums"
2 1 -1 nums 5   put 5 at the front of "nums"
2 1 1 nums 7    insert 7 at position 1 of "nums"
2 2 -1 nums     delete the first element of "nums"
2 2 -2 nums     delete the last element of "nums"
2 2 0 nums      delete the element at position 0 of "nums"
3 nums          show "nums"
4 nums          reverse "nums" and show it
5 nums          show the first value of the adjacent pair with the largest sum
6               show every list
1 2 nums        destroy "nums"
```

`listkit-linear` works on one sequential list. At each prompt it reads an
operation code (1 insert, 2 append, 3 renew, 4 delete, 5 query, 6 show all)
and then the numbers that operation needs, separated by spaces or newlines.
Operations that fail (a bad index, a full or empty list) leave the list as it
was without an error message; a query that fails prints `data:0`.

Both shells run until their input ends or until they are stopped with Ctrl+C.

## What it does not do

Lists live in memory only. Neither shell saves or loads lists, so everything is
lost when a shell exits. Elements are integers only.
"""Interactive shell managing a pool of named linked lists."""

from __future__ import annotations

import sys
from typing import Iterator, Optional, TextIO

from listkit.chain_table import LinkedList

POOL_SIZE = 100
"""Default number of lists a :class:`ListPool` can hold."""

_USAGE = """\
===============================
= 1. create / destory a List  =
= 2. add / del a node to List =
= 3. show List                =
= 4. reverse the List         =
= 5. adj max List             =
= 6. show all LIST            =
= 7. example                  =
==============================="""

_EXAMPLE = """\
==================================================================================
= 1 1 listname(create a List) [code][create][listname]                           =
= 1 2 listname(destory a List) [code][destory][listname]                         =
= 2 1 -1 listname 10000 (add by head) [code][add][by head][listname][data]       =
= 2 1 -2 listname 10000 (add by tail) [code][add][by tail][listname][data]       =
= 2 1 0 listname 10000 (add by pos) [code][add][pos][listname]                   =
= 2 2 -1 listname (del by head) [code][del][by head][listname]                   =
= 2 2 -2 listname (del by tail) [code][del][by tail][listname]                   =
= 2 2 0 listname (del by pos) [code][del][pos][listname]                         =
= 3 listname (show the List) [code][listname]                                    =
= 4 listname (reverse the List) [code][listname]                                 =
= 5 listname (adj max List) [code][listname]                                     =
= 6 (show all  List) [code]                                                      =
=================================================================================="""


def _scan(line: str, kinds: str) -> list:
    """Read whitespace-separated fields; ``d`` is an integer, ``s`` a word.

    Reading stops at the first field that does not match; the remaining
    fields keep their defaults (0 or the empty string).
    """
    values: list = [0 if kind == "d" else "" for kind in kinds]
    for position, (kind, token) in enumerate(zip(kinds, line.split())):
        if kind == "d":
            try:
                values[position] = int(token)
            except ValueError:
                break
        else:
            values[position] = token
    return values


class ListPool:
    """A fixed number of slots holding named linked lists."""

    def __init__(self, capacity: int = POOL_SIZE) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._slots: list[Optional[LinkedList]] = [None] * capacity

    def __iter__(self) -> Iterator[LinkedList]:
        return (lst for lst in self._slots if lst is not None)

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def find(self, name: str) -> Optional[LinkedList]:
        """Return the list called ``name``, or ``None``."""
        if not name:
            return None
        return next((lst for lst in self if lst.name == name), None)

    def add(self, linked_list: LinkedList) -> None:
        """Put ``linked_list`` into the first free slot."""
        for position, slot in enumerate(self._slots):
            if slot is None:
                self._slots[position] = linked_list
                return
        raise OverflowError("list pool is full")

    def remove(self, linked_list: LinkedList) -> None:
        """Free the slot holding ``linked_list``."""
        for position, slot in enumerate(self._slots):
            if slot is linked_list:
                self._slots[position] = None
                return
        raise ValueError("list is not in the pool")


class ChainShell:
    """Runs the text commands that operate on a :class:`ListPool`."""

    def __init__(self, out: Optional[TextIO] = None, pool: Optional[ListPool] = None) -> None:
        self.out = out if out is not None else sys.stdout
        self.pool = pool if pool is not None else ListPool()

    def _say(self, text: str) -> None:
        self.out.write(text + "\n")

    def usage(self) -> None:
        """Print the command menu."""
        self._say(_USAGE)

    def example(self) -> None:
        """Print examples of every command."""
        self._say(_EXAMPLE)

    def handle(self, line: str) -> None:
        """Run one command line."""
        command = line[:1]
        if command == "1":
            done = self._create_or_destroy(line)
        elif command == "2":
            done = self._edit(line)
        elif command in ("3", "4", "5"):
            done = self._inspect(line)
        elif command == "6":
            for linked_list in self.pool:
                self._say(linked_list.render())
            return
        elif command == "7":
            self.example()
            return
        else:
            done = True
        if done:
            self._say("ok!")

    def _create_or_destroy(self, line: str) -> bool:
        _, op, name = _scan(line, "dds")
        if not name:
            return False
        if op == 1:
            if self.pool.find(name) is not None:
                self._say(f"list {name} is already!")
                return False
            try:
                self.pool.add(LinkedList(name))
            except OverflowError:
                self._say("insert_list_to_pool fail!")
                return False
        elif op == 2:
            existing = self.pool.find(name)
            if existing is not None:
                self.pool.remove(existing)
        return True

    def _edit(self, line: str) -> bool:
        _, op, hand, name, data = _scan(line, "dddsd")
        if not name:
            return False
        target = self.pool.find(name)
        if target is None:
            self._say(f"no list named {name}!")
            return False
        if op == 1:
            return self._add_node(target, hand, data)
        if op == 2:
            return self._delete_node(target, hand)
        return True

    def _add_node(self, target: LinkedList, hand: int, data: int) -> bool:
        if hand == -1:
            target.push_front(data)
        elif hand == -2:
            target.push_back(data)
        else:
            try:
                target.insert(hand, data)
            except IndexError:
                self._say("index error")
                self._say(f"node add to {target.name} fail!")
                return False
        return True

    def _delete_node(self, target: LinkedList, hand: int) -> bool:
        try:
            if hand == -1:
                target.pop_front()
            elif hand == -2:
                target.pop_back()
            else:
                if not 0 <= hand <= len(target):
                    self._say("pos is invalid!")
                    return False
                target.delete(hand)
        except IndexError:
            return False
        return True

    def _inspect(self, line: str) -> bool:
        code, name = _scan(line, "ds")
        if not name:
            return False
        target = self.pool.find(name)
        if target is None:
            self._say(f"no list named {name}!")
            return False
        if code == 3:
            self._say(target.render())
        elif code == 4:
            target.reverse()
            self._say(target.render())
        elif code == 5:
            best = target.adjacent_max()
            if best is not None:
                self._say(f"p->data:{best[0].data}")
        return True


def main(argv: Optional[list[str]] = None) -> int:
    """Read commands from standard input until it ends or is interrupted."""
    shell = ChainShell(sys.stdout)
    try:
        while True:
            shell.usage()
            sys.stdout.write("enter: ")
            sys.stdout.flush()
            line = sys.stdin.readline()
            if not line:
                break
            sys.stdout.write("\n")
            sys.stdout.write(f"buf:{line}\n")
            shell.handle(line)
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())
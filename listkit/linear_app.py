"""Interactive shell operating on one sequential list."""

from __future__ import annotations

import sys
from typing import Iterable, Iterator, Optional, TextIO

from listkit.linear_table import ListEmptyError, ListFullError, SeqList

_MENU = "1-insert,2-add,3-renew,4-del,5-query,6-displayall"


class _Exhausted(Exception):
    """Input ran out while a command was being read."""


class LinearShell:
    """Runs numeric commands read from a token stream against a :class:`SeqList`."""

    def __init__(self, table: Optional[SeqList] = None, out: Optional[TextIO] = None) -> None:
        self.table = table if table is not None else SeqList()
        self.out = out if out is not None else sys.stdout

    def _say(self, text: str) -> None:
        self.out.write(text + "\n")

    @staticmethod
    def _read(tokens: Iterator[str], default: int) -> int:
        token = next(tokens, None)
        if token is None:
            raise _Exhausted
        try:
            return int(token)
        except ValueError:
            return default

    def _display(self) -> None:
        self._say(self.table.render())

    def step(self, tokens: Iterator[str]) -> bool:
        """Run one command; return ``False`` once the input is used up."""
        self._say(_MENU)
        self._say("entry op_code:")
        try:
            code = self._read(tokens, -1)
            if code in (1, 3):
                self._say("entry index & data(0 255):")
                index = self._read(tokens, -1)
                data = self._read(tokens, 0)
                action = self.table.insert if code == 1 else self.table.renew
                self._attempt(action, index, data)
                self._display()
            elif code == 2:
                self._say("entry data(255):")
                data = self._read(tokens, 0)
                self._attempt(self.table.append, data)
                self._display()
            elif code == 4:
                self._say("entry index(255):")
                index = self._read(tokens, -1)
                self._attempt(self.table.delete, index)
                self._display()
            elif code == 5:
                self._say("entry index(255):")
                index = self._read(tokens, -1)
                value = self._attempt(self.table.query, index)
                self._say(f"data:{value if value is not None else 0}")
            elif code == 6:
                self._display()
        except _Exhausted:
            return False
        return True

    @staticmethod
    def _attempt(action, *args):
        try:
            return action(*args)
        except (IndexError, ListFullError, ListEmptyError):
            return None

    def run(self, stream: Iterable[str]) -> None:
        """Run commands from the lines of ``stream`` until it ends."""
        tokens = (token for line in stream for token in line.split())
        while self.step(tokens):
            pass


def main(argv: Optional[list[str]] = None) -> int:
    """Run the shell on standard input until it ends or is interrupted."""
    shell = LinearShell(SeqList(), sys.stdout)
    try:
        shell.run(sys.stdin)
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())
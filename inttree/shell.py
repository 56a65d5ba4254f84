"""Interactive shell operating on two integer trees."""

from __future__ import annotations

import argparse
import os
import random
import re
import subprocess
import sys
from collections.abc import Iterable
from typing import TextIO

from inttree.tree import IntBinaryTree

_USAGE = (
    "Существует 2 дерева, все операции выполняются на выбранном:\n"
    "\tpush [#] - вставляет значение в дерево\n"
    "\tprint - выводит дерево в горизонтальном виде\n"
    "\tclear - полностью очищает дерево\n"
    "\ttraverse [preorder | inorder | postorder | levels] - обходит дерево "
    "предварительно, порядково, отложенно или по уровням\n"
    "\tremove [duplicates | #] - удаляет дубликаты или удаляет конкретное значение\n"
    "\tswitch - переключается на другое дерево\n"
    "\tcopy - копирует все элементы из текущего дерева в оставшееся\n"
    "\theight - выводит высоту текущего дерева\n"
    "\tincrement - увеличивает все значения в текущем дереве на 1\n"
    "\texit - выйти из программы\n"
    "\tcls - очищает консоль\n"
    "\tusage - выводит это\n"
)

_INT_PREFIX = re.compile(r"\s*([+-]?[0-9]+)")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def usage() -> str:
    """Return the command help text."""
    return _USAGE


def _parse_int(text: str) -> int:
    """Parse a leading 32-bit integer, ignoring whatever follows it."""
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"not a number: {text!r}")
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"number out of range: {text!r}")
    return value


def _clear_screen() -> None:
    command = "cls" if os.name == "nt" else "clear"
    try:
        subprocess.run(command, shell=True, check=False)
    except OSError:
        pass


class Shell:
    """Reads commands and applies them to the selected one of two trees."""

    def __init__(self, out: TextIO | None = None, rng: random.Random | None = None) -> None:
        self.out = out if out is not None else sys.stdout
        self.rng = rng if rng is not None else random.Random()
        self.trees = [IntBinaryTree(), IntBinaryTree()]
        self.cursor = 0

    def execute(self, line: str) -> bool:
        """Run one command line; return False when the shell should stop.

        Raises ValueError when a numeric argument cannot be parsed.
        """
        command, _, rest = line.partition(" ")
        argument = rest.split(" ", 1)[0]
        tree = self.trees[self.cursor]

        match command:
            case "push":
                value = self.rng.randint(0, 10) if not argument else _parse_int(argument)
                tree.push(value)
            case "print":
                self.out.write(f"{tree}\n")
            case "clear":
                tree.clear()
            case "traverse":
                self._traverse(tree, argument)
            case "remove":
                if argument == "duplicates":
                    tree.remove_duplicates()
                else:
                    tree.remove(_parse_int(argument))
            case "switch":
                self.cursor = 1 - self.cursor
                self.out.write(f"Переключено на {self.cursor}\n")
            case "copy":
                dest = 1 - self.cursor
                self.trees[dest] = tree.copy()
                self.out.write(f"Скопировано из {self.cursor} в {dest}\n")
            case "height":
                self.out.write(f"{tree.height()}\n")
            case "increment":
                tree.increment()
            case "usage":
                self.out.write(usage())
            case "exit":
                return False
            case "cls":
                _clear_screen()
            case _:
                self.out.write("Неизвестная команда\n")
        return True

    def run(self, lines: Iterable[str]) -> None:
        """Prompt for and execute each line until exit or end of input."""
        self.out.write("> ")
        self.out.flush()
        for line in lines:
            if not self.execute(line.rstrip("\r\n")):
                return
            self.out.write("> ")
            self.out.flush()

    def _traverse(self, tree: IntBinaryTree, order: str) -> None:
        match order:
            case "preorder":
                values = tree.preorder()
            case "inorder":
                values = tree.inorder()
            case "postorder":
                values = tree.postorder()
            case "levels":
                for level in tree.levels():
                    row = "".join(f"{value} " for value in level)
                    self.out.write(f"{row}- {len(level)}\n")
                return
            case _:
                return
        row = "".join(f"{value} " for value in values)
        self.out.write(f"{row}\n")


def main(argv: list[str] | None = None) -> int:
    """Run the interactive tree shell on standard input."""
    parser = argparse.ArgumentParser(
        prog="inttree", description="Interactive shell for two integer search trees."
    )
    parser.parse_args(argv)

    shell = Shell()
    shell.out.write(usage())
    try:
        shell.run(sys.stdin)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
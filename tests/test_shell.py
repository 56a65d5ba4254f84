import io
import random
import sys
from unittest import mock

import pytest

from inttree.shell import Shell, main, usage


def _make_shell():
    out = io.StringIO()
    return Shell(out=out, rng=random.Random(1)), out


def test_push_and_print():
    shell, out = _make_shell()
    for line in ("push 5", "push 3", "push 7"):
        assert shell.execute(line) is True
    shell.execute("print")
    assert out.getvalue() == str(shell.trees[0]) + "\n"
    assert list(shell.trees[0].inorder()) == [3, 5, 7]


def test_push_without_argument_uses_range():
    shell, _ = _make_shell()
    for _ in range(50):
        shell.execute("push")
    values = list(shell.trees[0].inorder())
    assert len(values) == 50
    assert all(0 <= v <= 10 for v in values)


def test_push_accepts_numeric_prefix():
    shell, _ = _make_shell()
    shell.execute("push 12abc")
    assert list(shell.trees[0].inorder()) == [12]


@pytest.mark.parametrize("argument", ["abc", "99999999999"])
def test_push_invalid_number_raises(argument):
    shell, _ = _make_shell()
    with pytest.raises(ValueError):
        shell.execute(f"push {argument}")


def test_remove_without_argument_raises():
    shell, _ = _make_shell()
    with pytest.raises(ValueError):
        shell.execute("remove")


def test_remove_value_and_duplicates():
    shell, _ = _make_shell()
    for value in (4, 4, 2, 6, 2, 6):
        shell.execute(f"push {value}")
    shell.execute("remove duplicates")
    assert list(shell.trees[0].inorder()) == [2, 4, 6]
    shell.execute("remove 4")
    assert list(shell.trees[0].inorder()) == [2, 6]


def test_traverse_inorder_output():
    shell, out = _make_shell()
    for value in (5, 3, 7):
        shell.execute(f"push {value}")
    shell.execute("traverse inorder")
    assert out.getvalue() == "3 5 7 \n"


def test_traverse_levels_output():
    shell, out = _make_shell()
    for value in (5, 3, 7):
        shell.execute(f"push {value}")
    shell.execute("traverse levels")
    assert out.getvalue() == "5 - 1\n3 7 - 2\n"


def test_traverse_orders_match_tree():
    shell, out = _make_shell()
    for value in (5, 3, 7, 1):
        shell.execute(f"push {value}")
    tree = shell.trees[0]
    shell.execute("traverse preorder")
    shell.execute("traverse postorder")
    lines = out.getvalue().split("\n")
    assert [int(v) for v in lines[0].split()] == list(tree.preorder())
    assert [int(v) for v in lines[1].split()] == list(tree.postorder())


def test_traverse_unknown_order_writes_nothing():
    shell, out = _make_shell()
    shell.execute("push 1")
    shell.execute("traverse sideways")
    assert out.getvalue() == ""


def test_switch_changes_tree():
    shell, out = _make_shell()
    shell.execute("switch")
    assert shell.cursor == 1
    assert out.getvalue() == "Переключено на 1\n"
    shell.execute("push 9")
    assert list(shell.trees[1].inorder()) == [9]
    assert not shell.trees[0]


def test_copy_to_other_tree():
    shell, out = _make_shell()
    for value in (5, 3, 7):
        shell.execute(f"push {value}")
    shell.execute("copy")
    assert out.getvalue() == "Скопировано из 0 в 1\n"
    assert list(shell.trees[1].preorder()) == list(shell.trees[0].preorder())
    shell.execute("increment")
    assert list(shell.trees[1].inorder()) == [3, 5, 7]


def test_height_and_clear():
    shell, out = _make_shell()
    for value in (1, 2, 3):
        shell.execute(f"push {value}")
    shell.execute("height")
    assert out.getvalue() == f"{shell.trees[0].height()}\n"
    shell.execute("clear")
    assert not shell.trees[0]


def test_increment():
    shell, _ = _make_shell()
    for value in (5, 3):
        shell.execute(f"push {value}")
    shell.execute("increment")
    assert list(shell.trees[0].inorder()) == [4, 6]


def test_usage_and_unknown():
    shell, out = _make_shell()
    shell.execute("usage")
    shell.execute("bogus")
    assert out.getvalue() == usage() + "Неизвестная команда\n"


def test_exit_returns_false():
    shell, _ = _make_shell()
    assert shell.execute("exit") is False


def test_run_stops_at_exit():
    shell, out = _make_shell()
    shell.run(["push 1\n", "exit\n", "push 2\n"])
    assert list(shell.trees[0].inorder()) == [1]
    assert out.getvalue() == "> > "


def test_cls_clears_screen():
    shell, _ = _make_shell()
    with mock.patch("inttree.shell.subprocess.run") as run:
        assert shell.execute("cls") is True
    assert run.call_count == 1


def test_main_runs_commands(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("push 4\nheight\nexit\n"))
    assert main([]) == 0
    captured = capsys.readouterr().out
    assert captured.startswith(usage())
    assert "> 1\n> " in captured


def test_main_reports_bad_number(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("push x\n"))
    assert main([]) == 1
    assert "error" in capsys.readouterr().err
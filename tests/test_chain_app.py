import io

import pytest

from listkit.chain_app import ChainShell, ListPool, main
from listkit.chain_table import LinkedList


@pytest.fixture
def shell():
    return ChainShell(io.StringIO(), ListPool())


def output(shell):
    return shell.out.getvalue()


def test_create_adds_list_to_pool(shell):
    shell.handle("1 1 foo\n")
    found = shell.pool.find("foo")
    assert found is not None
    assert found.name == "foo"
    assert output(shell).splitlines() == ["ok!"]


def test_create_duplicate_reports(shell):
    shell.handle("1 1 foo\n")
    shell.handle("1 1 foo\n")
    assert "list foo is already!" in output(shell)
    assert len(shell.pool) == 1


def test_create_without_name_does_nothing(shell):
    shell.handle("1 1\n")
    assert output(shell) == ""
    assert len(shell.pool) == 0


def test_destroy_removes_list(shell):
    shell.handle("1 1 foo\n")
    shell.handle("1 2 foo\n")
    assert shell.pool.find("foo") is None
    assert output(shell).count("ok!") == 2


def test_push_front_and_back(shell):
    shell.handle("1 1 foo\n")
    shell.handle("2 1 -2 foo 1\n")
    shell.handle("2 1 -1 foo 2\n")
    shell.handle("2 1 -2 foo 3\n")
    assert list(shell.pool.find("foo")) == [2, 1, 3]


def test_insert_at_position(shell):
    shell.handle("1 1 foo\n")
    shell.handle("2 1 -2 foo 1\n")
    shell.handle("2 1 -2 foo 3\n")
    shell.handle("2 1 1 foo 2\n")
    assert list(shell.pool.find("foo")) == [1, 2, 3]


def test_insert_bad_index_reports(shell):
    shell.handle("1 1 foo\n")
    shell.handle("2 1 5 foo 7\n")
    text = output(shell)
    assert "index error" in text
    assert "node add to foo fail!" in text
    assert len(shell.pool.find("foo")) == 0


def test_edit_missing_list(shell):
    shell.handle("2 1 -1 bar 1\n")
    assert output(shell).splitlines() == ["no list named bar!"]


def test_delete_operations(shell):
    shell.handle("1 1 foo\n")
    for value in (1, 2, 3, 4):
        shell.handle(f"2 1 -2 foo {value}\n")
    shell.handle("2 2 -1 foo\n")
    shell.handle("2 2 -2 foo\n")
    assert list(shell.pool.find("foo")) == [2, 3]
    shell.handle("2 2 1 foo\n")
    assert list(shell.pool.find("foo")) == [2]


def test_delete_invalid_position(shell):
    shell.handle("1 1 foo\n")
    shell.handle("2 2 9 foo\n")
    assert "pos is invalid!" in output(shell)


def test_delete_from_empty_is_silent(shell):
    shell.handle("1 1 foo\n")
    before = output(shell)
    shell.handle("2 2 -1 foo\n")
    assert output(shell) == before


def test_show_and_reverse(shell):
    shell.handle("1 1 foo\n")
    for value in (1, 2, 3):
        shell.handle(f"2 1 -2 foo {value}\n")
    shell.handle("4 foo\n")
    target = shell.pool.find("foo")
    assert list(target) == [3, 2, 1]
    assert target.render() in output(shell)


def test_adjacent_max_prints_first_of_pair(shell):
    shell.handle("1 1 foo\n")
    for value in (1, 9, 8, 2):
        shell.handle(f"2 1 -2 foo {value}\n")
    shell.handle("5 foo\n")
    assert "p->data:9" in output(shell)


def test_show_all_and_example_skip_ok(shell):
    shell.handle("1 1 a\n")
    shell.handle("1 1 b\n")
    shell.out.seek(0)
    shell.out.truncate()
    shell.handle("6\n")
    lines = output(shell).splitlines()
    assert lines == [lst.render() for lst in shell.pool]
    shell.handle("7\n")
    assert "ok!" not in output(shell)


def test_pool_full_raises():
    pool = ListPool(1)
    pool.add(LinkedList("a"))
    with pytest.raises(OverflowError):
        pool.add(LinkedList("b"))


def test_pool_reuses_first_free_slot():
    pool = ListPool(3)
    first, second, third = LinkedList("a"), LinkedList("b"), LinkedList("c")
    pool.add(first)
    pool.add(second)
    pool.remove(first)
    pool.add(third)
    assert [lst.name for lst in pool] == ["c", "b"]


def test_pool_remove_missing_raises():
    with pytest.raises(ValueError):
        ListPool().remove(LinkedList("x"))


def test_pool_find_empty_name():
    pool = ListPool()
    pool.add(LinkedList(""))
    assert pool.find("") is None


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1 1 foo\n2 1 -2 foo 4\n3 foo\n"))
    assert main([]) == 0
    text = capsys.readouterr().out
    assert "buf:1 1 foo\n" in text
    assert "{LIST-foo:1}-[4]" in text
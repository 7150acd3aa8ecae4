import io

from cpkit.records import count_records, main


def test_empty():
    assert count_records([]) == 0


def test_strictly_increasing_all_count():
    values = [1, 4, 9, 16, 25]
    assert count_records(values) == len(values)


def test_ties_count():
    values = [7] * 6
    assert count_records(values) == len(values)


def test_strictly_decreasing_only_first():
    assert count_records([9, 8, 7, 6]) == 1


def test_smaller_suffix_does_not_change():
    base = [3, 1, 5, 2]
    assert count_records(base + [4]) == count_records(base)


def test_appending_new_max_adds_one():
    base = [3, 1, 5, 2]
    assert count_records(base + [max(base)]) == count_records(base) + 1


def test_negative_values():
    values = [-5, -3, -4, -1]
    assert count_records(values) == count_records([v + 100 for v in values])


def test_accepts_generator():
    values = [2, 2, 3]
    assert count_records(iter(values)) == count_records(values)


def test_main_matches_library(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n3\n1 2 3\n4\n5 1 5 2\n"))
    assert main() == 0
    out = [int(x) for x in capsys.readouterr().out.split()]
    assert out == [count_records([1, 2, 3]), count_records([5, 1, 5, 2])]
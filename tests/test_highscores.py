import datetime

import pytest

from keystrike.highscores import (
    NUMBER_HIGHSCORES,
    Highscore,
    Timestamp,
    insert_new_highscore,
    load_highscores,
    lowest_highscore,
    store_highscores,
)


def _table(*scores):
    return [Highscore(f"p{score}", score, Timestamp()) for score in scores]


def test_store_writes_the_documented_line_format(tmp_path):
    path = tmp_path / "scores.txt"
    store_highscores([Highscore("alice", 120, Timestamp(21, 5, 3, 14, 7, 9))], path)
    assert path.read_text() == "alice@120 21 5 3 14 7 9\n"


def test_store_and_load_round_trip(tmp_path):
    path = tmp_path / "scores.txt"
    table = [
        Highscore("alice", 300, Timestamp(21, 6, 1, 10, 0, 5)),
        Highscore("bob smith", 200, Timestamp(20, 12, 31, 23, 59, 59)),
        Highscore("", 100, Timestamp()),
    ]
    store_highscores(table, path)
    assert load_highscores(path) == table


def test_load_reads_at_most_the_table_size(tmp_path):
    path = tmp_path / "scores.txt"
    path.write_text("".join(f"n{i}@{100 - i} 1 1 1 1 1 1\n" for i in range(8)))
    loaded = load_highscores(path)
    assert len(loaded) == NUMBER_HIGHSCORES
    assert [entry.username for entry in loaded] == ["n0", "n1", "n2", "n3", "n4"]


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_highscores(tmp_path / "absent.txt")


def test_load_malformed_line_raises(tmp_path):
    path = tmp_path / "scores.txt"
    path.write_text("no separator here\n")
    with pytest.raises(ValueError):
        load_highscores(path)


def test_insert_into_empty_table():
    scores = []
    stamp = Timestamp(22, 1, 2, 3, 4, 5)
    insert_new_highscore(scores, "amy", 50, stamp)
    assert scores == [Highscore("amy", 50, stamp)]


def test_insert_keeps_descending_order():
    scores = []
    for value in (40, 90, 10, 70, 55):
        insert_new_highscore(scores, f"u{value}", value, Timestamp())
    values = [entry.score for entry in scores]
    assert values == sorted(values, reverse=True)
    assert len(scores) == NUMBER_HIGHSCORES


def test_insert_into_full_table_drops_the_last():
    scores = _table(100, 90, 80, 70, 60)
    insert_new_highscore(scores, "top", 150, Timestamp())
    assert [entry.username for entry in scores] == ["top", "p100", "p90", "p80", "p70"]


def test_insert_tie_in_full_table_goes_after_existing():
    scores = _table(100, 90, 80, 70, 60)
    insert_new_highscore(scores, "x", 70, Timestamp())
    assert [entry.username for entry in scores] == ["p100", "p90", "p80", "p70", "x"]


def test_insert_tie_with_last_of_partial_table_goes_before_it():
    scores = _table(100)
    insert_new_highscore(scores, "b", 100, Timestamp())
    assert [entry.username for entry in scores] == ["b", "p100"]


def test_lowest_highscore():
    assert lowest_highscore(_table(100, 90)) == 0
    full = _table(100, 90, 80, 70, 60)
    assert lowest_highscore(full) == full[-1].score


def test_username_too_long_is_rejected():
    with pytest.raises(ValueError):
        Highscore("x" * 11, 1)


def test_timestamp_from_datetime():
    stamp = Timestamp.from_datetime(datetime.datetime(2021, 5, 3, 14, 7, 9))
    assert stamp == Timestamp(21, 5, 3, 14, 7, 9)


def test_timestamp_field_must_fit_a_byte():
    with pytest.raises(ValueError):
        Timestamp(year=256)
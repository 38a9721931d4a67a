from katas.floyd import floyd


def test_floyd_four_rows():
    assert floyd(4) == "1\n2 3\n4 5 6\n7 8 9 10"


def test_floyd_single_row():
    assert floyd(1) == "1"


def test_floyd_zero_rows_is_empty():
    assert floyd(0) == ""


def test_floyd_row_lengths_grow_by_one():
    rows = floyd(6).split("\n")
    assert [len(row.split()) for row in rows] == [1, 2, 3, 4, 5, 6]
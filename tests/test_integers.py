from katas.integers import add


def test_adder():
    assert add(2, 2) == 4


def test_add_example():
    assert add(1, 5) == 6
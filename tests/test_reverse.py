import pytest

from katas.reverse import reverse


@pytest.mark.parametrize(
    ("origin", "expected"),
    [
        ("(bar)", "rab"),
        ("foo(bar)baz", "foorabbaz"),
        ("foo(bar(baz))blim", "foobazrabblim"),
        ("(abc)d(efg)", "cbadgfe"),
        ("foobarbaz", "foobarbaz"),
        ("((bar))", "bar"),
        ("g(o)(((la)))(ng)", "goalgn"),
        ("foo()bar", "foobar"),
    ],
)
def test_reverse(origin, expected):
    assert reverse(origin) == expected


def test_reverse_rejects_unclosed_parenthesis():
    with pytest.raises(ValueError):
        reverse("ab)c(de")
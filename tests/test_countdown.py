import io
from unittest import mock

from katas.countdown import countdown, main


def test_countdown_output():
    buffer = io.StringIO()
    countdown(buffer, sleep=lambda seconds: None)
    assert buffer.getvalue() == "3\n2\n1\nGo!"


def test_countdown_sleeps_between_each_write():
    operations = []

    class SpyWriter:
        def write(self, text):
            operations.append("write")

    countdown(SpyWriter(), sleep=lambda seconds: operations.append("sleep"))

    assert operations == [
        "write",
        "sleep",
        "write",
        "sleep",
        "write",
        "sleep",
        "write",
    ]


def test_countdown_sleeps_one_second_each_time():
    durations = []
    countdown(io.StringIO(), sleep=durations.append)
    assert durations == [1, 1, 1]


def test_main_writes_to_stdout(capsys):
    with mock.patch("time.sleep") as fake_sleep:
        main([])
    assert capsys.readouterr().out == "3\n2\n1\nGo!"
    assert fake_sleep.call_count == 3
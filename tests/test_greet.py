import io
from wsgiref.util import setup_testing_defaults

from katas.greet import greet, greeter_app


def test_greet_writes_to_buffer():
    buffer = io.StringIO()
    greet(buffer, "Nicholas")
    assert buffer.getvalue() == "Hello, Nicholas"


def test_greeter_app_responds_with_world_greeting():
    environ: dict = {}
    setup_testing_defaults(environ)
    captured = {}

    def start_response(status, headers):
        captured["status"] = status
        captured["headers"] = dict(headers)

    body = b"".join(greeter_app(environ, start_response))

    assert body == b"Hello, world"
    assert captured["status"] == "200 OK"
    assert captured["headers"]["Content-Length"] == str(len(body))
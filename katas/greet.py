"""Greeting written to any text stream, served over HTTP."""

import argparse
import io
from collections.abc import Callable, Iterable
from typing import TextIO
from wsgiref.simple_server import make_server

DEFAULT_PORT = 5001


def greet(writer: TextIO, name: str) -> None:
    """Write a greeting for ``name`` to ``writer``."""
    writer.write(f"Hello, {name}")


def greeter_app(environ: dict, start_response: Callable) -> Iterable[bytes]:
    """WSGI application that greets the world."""
    buffer = io.StringIO()
    greet(buffer, "world")
    body = buffer.getvalue().encode("utf-8")
    start_response(
        "200 OK",
        [
            ("Content-Type", "text/plain; charset=utf-8"),
            ("Content-Length", str(len(body))),
        ],
    )
    return [body]


def main(argv: list[str] | None = None) -> None:
    """Serve the greeter on the given port until interrupted."""
    parser = argparse.ArgumentParser(description="Serve a greeting over HTTP.")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    args = parser.parse_args(argv)
    with make_server("", args.port, greeter_app) as server:
        server.serve_forever()
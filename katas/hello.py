"""Greetings in several languages."""

import argparse
import sys

_PREFIXES = {
    "Spanish": "Hola, ",
    "French": "Bonjour, ",
    "Danish": "Hej, ",
}
_DEFAULT_PREFIX = "Hello, "
_DEFAULT_NAME = "Nicholas"


def hello(name: str, language: str = "") -> str:
    """Greet ``name`` in ``language``, defaulting to English and to "World"."""
    return _PREFIXES.get(language, _DEFAULT_PREFIX) + (name or "World")


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="hello", description="Print a greeting.")
    parser.add_argument("name", nargs="?", default=_DEFAULT_NAME, help="who to greet")
    parser.add_argument(
        "-l",
        "--language",
        default="",
        help="Spanish, French or Danish; anything else greets in English",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Print a greeting for the name and language given on the command line."""
    args = _parser().parse_args(sys.argv[1:] if argv is None else argv)
    greeting = hello(args.name, args.language)
    print(greeting)
    return 0
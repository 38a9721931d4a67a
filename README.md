# katas

A collection of small, self-contained exercises, each solved and covered by
tests. Only the standard library is needed.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Commands

- `katas-hello [NAME] [-l LANGUAGE]` prints a greeting. `NAME` defaults to
  `Nicholas`; `--language` may be `Spanish`, `French` or `Danish`, and anything
  else greets in English.
- `katas-greet [--port PORT]` serves `Hello, world` as plain text over HTTP on
  every interface, port 5001 unless another is given, until interrupted.
- `katas-countdown` prints `3`, `2`, `1`, one second apart, then `Go!`.

## Modules

| Module | What it offers |
| --- | --- |
| `katas.sums` | `sum_numbers`, `sum_all`, `sum_all_tails` |
| `katas.greet` | `greet` writes a greeting to a text stream; `greeter_app` is a WSGI app; `main` |
| `katas.floyd` | `floyd` builds Floyd's triangle as text |
| `katas.hello` | `hello` greets in English, Spanish, French or Danish; `main` |
| `katas.integers` | `add` |
| `katas.iteration` | `repeat` |
| `katas.dictionary` | `Dictionary`, a `dict` with `search`, `add`, `update`, `delete` |
| `katas.countdown` | `countdown`, with an optional `sleep` function to use instead of `time.sleep`; `main` |
| `katas.wallet` | `Bitcoin` and `Wallet` with `deposit`, `withdraw` and a `balance` property |
| `katas.reverse` | `reverse` reverses text inside parentheses, innermost first |
| `katas.racer` | `racer` and `configurable_racer` return whichever of two URLs answers first |
| `katas.shapes` | `Rectangle`, `Circle`, `Triangle` (each with `area()`), `perimeter`, `area` |

## Examples

```python
from katas.hello import hello
from katas.reverse import reverse
from katas.floyd import floyd
from katas.wallet import Wallet
from katas.dictionary import Dictionary, WordNotFoundError

hello("Elodie", "Spanish")        # 'Hola, Elodie'
hello("", "")                     # 'Hello, World'
reverse("foo(bar(baz))blim")      # 'foobazrabblim'
print(floyd(4))
# 1
# 2 3
# 4 5 6
# 7 8 9 10

wallet = Wallet(20)
wallet.withdraw(10)
str(wallet.balance)               # '10 BTC'

words = Dictionary({"test": "this is just a test"})
words.search("test")              # 'this is just a test'
try:
    words.search("unknown")
except WordNotFoundError as error:
    print(error)                  # could not find the word you were looking for
```

## Errors

Errors are raised as exceptions:

- `Dictionary.search` raises `WordNotFoundError`, `add` raises
  `WordExistsError`, and `update` and `delete` raise `WordDoesNotExistError`;
  all three derive from `DictionaryError`.
- `Wallet.withdraw` raises `InsufficientFundsError` and leaves the balance
  unchanged.
- `configurable_racer` raises `RacerTimeoutError` (a `TimeoutError`) when
  neither URL answers within the timeout; `racer` uses ten seconds.
- `reverse` raises `ValueError` when a `(` has no `)` after it.

## Limits

`racer` only times requests: a URL that fails to connect or returns an error
still counts as having answered. The HTTP server behind `katas-greet` is the
standard library's single-threaded development server and always answers with
the same greeting.
"""Race two URLs and report which answers first."""

import queue
import threading
import urllib.request

DEFAULT_TIMEOUT = 10.0


class RacerTimeoutError(TimeoutError):
    """Neither URL answered in time."""


def _ping(url: str, done: "queue.Queue[str]") -> None:
    try:
        with urllib.request.urlopen(url):
            pass
    except (OSError, ValueError):
        pass
    done.put(url)


def configurable_racer(a: str, b: str, timeout: float = DEFAULT_TIMEOUT) -> str:
    """Return whichever of ``a`` and ``b`` answers first, within ``timeout`` seconds."""
    done: "queue.Queue[str]" = queue.Queue()
    for url in (a, b):
        threading.Thread(target=_ping, args=(url, done), daemon=True).start()
    try:
        return done.get(timeout=timeout)
    except queue.Empty:
        raise RacerTimeoutError(f"timed out waiting for {a} and {b}") from None


def racer(a: str, b: str) -> str:
    """Return whichever of ``a`` and ``b`` answers first, within ten seconds."""
    return configurable_racer(a, b, DEFAULT_TIMEOUT)
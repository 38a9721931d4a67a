"""Floyd's triangle."""


def floyd(number: int) -> str:
    """Return Floyd's triangle with ``number`` rows, rows separated by newlines."""
    rows = []
    current = 1
    for width in range(1, number + 1):
        rows.append(" ".join(str(n) for n in range(current, current + width)))
        current += width
    return "\n".join(rows)
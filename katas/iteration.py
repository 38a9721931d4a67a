"""String repetition."""


def repeat(character: str, count: int) -> str:
    """Return ``character`` repeated ``count`` times."""
    return character * count
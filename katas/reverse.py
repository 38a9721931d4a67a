"""Reverse the text inside parentheses, innermost first."""


def reverse(origin: str) -> str:
    """Reverse each parenthesised section, innermost first, dropping the parentheses."""
    result = origin
    while "(" in result and ")" in result:
        start = result.rindex("(")
        end = result.find(")", start)
        if end == -1:
            raise ValueError(f"unbalanced parentheses in {origin!r}")
        segment = result[start : end + 1]
        result = result.replace(segment, segment[-2:0:-1])
    return result
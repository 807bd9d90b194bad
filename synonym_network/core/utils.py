"""Utility functions for synonym graph operations."""


def normalize_word(word: str) -> str:
    """Trim and lower-case a word before lookup."""
    return word.strip().lower()


def edge_key(u: int, v: int) -> tuple[int, int]:
    """Unordered edge key with the smaller vertex first."""
    return (u, v) if u < v else (v, u)


def split_fields(line: str, delimiter: str) -> list[str]:
    """Split a source line into trimmed, non-empty fields."""
    fields = (field.strip() for field in line.split(delimiter))
    return [field for field in fields if field]

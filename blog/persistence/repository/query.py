"""Small helpers shared by the PostgreSQL repositories."""


def contains_pattern(text: str) -> str:
    """ILIKE pattern matching ``text`` anywhere, with wildcards escaped."""
    escaped = text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"

from datetime import datetime, timezone


def utcnow() -> datetime:
    """Naive UTC timestamp, matching what SQLite hands back."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def normalize_identifier(value) -> str:
    """Coerce a caller-supplied tag/reader identifier to its lookup form.

    Identifiers arrive from JSON bodies and query strings, so numeric values
    like 1001 must match a stored "1001".
    """
    if value is None:
        raise ValueError("identifier must not be null")
    if isinstance(value, bool):
        raise ValueError("identifier must be a string or number")
    return str(value)


def escape_like_prefix(s: str, escape: str = "!") -> tuple[str, str]:
    """Escapes %, _ and the escape char itself in a LIKE prefix.
    Returns (escaped_prefix, escape_char).
    """
    s = s.replace(escape, escape + escape)
    s = s.replace("%", escape + "%").replace("_", escape + "_")
    return s, escape


def clamp_page(limit: int, offset: int, max_limit: int = 1000) -> tuple[int, int]:
    return max(1, min(max_limit, limit)), max(0, offset)

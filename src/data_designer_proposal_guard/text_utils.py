from __future__ import annotations


def ensure_text(value: object, name: str = "text") -> str:
    """Return ``value`` as a string, mapping ``None`` to ``""``.

    Anything that is neither ``str`` nor ``None`` is a caller bug and raises
    ``TypeError`` instead of being coerced.
    """
    if value is None:
        return ""
    if not isinstance(value, str):
        raise TypeError(f"{name} must be str or None, got {type(value).__name__}")
    return value


def is_whitespace(text: str) -> bool:
    return not text.strip()

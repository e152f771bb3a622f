def to_uppercase(value: str | None) -> str | None:
    """
    Upper-case a settings value (e.g. "debug" -> "DEBUG"), leaving None alone.
    """
    if value is None:
        return None
    return value.strip().upper()


def to_lowercase(value: str | None) -> str | None:
    """
    Lower-case a settings value (e.g. "JSON" -> "json"), leaving None alone.
    """
    if value is None:
        return None
    return value.strip().lower()


def strip_message(value: str | None) -> str | None:
    """
    Trim surrounding whitespace from a user-facing message.
    A blank message collapses to None so the field default applies.
    """
    if value is None:
        return None
    value = value.strip()
    return value or None

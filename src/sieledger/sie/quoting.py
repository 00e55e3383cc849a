"""Field quoting for SIE records."""

import re

_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")


def quote(value: str) -> str:
    """Quote a field value for an SIE record.

    Control characters are removed first, then backslashes and double quotes
    are backslash-escaped and the result is wrapped in double quotes.

    Args:
        value: Raw field value

    Returns:
        Quoted field, e.g. ``"Bank \\"A\\""``
    """
    value = _CONTROL_CHARS.sub("", value)
    value = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{value}"'

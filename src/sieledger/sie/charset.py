"""Conversion between text and the SIE PC8 charset (code page 437)."""

from sieledger.domain.errors import EncodingError

WIRE_CHARSET = "cp437"


def to_wire_charset(text: str) -> bytes:
    """Encode a complete SIE document.

    Raises:
        EncodingError: If a character has no code page 437 representation
    """
    try:
        return text.encode(WIRE_CHARSET)
    except UnicodeEncodeError as e:
        char = e.object[e.start:e.end]
        raise EncodingError(
            f"Character {char!r} at position {e.start} cannot be encoded as PC8",
            position=e.start,
        ) from e


def from_wire_charset(data: bytes) -> str:
    """Decode a complete SIE document.

    Raises:
        EncodingError: If the bytes are not valid code page 437
    """
    try:
        return data.decode(WIRE_CHARSET)
    except UnicodeDecodeError as e:
        raise EncodingError(
            f"Byte sequence at position {e.start} is not valid PC8",
            position=e.start,
        ) from e

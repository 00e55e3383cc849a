"""SIE 4I exchange format codec."""

from sieledger.sie.quoting import quote
from sieledger.sie.charset import from_wire_charset, to_wire_charset
from sieledger.sie.tokenizer import tokenize
from sieledger.sie.document import decode_chart, encode, encode_chart

__all__ = [
    "quote",
    "from_wire_charset",
    "to_wire_charset",
    "tokenize",
    "encode",
    "encode_chart",
    "decode_chart",
]

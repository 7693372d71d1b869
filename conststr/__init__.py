"""String operations with exact semantics: case conversion, searching, encoding, escaping and hex decoding."""

__version__ = "0.1.0"

__all__ = [
    "asciiops",
    "binary",
    "byteseq",
    "case",
    "escape",
    "printable",
    "search",
]
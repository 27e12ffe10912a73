"""Encoding/decoding for color-coded text."""

from utcolor.codec.encoder import encode, encode_char, hex_dump
from utcolor.codec.decoder import DecodeError, count_markers, decode, parse_hex_dump

__all__ = [
    "encode",
    "encode_char",
    "hex_dump",
    "DecodeError",
    "count_markers",
    "decode",
    "parse_hex_dump",
]

# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2026 MuVeraAI Corporation

"""
Byte and hex helpers shared by the chain, codec and event modules.

Hex strings on the wire are lowercase and carry a ``0x`` prefix unless a
caller explicitly asks for the bare form.
"""

from __future__ import annotations

import re

_HEX_RE = re.compile(r"^(0[xX])?[0-9a-fA-F]*$")


def strip_0x(value: str) -> str:
    """Return ``value`` without a leading ``0x``."""
    return value[2:] if value[:2] in ("0x", "0X") else value


def is_hex_string(value: object, even_length: bool = True) -> bool:
    """
    Return True when ``value`` is a string of hex digits, optionally
    ``0x``-prefixed.  With ``even_length`` the digits must form whole bytes.
    """
    if not isinstance(value, str) or not _HEX_RE.match(value):
        return False
    return not even_length or len(strip_0x(value)) % 2 == 0


def bytes_to_hex(data: bytes, prefix: bool = True) -> str:
    """Encode ``data`` as lowercase hex, ``0x``-prefixed by default."""
    return ("0x" if prefix else "") + bytes(data).hex()


def hex_to_bytes(value: str) -> bytes:
    """
    Decode a hex string (with or without ``0x``) into bytes.

    Raises ``ValueError`` for non-hex characters or an odd digit count.
    """
    digits = strip_0x(value)
    if len(digits) % 2:
        raise ValueError(f"hex string has an odd number of digits: {value!r}")
    return bytes.fromhex(digits)


def concat_bytes(*parts: bytes) -> bytes:
    return b"".join(bytes(part) for part in parts)


def unicode_str_to_hex(text: str) -> str:
    """Encode ``text`` as UTF-16BE and return the bare hex digits."""
    return text.encode("utf-16-be", errors="surrogatepass").hex()


def unicode_hex_to_str(value: str) -> str:
    """
    Decode bare or prefixed UTF-16BE hex into text.

    Digits are read four at a time as code units.  Leftover digits at the end
    form one final, shorter code unit, so ``"0041ab"`` decodes to ``"A\\xab"``.
    Unpaired surrogates are replaced rather than rejected since the bytes
    usually come from a public registry.
    """
    digits = strip_0x(value)
    whole = len(digits) - len(digits) % 4
    text = bytes.fromhex(digits[:whole]).decode("utf-16-be", errors="replace")
    if whole < len(digits):
        text += chr(int(digits[whole:], 16))
    return text


def chain_id_bytes(chain_id: int | str) -> bytes:
    """Return the ASCII decimal representation of a chain identifier."""
    return str(int(chain_id)).encode("ascii")

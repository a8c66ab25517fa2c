"""Keyed XOR obfuscation for save file text.

This is obfuscation, not cryptography. There is no authentication and no key
derivation, and the fixed key is recoverable from a single file plus a little
known content (every save starts with `{`). Do not rely on it to protect
anything a player should not be able to read or edit.
"""

from __future__ import annotations

from typing import Final

ENCRYPTION_KEY: Final[str] = "Sacrosanct"


def xor_transform(text: str, key: str = ENCRYPTION_KEY) -> str:
    """XOR every code point of `text` with the repeating `key`.

    Applying the transform twice with the same key returns the input, so the
    same call both encrypts and decrypts.
    """
    if not key:
        raise ValueError("XOR key cannot be empty.")

    key_length = len(key)
    return "".join(
        chr(ord(character) ^ ord(key[index % key_length]))
        for index, character in enumerate(text)
    )

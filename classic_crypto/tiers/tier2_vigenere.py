"""
Tier 2 — POLYALPHABETIC: Vigenère Cipher
========================================
Each letter is shifted by the alphabet position of the matching key
letter. The key is extended cyclically to the message length by indexing
with `cursor % len(key)`; no padded copy of the key is ever built.

Key cursor rule: the cursor advances on EVERY character, spaces
included. A space is emitted unchanged but still uses up one key
position, so "A C" under "KEY" pairs A with K and C with Y:

    vigenere_encode("A C", "KEY")  =>  "K A"

Historical note: Blaise de Vigenère, 1586. Called "le chiffre
indéchiffrable" for 300 years, until Kasiski published his attack.

Alphabet: A-Z plus space. Key: non-empty A-Z.
"""

import logging

from ..alphabet import (
    SHIFT_CHARSET,
    SPACE,
    letter_offset,
    shift_by_letter,
    shift_char,
    validate_key,
    validate_message,
)

logger = logging.getLogger(__name__)


def vigenere_encode(message: str, key: str) -> str:
    """Use : vigenere_encode("A C", "KEY")
    => 'K A'
    """
    validate_key(key)
    validate_message(message, SHIFT_CHARSET)
    result = []
    cursor = 0
    for ch in message:
        if ch == SPACE:
            result.append(SPACE)
            cursor += 1     # spaces consume a key position
            continue
        result.append(shift_by_letter(ch, key[cursor % len(key)]))
        cursor += 1
    logger.debug(f"Vigenère encode: {len(message)} chars, key period={len(key)}")
    return "".join(result)


class VigenereCipher:
    """
    Vigenère cipher with a cyclically repeated key.

    encrypt() is vigenere_encode(); decrypt() walks the same key cursor
    and subtracts each key letter, so decrypt(encrypt(m)) == m.
    """

    def __init__(self, key: str):
        validate_key(key)
        self._key = key
        logger.info(f"VigenereCipher period={len(key)}")

    @property
    def key(self) -> str:
        return self._key

    def keystream(self, length: int) -> list:
        """Offsets (0-25) applied at cursor positions 0 .. length-1."""
        return [letter_offset(self._key[i % len(self._key)]) for i in range(length)]

    def encrypt(self, plaintext: str) -> str:
        return vigenere_encode(plaintext, self._key)

    def decrypt(self, ciphertext: str) -> str:
        validate_message(ciphertext, SHIFT_CHARSET, label="ciphertext")
        stream = self.keystream(len(ciphertext))
        # shift_char leaves spaces alone; their key slot is skipped with them
        plain = "".join(shift_char(ch, -k) for ch, k in zip(ciphertext, stream))
        logger.debug(f"Vigenère decode: {len(ciphertext)} chars, key period={len(self._key)}")
        return plain

    def __repr__(self):
        return f"VigenereCipher(period={len(self._key)})"

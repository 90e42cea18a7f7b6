"""
Tier 1 — MONOALPHABETIC: Caesar Shift
=====================================
Every letter moves the same number of places along A-Z.

Historical note: Suetonius records Julius Caesar using a shift of three.
Twenty-five useful keys; broken by hand in minutes. It survives here as
the simplest user of the shared shift primitive.

Decoding is encoding with the complementary shift (26 - s) % 26.

Alphabet: A-Z plus space (space passes through unchanged).
"""

import logging

from ..alphabet import SHIFT_CHARSET, ALPHABET_SIZE, InvalidInputError, shift_char, validate_message

logger = logging.getLogger(__name__)


def complement_shift(shift: int) -> int:
    """The shift that undoes `shift`."""
    return (ALPHABET_SIZE - shift) % ALPHABET_SIZE


def _check_shift(shift: int) -> None:
    if isinstance(shift, bool) or not isinstance(shift, int):
        raise InvalidInputError(f"Caesar shift must be an int, got {type(shift).__name__}.")
    lo, hi = CaesarCipher.SHIFT_RANGE
    if not lo <= shift <= hi:
        raise InvalidInputError(f"Caesar shift must be in [{lo}, {hi}], got {shift}.")


def caesar_encode(message: str, shift: int) -> str:
    """Use : caesar_encode("HELLO WORLD", 3)
    => 'KHOOR ZRUOG'
    """
    _check_shift(shift)
    validate_message(message, SHIFT_CHARSET)
    encoded = "".join(shift_char(ch, shift) for ch in message)
    logger.debug(f"Caesar encode: {len(message)} chars, shift={shift}")
    return encoded


class CaesarCipher:
    """Fixed-shift substitution over A-Z."""

    SHIFT_RANGE = (0, ALPHABET_SIZE - 1)

    def __init__(self, shift: int):
        _check_shift(shift)
        self._shift = shift
        logger.info(f"CaesarCipher shift={shift}")

    @property
    def shift(self) -> int:
        return self._shift

    def encrypt(self, plaintext: str) -> str:
        return caesar_encode(plaintext, self._shift)

    def decrypt(self, ciphertext: str) -> str:
        """Encrypt again with the complementary shift."""
        return caesar_encode(ciphertext, complement_shift(self._shift))

    def __repr__(self):
        return f"CaesarCipher(shift={self._shift})"

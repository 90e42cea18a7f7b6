"""
classic_crypto — Classical Cipher Tiers
=======================================
Three historical ciphers over uppercase English text, from fixed-shift
substitution to grid transposition.

Tiers:
    1  MONOALPHABETIC  — Caesar shift
    2  POLYALPHABETIC  — Vigenère (cyclic key, spaces consume key positions)
    3  TRANSPOSITION   — Scytale (padded column grid)

All operations are pure functions of their inputs. Invalid input raises
InvalidInputError (a ValueError).

License: Apache 2.0
"""

__version__  = "1.0.0"
__author__   = "classic_crypto contributors"
__project__  = "classic_crypto"

from .alphabet                import InvalidInputError, shift_char, shift_by_letter
from .tiers.tier1_caesar      import CaesarCipher, caesar_encode
from .tiers.tier2_vigenere    import VigenereCipher, vigenere_encode
from .tiers.tier3_scytale     import ScytaleCipher, scytale_encode, scytale_decode

__all__ = [
    "InvalidInputError",
    "shift_char",
    "shift_by_letter",
    "CaesarCipher",
    "caesar_encode",
    "VigenereCipher",
    "vigenere_encode",
    "ScytaleCipher",
    "scytale_encode",
    "scytale_decode",
]

"""
ALPHABET  |  Shared shift primitive
===================================
Letter arithmetic over the 26-letter uppercase English alphabet.

Two entry points, one rule:
  shift_char       numeric offset, wrapped with modulo 26
  shift_by_letter  offset taken from a key letter, wrapped with a
                   single conditional subtraction (max overshoot is 25)

Space is a fixed point for both: it is never enciphered.

The primitives here trust their callers. Input checking lives in the
validate_* helpers, which the cipher tiers call on every public entry.
"""

ALPHABET      = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
ALPHABET_SIZE = len(ALPHABET)
SPACE         = " "
PAD_CHAR      = "_"    # Scytale placeholder for a space / grid padding

SHIFT_CHARSET   = frozenset(ALPHABET + SPACE)
SCYTALE_CHARSET = frozenset(ALPHABET + PAD_CHAR)


class InvalidInputError(ValueError):
    """Raised when a message, key, shift or column count breaks its contract."""


def letter_offset(letter: str) -> int:
    """0-based position of `letter` in A-Z."""
    return ord(letter) - ord("A")


def shift_char(letter: str, offset: int) -> str:
    if letter == SPACE:
        return SPACE
    code = (ALPHABET.index(letter) + offset) % ALPHABET_SIZE
    return ALPHABET[code]


def shift_by_letter(letter: str, key_letter: str) -> str:
    """
    Shift `letter` forward by the alphabet position of `key_letter`.

    Uses direct code-point addition and one wrap instead of modulo;
    for offsets in [0, 25] this matches shift_char exactly.
    """
    if letter == SPACE:
        return SPACE
    code = ord(letter) + letter_offset(key_letter)
    if code > ord("Z"):
        code -= ALPHABET_SIZE
    return chr(code)


# ── validation ───────────────────────────────────────────────────────────────

def validate_message(message: str, charset: frozenset, label: str = "message") -> None:
    if not isinstance(message, str):
        raise InvalidInputError(f"{label} must be a str, got {type(message).__name__}.")
    for pos, ch in enumerate(message):
        if ch not in charset:
            allowed = "".join(sorted(charset - set(ALPHABET)))
            raise InvalidInputError(
                f"Invalid character {ch!r} at position {pos} in {label}; "
                f"expected A-Z or {allowed!r}."
            )


def validate_key(key: str) -> None:
    if not isinstance(key, str) or not key:
        raise InvalidInputError("Key must be a non-empty string of A-Z.")
    for pos, ch in enumerate(key):
        if ch not in ALPHABET:
            raise InvalidInputError(f"Invalid key character {ch!r} at position {pos}; expected A-Z.")

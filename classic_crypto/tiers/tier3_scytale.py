"""
Tier 3 — TRANSPOSITION: Scytale
===============================
Letters keep their identity and change their order.

The message is treated as a grid of `columns` columns and
rows = ceil(len / columns) rows. Short messages are right-padded with
'_' until the length is a multiple of `columns`.

    encode   output[i] = padded[col * rows + row]
             where row = i // columns, col = i % columns

    decode   for col in 0..columns-1, for row in 0..rows-1:
                 index = row * columns + col
                 emit encoded[index] if index < len(encoded)

decode() is the exact inverse of encode() over the PADDED message. The
round trip is therefore not lossless for unaligned lengths:

    scytale_encode("ABCDE", 2)   =>  "ADBEC_"
    scytale_decode("ADBEC_", 2)  =>  "ABCDE_"

Padding is never stripped; pad_message() exposes it so callers can
predict the output length.

Preconditions (raise InvalidInputError):
    0 < columns <= len(message)
    message drawn from A-Z and '_'

Historical note: the Spartan skytale, a strip of parchment wound round
a rod of fixed diameter. The rod's circumference is the column count.
"""

import logging
from typing import Tuple

from ..alphabet import PAD_CHAR, SCYTALE_CHARSET, InvalidInputError, validate_message

logger = logging.getLogger(__name__)


# ── grid arithmetic ──────────────────────────────────────────────────────────

def padded_length(length: int, columns: int) -> int:
    """Smallest multiple of `columns` that is >= `length`."""
    return -(-length // columns) * columns


def grid_shape(length: int, columns: int) -> Tuple[int, int]:
    """(rows, columns) of the grid holding `length` characters."""
    return -(-length // columns), columns


def pad_message(message: str, columns: int) -> str:
    return message + PAD_CHAR * (padded_length(len(message), columns) - len(message))


def _check(message: str, columns: int) -> None:
    validate_message(message, SCYTALE_CHARSET)
    if isinstance(columns, bool) or not isinstance(columns, int):
        raise InvalidInputError(f"Scytale columns must be an int, got {type(columns).__name__}.")
    if columns <= 0:
        raise InvalidInputError(f"Scytale columns must be positive, got {columns}.")
    if columns > len(message):
        raise InvalidInputError(
            f"Scytale columns ({columns}) exceed message length ({len(message)})."
        )


# ── public operations ────────────────────────────────────────────────────────

def scytale_encode(message: str, columns: int) -> str:
    _check(message, columns)
    padded = pad_message(message, columns)
    rows, _ = grid_shape(len(padded), columns)

    out = []
    for i in range(len(padded)):
        row, col = divmod(i, columns)
        out.append(padded[col * rows + row])

    logger.debug(f"Scytale encode: {len(message)} chars -> {len(padded)} chars (grid {rows}x{columns})")
    return "".join(out)


def scytale_decode(message: str, columns: int) -> str:
    _check(message, columns)
    rows, _ = grid_shape(len(message), columns)

    out = []
    for col in range(columns):
        for row in range(rows):
            index = row * columns + col
            if index < len(message):
                out.append(message[index])

    logger.debug(f"Scytale decode: {len(message)} chars (grid {rows}x{columns})")
    return "".join(out)


class ScytaleCipher:
    """Columnar transposition with a fixed column count."""

    def __init__(self, columns: int):
        if isinstance(columns, bool) or not isinstance(columns, int) or columns <= 0:
            raise InvalidInputError(f"Scytale columns must be a positive int, got {columns!r}.")
        self._columns = columns
        logger.info(f"ScytaleCipher columns={columns}")

    @property
    def columns(self) -> int:
        return self._columns

    def rows_for(self, message: str) -> int:
        """Number of grid rows `message` occupies."""
        return grid_shape(len(message), self._columns)[0]

    def encrypt(self, plaintext: str) -> str:
        """Pad to a multiple of `columns`, then transpose. Output may be longer than input."""
        return scytale_encode(plaintext, self._columns)

    def decrypt(self, ciphertext: str) -> str:
        """Undo the transposition. Padding underscores are kept."""
        return scytale_decode(ciphertext, self._columns)

    def __repr__(self):
        return f"ScytaleCipher(columns={self._columns})"

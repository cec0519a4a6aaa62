"""Conversions between payload lengths and CAN FD data length codes."""

from __future__ import annotations

_FD_LENGTHS = (12, 16, 20, 24, 32, 48, 64)

# Data length code -> number of payload bytes.
_DLC_TO_LEN: dict[int, int] = {code: code for code in range(9)}
_DLC_TO_LEN.update({9 + index: length for index, length in enumerate(_FD_LENGTHS)})
_LEN_TO_DLC: dict[int, int] = {length: code for code, length in _DLC_TO_LEN.items()}


def _round_up(length: int) -> int:
    if length <= 8:
        return length
    for candidate in _FD_LENGTHS:
        if length <= candidate:
            return candidate
    return 0


def len2dlc(length: int, return_raw: bool = False) -> int:
    """Return the data length code for ``length`` bytes, or the padded byte count if ``return_raw``.

    Lengths above 64 give 0.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    padded = _round_up(length)
    if return_raw:
        return padded
    if length > 64:
        return 0
    return _LEN_TO_DLC[padded]


def dlc2len(dlc: int) -> int:
    """Return the number of payload bytes for a data length code; unknown codes give 0."""
    return _DLC_TO_LEN.get(dlc, 0)
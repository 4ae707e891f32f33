from __future__ import annotations

import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)

# frame-rate corrections (29.97 fps NTSC vs 25 fps PAL)
NTSC_TO_PAL = 25.00 / 29.97
PAL_TO_NTSC = 29.97 / 25.00

_DIGITS = frozenset("0123456789")
_MULTS = (1_000, 60_000, 3_600_000)  # seconds, minutes, hours


def _is_digits(s: str) -> bool:
    return bool(s) and all(c in _DIGITS for c in s)


def is_timing(
    token: str,
    decimal_separator: str = ".",
    max_decimal_digits: int = 3,
    *,
    unbounded_hours: bool = False,
) -> bool:
    """
    Check a token like "00:00:14,800", "01:02.5" or "17".

    Up to 3 colon groups of 1-2 digits (hours, minutes, seconds), then an
    optional decimal group of 1..max_decimal_digits digits.
    """
    if not token:
        return False

    whole, sep, decimals = token.partition(decimal_separator)
    if sep:
        if not _is_digits(decimals) or len(decimals) > max_decimal_digits:
            return False

    groups = whole.split(":")
    if len(groups) > len(_MULTS):
        return False

    for i, group in enumerate(groups):
        if not _is_digits(group):
            return False
        if unbounded_hours and i == 0 and len(groups) == len(_MULTS):
            continue
        if len(group) > 2:
            return False

    return True


def parse_ms(
    token: str,
    decimal_separator: str = ".",
    max_decimal_digits: int = 3,
    *,
    unbounded_hours: bool = False,
) -> int:
    """
    Timing token -> milliseconds. Bad input is logged and counts as 0.
    """
    if not is_timing(token, decimal_separator, max_decimal_digits, unbounded_hours=unbounded_hours):
        logger.warning("Bad timing token %r, using 0", token)
        return 0

    whole, _sep, decimals = token.partition(decimal_separator)
    total = 0
    for value, mult in zip(reversed(whole.split(":")), _MULTS):
        total += int(value) * mult

    if decimals:
        # "4" -> 400ms, "45" -> 450ms, "456" -> 456ms
        total += int(decimals.ljust(3, "0")[:3])

    return total


def format_ms(
    ms: int,
    show_sign: bool = False,
    *,
    decimal_separator: str = ".",
    decimal_digits: int = 2,
    always_hours: bool = False,
) -> str:
    sign = ""
    if show_sign and ms >= 0:
        sign = "+"
    if ms < 0:
        sign = "-"
        ms = -ms

    h, rem = divmod(ms, 3_600_000)
    m, rem = divmod(rem, 60_000)
    s, ms2 = divmod(rem, 1_000)
    frac = ms2 // 10 ** (3 - decimal_digits)

    if always_hours:
        hours = f"{h:02d}:"
    elif h:
        hours = f"{h}:"
    else:
        hours = ""

    return f"{sign}{hours}{m:02d}:{s:02d}{decimal_separator}{frac:0{decimal_digits}d}"


def apply_ratio(ms: int, ratio: float) -> int:
    if ratio == 1.0:
        return ms

    scaled = ms * ratio
    # round half away from zero
    rounded = int(abs(scaled) + 0.5)
    return -rounded if scaled < 0 else rounded


@dataclass(frozen=True, slots=True)
class Transform:
    """
    Applied to every timestamp a writer emits: scale first, then shift.

    The flat offset is added after the ratio so it is never scaled itself.
    """

    ratio: float = 1.0
    add_offset_ms: int = 0

    def apply(self, ms: int) -> int:
        return max(apply_ratio(ms, self.ratio) + self.add_offset_ms, 0)

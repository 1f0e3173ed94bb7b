"""Duration strings for the starting clock times, e.g. ``"5m"``, ``"1h30m"``, ``"2min30sec"``."""

import re

from cclock.common.logger import log

DEFAULT_TIME = "5m"

_UNIT_SECONDS = {
    "h": 3600, "hr": 3600, "hrs": 3600,
    "m": 60, "min": 60, "mins": 60,
    "s": 1, "sec": 1, "secs": 1,
    "": 1,
}

# Longest units first so "min" never gets read as "m" + garbage.
_UNIT = "|".join(sorted((u for u in _UNIT_SECONDS if u), key=len, reverse=True))
_TOKEN = re.compile(rf"\s*(\d+)\s*({_UNIT})?", re.IGNORECASE)
_WHOLE = re.compile(rf"(?:\s*\d+\s*(?:{_UNIT})?)+\s*", re.IGNORECASE)


class DurationError(ValueError):
    """Raised for a duration string that can't be turned into a number of seconds."""


def parse_time_param(value):
    """Parse a duration string into seconds.

    The string is one or more ``<integer><unit>`` tokens that get summed. Units are
    ``h``/``hr``, ``m``/``min`` and ``s``/``sec`` (case-insensitive); a bare number is seconds.
    Anything else raises :class:`DurationError`, as does a total of zero.
    """
    if value is None:
        raise DurationError("Missing duration")
    text = str(value).strip()
    if not text or not _WHOLE.fullmatch(text):
        raise DurationError(
            f"Invalid duration '{value}': expected tokens like 90, 30s, 5m, 1h30m or 2min30sec")

    total = 0
    for amount, unit in _TOKEN.findall(text):
        total += int(amount) * _UNIT_SECONDS[unit.lower()]

    if total <= 0:
        raise DurationError(f"Invalid duration '{value}': must be longer than zero")
    return float(total)


# Resolves the two starting times. Each side falls back to the shared `t`, then to `default`.
def resolve_initial_times(t=None, t1=None, t2=None, default=DEFAULT_TIME):
    times = (
        parse_time_param(t1 or t or default),
        parse_time_param(t2 or t or default),
    )
    log.debug(f"Resolved initial times t={t!r} t1={t1!r} t2={t2!r} default={default!r} -> {times}")
    return times

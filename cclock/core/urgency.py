"""Maps how much of the time budget a player has used to a clock color.

Three stops: teal while safe, amber at the midpoint, red once critical. The
color holds flat below ``SAFE_PROGRESS`` and above ``DANGER_PROGRESS`` and
blends linearly in RGB between the stops.
"""

SAFE_PROGRESS = 1 / 3
DANGER_PROGRESS = 0.9
WARNING_PROGRESS = (SAFE_PROGRESS + DANGER_PROGRESS) / 2

SAFE_COLOR = (0, 255, 192)
WARNING_COLOR = (255, 192, 0)
CRITICAL_COLOR = (192, 0, 0)


def interpolate_color(color0, val0, color1, val1, val):
    """Blend two RGB colors by where ``val`` sits between ``val0`` and ``val1``."""
    w1 = (val - val0) / (val1 - val0)
    w0 = 1 - w1
    return tuple(round(w0 * c0 + w1 * c1) for c0, c1 in zip(color0, color1))


def progress_to_color(progress):
    """Return the ``(r, g, b)`` color for a progress value (0 = untouched budget, 1 = exhausted)."""
    if progress <= SAFE_PROGRESS:
        return SAFE_COLOR
    if progress < WARNING_PROGRESS:
        return interpolate_color(SAFE_COLOR, SAFE_PROGRESS, WARNING_COLOR, WARNING_PROGRESS, progress)
    if progress < DANGER_PROGRESS:
        return interpolate_color(WARNING_COLOR, WARNING_PROGRESS, CRITICAL_COLOR, DANGER_PROGRESS, progress)
    return CRITICAL_COLOR


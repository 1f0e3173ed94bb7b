import math


# Format remaining seconds for a clock face: H:MM:SS, M:SS, or S.CC under a minute. Always rounds up to the next
# centisecond so the display only reads 0.00 once time has truly run out. Negative values clamp to zero.
def format_time(seconds):
    seconds = max(0.0, float(seconds))
    # The nudge keeps float noise (0.29 * 100 == 28.999...) from bumping a whole centisecond.
    total = math.ceil(seconds * 100 - 1e-9)
    if seconds > 0:
        total = max(total, 1)
    total, csec = divmod(total, 100)
    total, sec = divmod(total, 60)
    hours, minutes = divmod(total, 60)

    if hours != 0:
        return f"{hours}:{minutes:02d}:{sec:02d}"
    if minutes != 0:
        return f"{minutes}:{sec:02d}"
    return f"{sec}.{csec:02d}"

"""Named palettes for everything except the urgency colors."""

THEMES = {
    "Midnight": {
        "bg": (0, 0, 0),
        "button_bg": (40, 40, 40),
        "button_fg": (200, 200, 200),
        "track_alpha": 0.25,
    },
    "Slate": {
        "bg": (28, 32, 38),
        "button_bg": (58, 64, 74),
        "button_fg": (225, 228, 232),
        "track_alpha": 0.2,
    },
    "Paper": {
        "bg": (245, 242, 235),
        "button_bg": (210, 205, 195),
        "button_fg": (40, 40, 40),
        "track_alpha": 0.3,
    },
}

DEFAULT_THEME = "Midnight"


def get_theme(name):
    return THEMES.get(name, THEMES[DEFAULT_THEME])

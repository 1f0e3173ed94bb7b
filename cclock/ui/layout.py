"""Screen geometry for the two clock faces and the control buttons.

Everything here is a pure function of the viewport size, cheap enough to run on
every resize.
"""

from dataclasses import dataclass, field

from cclock.ui.buttons import BUTTON_ORDER

SPACING_RATIO = 0.05
CONTROLS_GAP_RATIO = 0.25
BUTTON_RADIUS_RATIO = 0.08
ARC_THICKNESS_RATIO = 0.15
FONT_SIZE_RATIO = 0.35


@dataclass(frozen=True)
class Geometry:
    width: float
    height: float
    content_x: float = 0.0
    content_y: float = 0.0
    content_width: float = 0.0
    content_height: float = 0.0
    margin: float = 0.0
    center_x: float = 0.0
    center_y: float = 0.0
    clock_radius: float = 0.0
    arc_thickness: float = 0.0
    font_size: float = 0.0
    # (x, y) per player, left first
    clock_centers: tuple = ((0.0, 0.0), (0.0, 0.0))
    button_radius: float = 0.0
    # ButtonKind -> (x, y), in BUTTON_ORDER; empty when controls are hidden
    button_centers: dict = field(default_factory=dict)

    def contains(self, x, y):
        return 0 <= x < self.width and 0 <= y < self.height


# Width/height of the content block: outer margins, two clock faces, and the gap between them.
def content_ratio(show_controls=True):
    gap = CONTROLS_GAP_RATIO if show_controls else SPACING_RATIO
    return 2 - 2 * SPACING_RATIO + gap


def compute_layout(width, height, show_controls=True):
    if width <= 0 or height <= 0:
        return Geometry(width=max(0, width), height=max(0, height))

    ratio = content_ratio(show_controls)
    if width / height > ratio:
        content_height = height
        content_width = content_height * ratio
    else:
        content_width = width
        content_height = content_width / ratio

    margin = SPACING_RATIO * content_height
    gap = (CONTROLS_GAP_RATIO if show_controls else SPACING_RATIO) * content_height
    radius = content_height * 0.5 - margin
    cx = width * 0.5
    cy = height * 0.5
    offset = radius + gap * 0.5

    button_radius = 0.0
    button_centers = {}
    if show_controls:
        button_radius = BUTTON_RADIUS_RATIO * content_height
        step = 2 * button_radius + margin
        first = cy - step * (len(BUTTON_ORDER) - 1) / 2
        for i, kind in enumerate(BUTTON_ORDER):
            button_centers[kind] = (cx, first + step * i)

    return Geometry(
        width=width,
        height=height,
        content_x=(width - content_width) * 0.5,
        content_y=(height - content_height) * 0.5,
        content_width=content_width,
        content_height=content_height,
        margin=margin,
        center_x=cx,
        center_y=cy,
        clock_radius=radius,
        arc_thickness=radius * ARC_THICKNESS_RATIO,
        font_size=radius * FONT_SIZE_RATIO,
        clock_centers=((cx - offset, cy), (cx + offset, cy)),
        button_radius=button_radius,
        button_centers=button_centers,
    )

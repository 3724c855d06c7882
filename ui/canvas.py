"""
canvas.py — SVG Array Renderer
===============================
Pure rendering function: RunSnapshot → SVG string.

Each element is drawn as a coloured circle with its value in the
middle, laid out left-to-right and wrapping onto new rows.

Colouring (first match wins):
  • settled  → green
  • active   → red
  • otherwise a fixed per-index palette colour

Design decisions:
  - NO mutation.  The caller passes the snapshot and gets back a string.
  - Row count is derived from the array length, so the SVG height
    grows with the array instead of shrinking the circles.
"""

from typing import List, Optional, Tuple

from engine import RunSnapshot


# ---------------------------------------------------------------------------
# Visual Config — color palette, dimensions, fonts
# ---------------------------------------------------------------------------
class CanvasConfig:
    width:   int = 900
    padding: int = 24
    radius:  int = 32
    gap:     int = 14
    bg_dark:  str = "#1f2937"
    bg_light: str = "#ffffff"

    palette: Tuple[str, ...] = (
        "#60a5fa",   # blue
        "#facc15",   # yellow
        "#c084fc",   # purple
        "#f472b6",   # pink
        "#818cf8",   # indigo
        "#6b7280",   # grey
    )
    settled_color: str = "#22c55e"
    active_color:  str = "#ef4444"
    label_color:   str = "#ffffff"
    label_size:    int = 20


CONFIG = CanvasConfig()


def element_color(idx: int, active: Tuple[int, ...], settled: Tuple[int, ...], config: CanvasConfig = CONFIG) -> str:
    if idx in settled:
        return config.settled_color
    if idx in active:
        return config.active_color
    return config.palette[idx % len(config.palette)]


# ---------------------------------------------------------------------------
# Main Render Function
# ---------------------------------------------------------------------------
def render_canvas(
    snapshot: Optional[RunSnapshot],
    dark: bool = False,
    config: CanvasConfig = CONFIG,
) -> str:
    """
    Returns an SVG string.

    Args:
        snapshot : Published controller state (None renders an empty board).
        dark     : Dark-theme background.
        config   : Visual config.
    """
    values  = snapshot.array if snapshot else ()
    active  = snapshot.active if snapshot else ()
    settled = snapshot.settled if snapshot else ()

    cell = 2 * config.radius + config.gap
    per_row = max(1, (config.width - 2 * config.padding + config.gap) // cell)
    rows = max(1, -(-len(values) // per_row))
    height = 2 * config.padding + rows * cell - config.gap
    bg = config.bg_dark if dark else config.bg_light

    svg_parts: List[str] = [
        f'<svg width="{config.width}" height="{height}" '
        f'viewBox="0 0 {config.width} {height}" '
        f'xmlns="http://www.w3.org/2000/svg" class="array-canvas">',
        f'<rect width="{config.width}" height="{height}" rx="8" fill="{bg}"/>',
    ]

    # centre each row horizontally
    for idx, value in enumerate(values):
        row, col = divmod(idx, per_row)
        in_row = min(per_row, len(values) - row * per_row)
        row_width = in_row * cell - config.gap
        x0 = (config.width - row_width) / 2
        cx = x0 + col * cell + config.radius
        cy = config.padding + row * cell + config.radius
        svg_parts.append(_render_element(idx, value, cx, cy, element_color(idx, active, settled, config), config))

    svg_parts.append("</svg>")
    return "\n".join(svg_parts)


def _render_element(idx: int, value: int, cx: float, cy: float, fill: str, config: CanvasConfig) -> str:
    return "\n".join([
        f'<g class="element" data-index="{idx}">',
        f'  <circle cx="{cx}" cy="{cy}" r="{config.radius}" fill="{fill}"/>',
        f'  <text x="{cx}" y="{cy + 7}" text-anchor="middle" '
        f'font-size="{config.label_size}" font-family="\'DM Sans\', sans-serif" '
        f'fill="{config.label_color}" font-weight="600">{value}</text>',
        '</g>',
    ])

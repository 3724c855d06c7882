"""
ui/
---
Presentation layer.

    from ui import render_canvas
    from ui import playback_controls, algorithm_selector, …
"""

from ui.canvas import render_canvas, element_color, CanvasConfig

from ui.controls import (
    theme_toggle,
    algorithm_selector,
    array_controls,
    playback_controls,
    about_panel,
    metrics_panel,
    explanation_panel,
    notice_banner,
)

__all__ = [
    "render_canvas",
    "element_color",
    "CanvasConfig",
    "theme_toggle",
    "algorithm_selector",
    "array_controls",
    "playback_controls",
    "about_panel",
    "metrics_panel",
    "explanation_panel",
    "notice_banner",
]

"""
controls.py — UI Control Panels
=================================
Every UI panel is a pure function that takes state and returns HTML.

Panels:
  • theme_toggle        – dark / light switch
  • algorithm_selector  – dropdown, locked while a run is active
  • array_controls      – size + speed sliders and the Generate button
  • playback_controls   – Start, or Pause/Resume + Stop & Reset while running
  • about_panel         – "About <algorithm>" text
  • metrics_panel       – comparisons / swaps counters
  • explanation_panel   – what the latest step did
  • notice_banner       – user-visible errors

Design:
  - All panels are stateless render functions.
  - State is passed in as kwargs.
  - Output is raw HTML strings (no templating engine).
  - The main app stitches them together.
"""

from html import escape
from typing import List, Optional

from algorithms import AlgoInfo
from engine import RunSnapshot, RunState
from engine.config import SIZE_MIN, SIZE_MAX, DELAY_MAX_MS


# ---------------------------------------------------------------------------
# Theme Toggle
# ---------------------------------------------------------------------------
def theme_toggle(dark: bool = False) -> str:
    label = "Light Mode" if dark else "Dark Mode"
    return f"""<button id="btn-theme" class="btn-theme" data-dark="{'true' if dark else 'false'}">{label}</button>"""


# ---------------------------------------------------------------------------
# Algorithm Selector
# ---------------------------------------------------------------------------
def algorithm_selector(
    algorithms: List[AlgoInfo],
    selected_key: str = "bubble",
    disabled: bool = False,
) -> str:
    options = []
    for algo in algorithms:
        sel = 'selected' if algo.key == selected_key else ''
        options.append(f'<option value="{algo.key}" {sel}>{algo.label}</option>')

    return f"""
    <select id="algo-selector" {'disabled' if disabled else ''}>
      {''.join(options)}
    </select>
    """


# ---------------------------------------------------------------------------
# Size / Speed / Generate
# ---------------------------------------------------------------------------
def array_controls(
    size: int,
    delay_ms: int,
    running: bool = False,
    min_delay_ms: int = 50,
) -> str:
    lock = 'disabled' if running else ''
    return f"""
    <label class="slider">
      Array Size: <span id="size-val">{size}</span>
      <input type="range" id="size-slider" min="{SIZE_MIN}" max="{SIZE_MAX}" value="{size}" {lock}>
    </label>
    <label class="slider">
      Speed (ms): <span id="speed-val">{delay_ms}</span>
      <input type="range" id="speed-slider" min="{min_delay_ms}" max="{DELAY_MAX_MS}" step="50" value="{delay_ms}">
    </label>
    <button id="btn-generate" class="btn-secondary" {lock}>Generate Array</button>
    """


# ---------------------------------------------------------------------------
# Playback Controls
# ---------------------------------------------------------------------------
def playback_controls(state: RunState = RunState.IDLE) -> str:
    if state not in (RunState.RUNNING, RunState.PAUSED):
        return """
        <button id="btn-start" class="btn-primary">Start Sorting</button>
        <button id="btn-instant" class="btn-secondary" title="Sort without animation">Instant</button>
        """

    pause_label = "Resume" if state is RunState.PAUSED else "Pause"
    return f"""
    <button id="btn-pause" class="btn-warning">{pause_label}</button>
    <button id="btn-reset" class="btn-danger">Stop &amp; Reset</button>
    """


# ---------------------------------------------------------------------------
# About Panel
# ---------------------------------------------------------------------------
def about_panel(info: Optional[AlgoInfo]) -> str:
    if info is None:
        return """<div class="about"><strong>About:</strong> select an algorithm.</div>"""
    return f"""
    <div class="about">
      <strong>About {escape(info.label)}:</strong> {escape(info.description)}
      <span class="complexity">Time {escape(info.complexity_time)} · Space {escape(info.complexity_space)}</span>
    </div>
    """


# ---------------------------------------------------------------------------
# Metrics Panel
# ---------------------------------------------------------------------------
def metrics_panel(snapshot: Optional[RunSnapshot] = None) -> str:
    comparisons = snapshot.comparisons if snapshot else 0
    swaps       = snapshot.swaps if snapshot else 0
    return f"""
    <div>Comparisons: <span class="metric" id="metric-comparisons">{comparisons}</span></div>
    <div>Swaps: <span class="metric" id="metric-swaps">{swaps}</span></div>
    """


# ---------------------------------------------------------------------------
# Explanation Panel
# ---------------------------------------------------------------------------
def explanation_panel(explanation: str = "") -> str:
    if not explanation:
        explanation = "Press <strong>Start Sorting</strong> to watch the algorithm step by step."
        return f"""<div class="explanation-text">{explanation}</div>"""
    return f"""<div class="explanation-text">{escape(explanation)}</div>"""


# ---------------------------------------------------------------------------
# Notice Banner
# ---------------------------------------------------------------------------
def notice_banner(notice: str = "") -> str:
    if not notice:
        return ""
    return f"""<div class="notice" role="alert">{escape(notice)}</div>"""

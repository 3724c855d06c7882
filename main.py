"""
main.py — Sorting Visualizer Flask App
========================================
The web server that powers the visualizer.

Routes:
  GET  /                       – main UI
  GET  /api/state              – current published state (JSON)
  POST /api/config/algo        – select algorithm
  POST /api/config/size        – set array size (regenerates)
  POST /api/config/speed       – set step delay in ms
  POST /api/config/theme       – persist dark / light theme
  POST /api/array/generate     – new random array
  POST /api/run                – start the selected algorithm
  POST /api/run/instant        – sort with no animation
  POST /api/pause              – pause / resume
  POST /api/reset              – stop & restore the original array
  POST /api/tick               – host-loop tick; advances when a step is due

State management:
  Each browser session gets its own RunController, kept in an in-memory
  ControllerStore keyed by a random id stored in the Flask session.
  Past MAX_SESSIONS entries the least recently used one is dropped.
  The theme flag lives in the session cookie itself so it survives
  server restarts.

  The client polls /api/tick every 50 ms while a run is active.  The
  controller only advances when its scheduler says the next step is
  due, so the per-step delay is honoured server-side.
"""

import logging
import secrets
import threading
from collections import OrderedDict
from contextlib import contextmanager
from typing import Iterator, Optional, Tuple

from flask import Flask, current_app, jsonify, render_template_string, request, session

from algorithms import get_algorithm, list_algorithms
from engine import RunConfig, RunController, RunSnapshot, POLL_INTERVAL_MS
from engine.config import DEFAULT_ALGORITHM, DEFAULT_DELAY_MS, DEFAULT_SIZE, DELAY_MIN_MS
from ui import (
    render_canvas,
    theme_toggle,
    algorithm_selector,
    array_controls,
    playback_controls,
    about_panel,
    metrics_panel,
    explanation_panel,
    notice_banner,
)


logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Per-session controllers
# ---------------------------------------------------------------------------
class ControllerStore:
    """
    Session id → RunController, each guarded by its own lock.

    Holds at most `max_entries` sessions; checking out a new one evicts
    the least recently used.  A request still holding an evicted
    controller keeps working on it, the next request for that session
    simply starts over.
    """

    def __init__(self, factory, max_entries: int = 256):
        self._factory = factory
        self._max_entries = max(1, max_entries)
        self._entries: "OrderedDict[str, Tuple[RunController, threading.Lock]]" = OrderedDict()
        self._lock = threading.Lock()

    @contextmanager
    def checkout(self, sid: str) -> Iterator[RunController]:
        with self._lock:
            if sid not in self._entries:
                self._entries[sid] = (self._factory(), threading.Lock())
                logger.debug("New controller for session %s", sid)
                while len(self._entries) > self._max_entries:
                    evicted, _ = self._entries.popitem(last=False)
                    logger.info("Evicted session %s", evicted)
            else:
                self._entries.move_to_end(sid)
            controller, lock = self._entries[sid]
        with lock:
            yield controller

    def __contains__(self, sid: str) -> bool:
        return sid in self._entries

    def __len__(self) -> int:
        return len(self._entries)


# ---------------------------------------------------------------------------
# App factory
# ---------------------------------------------------------------------------
def create_app(test_config: Optional[dict] = None) -> Flask:
    app = Flask(__name__)
    app.config.from_mapping(
        SECRET_KEY=secrets.token_hex(32),
        DEFAULT_ALGORITHM=DEFAULT_ALGORITHM,
        DEFAULT_SIZE=DEFAULT_SIZE,
        DEFAULT_DELAY_MS=DEFAULT_DELAY_MS,
        MIN_DELAY_MS=DELAY_MIN_MS,
        MAX_SESSIONS=256,
        LOG_LEVEL="INFO",
    )
    app.config.from_prefixed_env("SORTVIS")
    if test_config:
        app.config.from_mapping(test_config)

    def new_controller() -> RunController:
        config = RunConfig(
            algorithm=app.config["DEFAULT_ALGORITHM"],
            size=int(app.config["DEFAULT_SIZE"]),
            delay_ms=int(app.config["DEFAULT_DELAY_MS"]),
        )
        return RunController(config=config, min_delay_ms=int(app.config["MIN_DELAY_MS"]))

    app.extensions["controllers"] = ControllerStore(
        new_controller, max_entries=int(app.config["MAX_SESSIONS"]),
    )
    _register_routes(app)
    return app


# ---------------------------------------------------------------------------
# Session helpers
# ---------------------------------------------------------------------------
def _session_id() -> str:
    if "sid" not in session:
        session["sid"] = secrets.token_hex(16)
    return session["sid"]


@contextmanager
def _controller() -> Iterator[RunController]:
    store: ControllerStore = current_app.extensions["controllers"]
    with store.checkout(_session_id()) as controller:
        yield controller


def _is_dark() -> bool:
    return bool(session.get("dark_theme", False))


def _json_body() -> dict:
    """The JSON body as a dict; anything else (missing, malformed, a list) reads as {}."""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def _int_arg(key: str) -> Optional[int]:
    """Read an integer from the JSON body; None if missing or not a finite number."""
    try:
        return int(_json_body()[key])
    except (KeyError, TypeError, ValueError, OverflowError):
        return None


def _fragments(controller: RunController) -> dict:
    """Everything the client re-renders after a state change."""
    snap: RunSnapshot = controller.snapshot()
    return {
        "state":       snap.to_dict(),
        "svg":         render_canvas(snap, dark=_is_dark()),
        "playback":    playback_controls(snap.state),
        "metrics":     metrics_panel(snap),
        "explanation": explanation_panel(snap.explanation),
        "notice":      notice_banner(snap.notice),
        "algo_selector": algorithm_selector(list_algorithms(), snap.algorithm, disabled=snap.running),
        "array_controls": array_controls(
            snap.size, snap.delay_ms, running=snap.running, min_delay_ms=controller.min_delay_ms,
        ),
        "about":       about_panel(get_algorithm(snap.algorithm)),
    }


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------
def _register_routes(app: Flask) -> None:

    @app.route("/")
    def index():
        with _controller() as controller:
            parts = _fragments(controller)
        dark = _is_dark()
        return render_template_string(
            INDEX_TEMPLATE,
            dark=dark,
            theme=theme_toggle(dark),
            poll_ms=POLL_INTERVAL_MS,
            **parts,
        )

    @app.route("/api/state")
    def api_state():
        with _controller() as controller:
            return jsonify(controller.snapshot().to_dict())

    # -- configuration --
    @app.route("/api/config/algo", methods=["POST"])
    def api_config_algo():
        key = _json_body().get("algo_key", "")
        if not isinstance(key, str):
            return jsonify({"error": "algo_key must be a string"}), 400
        with _controller() as controller:
            if not controller.set_algorithm(key):
                return jsonify({"error": "Cannot change algorithm while sorting"}), 409
            return jsonify(_fragments(controller))

    @app.route("/api/config/size", methods=["POST"])
    def api_config_size():
        size = _int_arg("size")
        if size is None:
            return jsonify({"error": "size must be an integer"}), 400
        with _controller() as controller:
            if not controller.set_size(size):
                return jsonify({"error": "Cannot resize while sorting"}), 409
            return jsonify(_fragments(controller))

    @app.route("/api/config/speed", methods=["POST"])
    def api_config_speed():
        delay = _int_arg("delay_ms")
        if delay is None:
            return jsonify({"error": "delay_ms must be an integer"}), 400
        with _controller() as controller:
            controller.set_delay(delay)
            return jsonify({"delay_ms": controller.config.delay_ms})

    @app.route("/api/config/theme", methods=["POST"])
    def api_config_theme():
        data = _json_body()
        session["dark_theme"] = bool(data.get("dark", not _is_dark()))
        session.permanent = True
        with _controller() as controller:
            parts = _fragments(controller)
        return jsonify({"dark": session["dark_theme"], "theme": theme_toggle(session["dark_theme"]), "svg": parts["svg"]})

    # -- array --
    @app.route("/api/array/generate", methods=["POST"])
    def api_array_generate():
        with _controller() as controller:
            if not controller.regenerate():
                return jsonify({"error": "Cannot generate while sorting"}), 409
            return jsonify(_fragments(controller))

    # -- run lifecycle --
    @app.route("/api/run", methods=["POST"])
    def api_run():
        with _controller() as controller:
            if controller.is_active:
                return jsonify(_fragments(controller))
            if not controller.start():
                body = _fragments(controller)
                body["error"] = controller.notice
                return jsonify(body), 400
            return jsonify(_fragments(controller))

    @app.route("/api/run/instant", methods=["POST"])
    def api_run_instant():
        with _controller() as controller:
            if controller.is_active:
                return jsonify({"error": "Already sorting"}), 409
            controller.run_to_completion()
            if controller.notice:
                body = _fragments(controller)
                body["error"] = controller.notice
                return jsonify(body), 400
            return jsonify(_fragments(controller))

    @app.route("/api/pause", methods=["POST"])
    def api_pause():
        with _controller() as controller:
            controller.pause_resume()
            return jsonify(_fragments(controller))

    @app.route("/api/reset", methods=["POST"])
    def api_reset():
        with _controller() as controller:
            controller.reset()
            return jsonify(_fragments(controller))

    @app.route("/api/tick", methods=["POST"])
    def api_tick():
        with _controller() as controller:
            advanced = controller.tick()
            body = _fragments(controller)
            body["advanced"] = advanced
            if controller.is_active:
                # leave the sliders alone while the user may be dragging them
                for key in ("algo_selector", "array_controls", "about"):
                    body.pop(key)
            return jsonify(body)


# ---------------------------------------------------------------------------
# HTML Template
# ---------------------------------------------------------------------------
INDEX_TEMPLATE = """
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Sorting Visualizer</title>
  <link rel="preconnect" href="https://fonts.googleapis.com">
  <link rel="preconnect" href="https://fonts.gstatic.com" crossorigin>
  <link href="https://fonts.googleapis.com/css2?family=DM+Sans:wght@400;500;700&display=swap" rel="stylesheet">
  <style>
    * { margin: 0; padding: 0; box-sizing: border-box; }

    :root {
      --bg: #f9fafb;
      --panel: #ffffff;
      --text: #111827;
      --about-bg: #d1d5db;
      --about-text: #1f2937;
    }
    body.dark {
      --bg: #111827;
      --panel: #1f2937;
      --text: #ffffff;
      --about-bg: #374151;
      --about-text: #f3f4f6;
    }

    body {
      font-family: 'DM Sans', -apple-system, BlinkMacSystemFont, sans-serif;
      background: var(--bg);
      color: var(--text);
      display: flex;
      flex-direction: column;
      align-items: center;
      padding: 24px 16px;
      min-height: 100vh;
      transition: background 0.5s, color 0.5s;
    }

    header, section, footer, #canvas-container { width: 100%; max-width: 1280px; }
    header { display: flex; justify-content: space-between; align-items: center; margin-bottom: 24px; }
    h1 { font-size: 2.25rem; font-weight: 700; }

    #controls {
      display: flex; flex-wrap: wrap; gap: 16px;
      align-items: center; justify-content: center; margin-bottom: 24px;
    }
    #controls select { padding: 8px; border-radius: 4px; min-width: 200px; background: #e5e7eb; color: #000; }
    .slider { display: flex; flex-direction: column; align-items: center; font-size: 0.875rem; min-width: 150px; }
    .slider input { width: 100%; }

    button { padding: 8px 16px; border: none; border-radius: 4px; color: #fff; cursor: pointer; }
    button:disabled { opacity: 0.5; cursor: not-allowed; }
    .btn-theme     { background: #facc15; color: #000; }
    .btn-primary   { background: #2563eb; }
    .btn-secondary { background: #374151; }
    .btn-warning   { background: #f97316; }
    .btn-danger    { background: #dc2626; }

    .about {
      margin-bottom: 32px; padding: 8px 16px; border-radius: 4px;
      background: var(--about-bg); color: var(--about-text);
    }
    .complexity { float: right; opacity: 0.7; }
    .notice { margin-bottom: 16px; padding: 8px 16px; border-radius: 4px; background: #fee2e2; color: #991b1b; }

    #canvas-container {
      display: flex; justify-content: center; margin-bottom: 24px; padding: 16px;
      border-radius: 4px; background: var(--panel); box-shadow: 0 4px 6px rgba(0,0,0,0.1);
    }
    #canvas-svg svg { max-width: 100%; height: auto; }
    #explanation { text-align: center; margin-bottom: 16px; min-height: 1.5em; opacity: 0.8; }

    footer { display: flex; justify-content: center; gap: 32px; font-size: 1.125rem; }
    .metric { font-weight: 700; }
  </style>
</head>
<body class="{{ 'dark' if dark else '' }}">
  <header>
    <h1>Sorting Visualizer</h1>
    <div id="theme">{{ theme|safe }}</div>
  </header>

  <section id="controls">
    <div id="algo">{{ algo_selector|safe }}</div>
    <div id="array-controls">{{ array_controls|safe }}</div>
    <div id="playback">{{ playback|safe }}</div>
  </section>

  <section id="notice">{{ notice|safe }}</section>
  <section id="about">{{ about|safe }}</section>

  <div id="canvas-container">
    <div id="canvas-svg">{{ svg|safe }}</div>
  </div>
  <section id="explanation">{{ explanation|safe }}</section>

  <footer id="metrics">{{ metrics|safe }}</footer>

  <script>
    const POLL_MS = {{ poll_ms }};
    let polling = null;

    async function post(url, data) {
      const res = await fetch(url, {
        method: 'POST',
        headers: {'Content-Type': 'application/json'},
        body: JSON.stringify(data || {}),
      });
      return await res.json();
    }

    function apply(data) {
      if (data.svg !== undefined) document.getElementById('canvas-svg').innerHTML = data.svg;
      if (data.playback !== undefined) document.getElementById('playback').innerHTML = data.playback;
      if (data.metrics !== undefined) document.getElementById('metrics').innerHTML = data.metrics;
      if (data.explanation !== undefined) document.getElementById('explanation').innerHTML = data.explanation;
      if (data.notice !== undefined) document.getElementById('notice').innerHTML = data.notice;
      if (data.about !== undefined) document.getElementById('about').innerHTML = data.about;
      if (data.algo_selector !== undefined) document.getElementById('algo').innerHTML = data.algo_selector;
      if (data.array_controls !== undefined) document.getElementById('array-controls').innerHTML = data.array_controls;
      if (data.state) syncPolling(data.state.running);
    }

    function syncPolling(running) {
      if (running && polling === null) {
        polling = setInterval(async () => apply(await post('/api/tick')), POLL_MS);
      } else if (!running && polling !== null) {
        clearInterval(polling);
        polling = null;
      }
    }

    // controls are re-rendered, so listen on the document
    document.addEventListener('click', async (e) => {
      const id = e.target.id;
      if (id === 'btn-start')    apply(await post('/api/run'));
      if (id === 'btn-instant')  apply(await post('/api/run/instant'));
      if (id === 'btn-pause')    apply(await post('/api/pause'));
      if (id === 'btn-reset')    apply(await post('/api/reset'));
      if (id === 'btn-generate') apply(await post('/api/array/generate'));
      if (id === 'btn-theme') {
        const dark = e.target.dataset.dark !== 'true';
        const data = await post('/api/config/theme', {dark: dark});
        document.body.classList.toggle('dark', data.dark);
        document.getElementById('theme').innerHTML = data.theme;
        document.getElementById('canvas-svg').innerHTML = data.svg;
      }
    });

    document.addEventListener('change', async (e) => {
      if (e.target.id === 'algo-selector') {
        apply(await post('/api/config/algo', {algo_key: e.target.value}));
      }
      if (e.target.id === 'size-slider') {
        apply(await post('/api/config/size', {size: +e.target.value}));
      }
      if (e.target.id === 'speed-slider') {
        await post('/api/config/speed', {delay_ms: +e.target.value});
      }
    });

    document.addEventListener('input', (e) => {
      if (e.target.id === 'size-slider')  document.getElementById('size-val').textContent = e.target.value;
      if (e.target.id === 'speed-slider') document.getElementById('speed-val').textContent = e.target.value;
    });

    syncPolling({{ 'true' if state.running else 'false' }});
  </script>
</body>
</html>
"""


app = create_app()


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    logging.basicConfig(
        level=app.config["LOG_LEVEL"],
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Sorting Visualizer on http://localhost:5000")
    app.run(debug=True, host="0.0.0.0", port=5000)

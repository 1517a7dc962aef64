import logging
import os
import time

import click
from flask import Flask, g, request

from hotserve.counter import VersionCounter
from hotserve.resolver import resolve
from hotserve.responses import build_response, version_response

COUNTER_KEY = "hotserve.counter"


def status_color(status: int) -> str:
    if 200 <= status < 300:
        return "green"
    if 400 <= status < 600:
        return "red"
    return "yellow"


def format_request_line(status: int, elapsed_ms: float, path: str, now=None) -> str:
    """One console line per request: time, colored status, elapsed, path."""
    stamp = time.strftime("%H:%M:%S", time.localtime(now))
    status_text = click.style(str(status), fg=status_color(status))
    return f"{stamp} {status_text} {elapsed_ms:.3f}ms {path}"


def create_app(source_root, counter: VersionCounter = None) -> Flask:
    """
    Builds the Flask app serving ``source_root`` with live reload.

    Args:
        source_root: Directory whose files are served.
        counter: Shared reload counter; a fresh one is made if omitted.
    """
    app = Flask(__name__, static_folder=None)
    app.config["SOURCE_ROOT"] = os.path.abspath(source_root)
    app.extensions[COUNTER_KEY] = counter if counter is not None else VersionCounter()

    # Every request gets our own log line instead.
    logging.getLogger("werkzeug").setLevel(logging.ERROR)

    @app.before_request
    def start_timer():
        g.request_started = time.perf_counter()

    @app.after_request
    def log_request(response):
        started = g.get("request_started", time.perf_counter())
        elapsed_ms = (time.perf_counter() - started) * 1000
        click.echo(format_request_line(response.status_code, elapsed_ms, request.path))
        return response

    @app.route("/hot")
    def hot():
        return version_response(app.extensions[COUNTER_KEY])

    @app.route("/", defaults={"path": ""})
    @app.route("/<path:path>")
    def serve_file(path):
        return build_response(resolve(app.config["SOURCE_ROOT"], path))

    return app

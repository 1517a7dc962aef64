import threading
import webbrowser
from dataclasses import dataclass
from pathlib import Path

import click
from werkzeug.serving import make_server

from hotserve import __version__
from hotserve.app import create_app
from hotserve.counter import VersionCounter
from hotserve.watcher import SourceWatcher, WatcherError

# --- Configuration ---
HOST = "127.0.0.1"  # Loopback only
PORT = 8080
SOURCE_DIR = "."
OPEN_URL_DELAY = 1.0  # Seconds before the browser is launched
# -------------------


@dataclass
class ServerConfig:
    source_root: Path
    port: int = PORT
    open_browser: bool = False
    host: str = HOST

    @property
    def url(self) -> str:
        return f"http://{self.host}:{self.port}"


def open_browser(url: str):
    """Best effort: a failed launch is reported and the server keeps running."""
    try:
        opened = webbrowser.open(url)
    except (webbrowser.Error, OSError) as e:
        click.secho(f"Could not open browser automatically: {e}", fg="yellow", err=True)
        return
    if not opened:
        click.secho(f"Could not open browser automatically, please open {url} manually.", fg="yellow", err=True)


def schedule_browser(url: str, delay: float = OPEN_URL_DELAY) -> threading.Timer:
    timer = threading.Timer(delay, open_browser, args=(url,))
    timer.daemon = True
    timer.start()
    return timer


def print_banner(config: ServerConfig):
    click.echo(f"Online at {click.style(config.url, fg='cyan', bold=True)}")
    click.echo(f"Serving directory: {config.source_root}")
    click.echo("Press Ctrl+C to stop the server.")


def run(config: ServerConfig):
    """Watches the source root and serves it until interrupted."""
    counter = VersionCounter()
    watcher = SourceWatcher(config.source_root, counter)
    try:
        watcher.start()
    except WatcherError as e:
        raise click.ClickException(str(e)) from e

    try:
        app = create_app(config.source_root, counter)
        try:
            httpd = make_server(config.host, config.port, app, threaded=True)
        except OSError as e:
            raise click.ClickException(f"Could not bind {config.host}:{config.port}: {e}") from e

        if config.open_browser:
            schedule_browser(config.url)
        print_banner(config)

        try:
            httpd.serve_forever()
        except KeyboardInterrupt:
            click.echo("\nServer stopped.")
        finally:
            httpd.server_close()
    finally:
        watcher.stop()


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("-o", "--open", "open_", is_flag=True, help="Open the site in the default browser.")
@click.option("-p", "--port", type=click.IntRange(0, 65535), default=PORT, show_default=True, help="TCP port to listen on.")
@click.option(
    "-d",
    "--dir",
    "dir_",
    type=click.Path(file_okay=False, path_type=Path),
    default=SOURCE_DIR,
    show_default=True,
    help="The path to the source directory.",
)
@click.argument("directory", required=False, type=click.Path(file_okay=False, path_type=Path))
@click.version_option(__version__, prog_name="hotserve")
def main(open_, port, dir_, directory):
    """Launch a static website server with live reload."""
    source_root = (directory if directory is not None else dir_).resolve()
    run(ServerConfig(source_root=source_root, port=port, open_browser=open_))


if __name__ == "__main__":
    main()

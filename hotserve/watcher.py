import os

from watchdog.events import (
    EVENT_TYPE_CREATED,
    EVENT_TYPE_DELETED,
    EVENT_TYPE_MODIFIED,
    EVENT_TYPE_MOVED,
    FileSystemEventHandler,
)
from watchdog.observers import Observer

from hotserve.counter import VersionCounter

# Opened/closed events are excluded: serving a file reads it, and counting
# those reads would make every page load trigger another reload.
CHANGE_EVENTS = frozenset(
    {EVENT_TYPE_CREATED, EVENT_TYPE_MODIFIED, EVENT_TYPE_DELETED, EVENT_TYPE_MOVED}
)


class WatcherError(Exception):
    """Raised when the source directory cannot be watched."""


class ChangeHandler(FileSystemEventHandler):
    """Bumps the version counter on every change under the watched tree."""

    def __init__(self, counter: VersionCounter):
        super().__init__()
        self.counter = counter

    def on_any_event(self, event):
        if event.event_type not in CHANGE_EVENTS:
            return
        self.counter.increment()


class SourceWatcher:
    """
    Owns the watchdog observer for the source directory.

    Args:
        source_root: Directory to watch recursively.
        counter: Counter incremented on each change event.
    """

    def __init__(self, source_root, counter: VersionCounter):
        self.source_root = os.path.abspath(source_root)
        self.counter = counter
        self.handler = ChangeHandler(counter)
        self.observer = None

    def start(self):
        if not os.path.isdir(self.source_root):
            raise WatcherError(f"Watch path '{self.source_root}' is not a valid directory.")

        observer = Observer()
        try:
            observer.schedule(self.handler, self.source_root, recursive=True)
            observer.start()
        except OSError as e:
            raise WatcherError(f"Failed to watch '{self.source_root}': {e}") from e

        self.observer = observer
        return self

    def stop(self):
        if self.observer is None:
            return
        self.observer.stop()
        self.observer.join()
        self.observer = None

    def __enter__(self):
        return self.start()

    def __exit__(self, exc_type, exc, tb):
        self.stop()

import os
from typing import NamedTuple, Optional

from werkzeug.security import safe_join

INDEX_FILE = "index.html"


class ResolvedFile(NamedTuple):
    data: Optional[bytes]
    extension: str
    status: int
    path: Optional[str] = None

    @property
    def found(self) -> bool:
        return self.status == 200


def file_extension(path: str) -> str:
    """Text after the last '.' of the final path segment, or '' if there is none."""
    name = os.path.basename(path)
    if "." not in name:
        return ""
    return name.rsplit(".", 1)[1]


def _read_file(path: Optional[str]) -> Optional[bytes]:
    if path is None or not os.path.isfile(path):
        return None
    try:
        with open(path, "rb") as f:
            return f.read()
    except OSError:
        return None


def _candidates(source_root: str, request_path: str):
    if not request_path:
        yield safe_join(source_root, INDEX_FILE)
        return

    yield safe_join(source_root, request_path)
    yield safe_join(source_root, request_path, INDEX_FILE)


def resolve(source_root, request_path: str) -> ResolvedFile:
    """
    Maps a request path to file bytes under the source root.

    An empty path is the site index. Otherwise the path itself is tried,
    then ``<path>/index.html``. Paths that would escape the root are
    treated as missing.

    Args:
        source_root: The directory being served.
        request_path: The request path without its leading '/'.

    Returns:
        ResolvedFile with status 200 and the bytes read, or status 404.
    """
    source_root = os.fspath(source_root)
    for candidate in _candidates(source_root, request_path):
        data = _read_file(candidate)
        if data is not None:
            return ResolvedFile(data, file_extension(candidate), 200, candidate)

    return ResolvedFile(None, file_extension(request_path), 404)

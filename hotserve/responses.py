import mimetypes
import os

from flask import Response

from hotserve.resolver import ResolvedFile

SNIPPET_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), "hot.html")

with open(SNIPPET_PATH, "rb") as _f:
    RELOAD_SNIPPET = _f.read()

HTML_EXTENSION = "html"


def guess_mimetype(extension: str):
    """MIME type for a bare extension ('css', 'png'), or None when unknown."""
    if not extension:
        return None
    mimetype, _ = mimetypes.guess_type(f"file.{extension}", strict=False)
    return mimetype


def inject_snippet(data: bytes, extension: str) -> bytes:
    """Appends the reload snippet to HTML that decodes as UTF-8."""
    if extension != HTML_EXTENSION:
        return data
    try:
        data.decode("utf-8")
    except UnicodeDecodeError:
        return data
    return data + RELOAD_SNIPPET


def build_response(resolved: ResolvedFile) -> Response:
    if not resolved.found:
        return Response(b"", status=404)

    body = inject_snippet(resolved.data, resolved.extension)
    response = Response(body, status=200)

    mimetype = guess_mimetype(resolved.extension)
    if mimetype is None:
        # Flask fills in its default content type otherwise.
        del response.headers["Content-Type"]
    else:
        response.mimetype = mimetype
    return response


def version_response(counter) -> Response:
    return Response(str(counter.value), status=200, mimetype="text/plain")

from hotserve.resolver import ResolvedFile
from hotserve.responses import RELOAD_SNIPPET, build_response, guess_mimetype, inject_snippet


def test_snippet_polls_hot_endpoint():
    text = RELOAD_SNIPPET.decode("utf-8")
    assert "/hot" in text
    assert "location.reload()" in text


def test_html_gets_snippet_suffix():
    assert inject_snippet(b"<p>x</p>", "html") == b"<p>x</p>" + RELOAD_SNIPPET


def test_other_extensions_untouched():
    for ext in ("css", "js", "htm", "HTML", ""):
        assert inject_snippet(b"body{}", ext) == b"body{}"


def test_invalid_utf8_html_untouched():
    data = b"<p>\xff\xfe</p>"
    assert inject_snippet(data, "html") == data


def test_guess_mimetype():
    assert guess_mimetype("html") == "text/html"
    assert guess_mimetype("css") == "text/css"
    assert guess_mimetype("png") == "image/png"
    assert guess_mimetype("") is None
    assert guess_mimetype("definitelynotatype") is None


def test_not_found_response_is_empty():
    response = build_response(ResolvedFile(None, "js", 404))
    assert response.status_code == 404
    assert response.get_data() == b""


def test_unknown_extension_has_no_content_type():
    response = build_response(ResolvedFile(b"data", "", 200))
    assert response.status_code == 200
    assert "Content-Type" not in response.headers
    assert response.get_data() == b"data"

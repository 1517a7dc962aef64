import pytest

from hotserve.app import create_app
from hotserve.counter import VersionCounter


@pytest.fixture
def site(tmp_path):
    root = tmp_path / "site"
    root.mkdir()
    return root


@pytest.fixture
def counter():
    return VersionCounter()


@pytest.fixture
def client(site, counter):
    app = create_app(site, counter)
    app.config["TESTING"] = True
    return app.test_client()

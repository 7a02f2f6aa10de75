"""
Module: conftest.py

Global pytest configuration and fixtures for the movieBrowser test suite.
Forces the offscreen Qt platform so window tests run headless.
"""

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from movieBrowser.metadata.core.models import MovieItem
from movieBrowser.gui.controller import FetchController


@pytest.fixture(autouse=True)
def debug_log(tmp_path, monkeypatch):
    """Send log_debug output to a per-test file instead of the package dir."""
    path = tmp_path / "debug.log"
    monkeypatch.setattr("movieBrowser.settings.LOG_PATH", path)
    return path


@pytest.fixture
def movies():
    return (
        MovieItem(id=1, title="A", poster_path="/a.jpg"),
        MovieItem(id=2, title="B", poster_path="/b.jpg", overview="Second", release_date="2021-05-01", vote_average=7.4),
        MovieItem(id=3, title="C"),
    )


@pytest.fixture
def make_controller(qtbot):
    """
    Build FetchControllers from plain fetch/decode callables and join their
    worker threads at teardown.
    """
    created = []

    def factory(fetch=None, decode=None, endpoint="/movie/popular"):
        controller = FetchController(
            fetch or (lambda endpoint: b"{}"),
            decode or (lambda raw: ()),
            endpoint,
        )
        created.append(controller)
        return controller

    yield factory

    for controller in created:
        controller.wait(5000)


@pytest.fixture
def loaded_controller(make_controller, movies, qtbot):
    """A controller whose fetch already succeeded with ``movies``."""
    controller = make_controller(decode=lambda raw: movies)
    with qtbot.waitSignal(controller.result_changed, timeout=2000):
        controller.start()
    return controller

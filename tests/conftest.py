import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtCore import QCoreApplication

from pattern_playground.behavioral.command import Light, RemoteControl


@pytest.fixture(scope="session")
def qapp():
    """
    Ensure a QCoreApplication exists for tests that use QObjects.
    """
    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    yield app


@pytest.fixture
def light(qapp):
    return Light("Living room")


@pytest.fixture
def remote(qapp):
    return RemoteControl()

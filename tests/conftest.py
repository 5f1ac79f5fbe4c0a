"""
Shared fixtures for the DocView tests
"""

import os
import time

# Must be set before the QApplication is created
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtCore import QCoreApplication
from PySide6.QtWidgets import QApplication

from docview.core.asset_store import DirectoryAssetStore
from docview.core.worker_pool import WorkerPool


class FakeSurface:
    """Render target recording what it was asked to display"""

    def __init__(self, calls=None):
        self.calls = calls if calls is not None else []

    def show_blank(self):
        self.calls.append(("blank",))

    def show_html(self, content, base_url, mime_type, encoding):
        self.calls.append(("html", content, base_url, mime_type, encoding))


@pytest.fixture(scope="session", autouse=True)
def qapp():
    """Create the QApplication shared by all tests"""
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def wait_until():
    """Spin the Qt event loop until a condition holds or the timeout expires"""
    def _wait_until(predicate, timeout=5.0):
        deadline = time.monotonic() + timeout
        while time.monotonic() < deadline:
            QCoreApplication.processEvents()
            if predicate():
                return True
            time.sleep(0.01)
        QCoreApplication.processEvents()
        return predicate()
    return _wait_until


@pytest.fixture
def pool():
    """A private worker pool, shut down after the test"""
    worker_pool = WorkerPool(max_threads=8)
    yield worker_pool
    worker_pool.shutdown()


@pytest.fixture
def make_surface():
    return FakeSurface


@pytest.fixture
def surface():
    return FakeSurface()


@pytest.fixture
def asset_dir(tmp_path):
    """Directory with a few Markdown assets"""
    (tmp_path / "help.md").write_text("# Title\n\nBody text", encoding="utf-8")
    (tmp_path / "empty.md").write_bytes(b"")
    (tmp_path / "changelog.md").write_text("# Changelog\n\n- First release\n", encoding="utf-8")
    return tmp_path


@pytest.fixture
def store(asset_dir):
    return DirectoryAssetStore(asset_dir)

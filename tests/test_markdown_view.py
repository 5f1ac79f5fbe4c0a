"""
Tests for the MarkdownView widget
"""

import sys
import types

import pytest
import shiboken6
from PySide6.QtCore import QObject, QUrl
from PySide6.QtWidgets import QTextBrowser, QWidget

from docview.core.config import BASE_URL, ENCODING, LEGACY_PROFILE_QT_VERSIONS, MIME_TYPE
from docview.ui import compat
from docview.ui.compat import SurfaceContext
from docview.ui.dialogs.document_dialog import DocumentDialog
from docview.ui.widgets import markdown_view
from docview.ui.widgets.markdown_view import MarkdownView


class FakeWebSurface(QWidget):
    """Stands in for QWebEngineView"""

    def __init__(self, context):
        super().__init__()
        self.context = context
        self.contents = []
        self.urls = []

    def setContent(self, data, mime_type, base_url):
        self.contents.append((data, mime_type, base_url))

    def setUrl(self, url):
        self.urls.append(url)


@pytest.fixture
def view(store):
    widget = MarkdownView(store=store, use_webengine=False)
    yield widget
    widget.deleteLater()


def test_text_browser_surface_by_default(store, monkeypatch):
    monkeypatch.delenv("DOCVIEW_USE_WEBENGINE", raising=False)

    widget = MarkdownView(store=store)

    assert widget.uses_webengine is False
    assert isinstance(widget.surface, QTextBrowser)


def test_show_html(view):
    changes = []
    view.content_changed.connect(changes.append)

    view.show_html("<h1>Title</h1><p>Body text</p>", BASE_URL, MIME_TYPE, ENCODING)

    assert "Title" in view.surface.toPlainText()
    assert "Body text" in view.surface.toPlainText()
    assert view.surface.document().baseUrl() == QUrl(BASE_URL)
    assert view.current_html() == "<h1>Title</h1><p>Body text</p>"
    assert changes == ["<h1>Title</h1><p>Body text</p>"]


def test_show_blank_clears_content(view):
    view.show_html("<p>Body text</p>", BASE_URL)

    view.show_blank()

    assert view.surface.toPlainText() == ""
    assert view.current_html() == ""


def test_load_asset_renders_document(view, pool, wait_until):
    view.load_asset("help.md", pool=pool)

    assert wait_until(lambda: "<h1>Title</h1>" in view.current_html())
    assert "Body text" in view.surface.toPlainText()


def test_load_missing_asset_blanks_view(view, pool, wait_until):
    view.load_asset("help.md", pool=pool)
    assert wait_until(lambda: view.current_html() != "")

    view.load_asset("missing.md", pool=pool)

    assert wait_until(lambda: view.current_html() == "")
    assert wait_until(lambda: pool.pending_count() == 0)
    assert view.surface.toPlainText() == ""


def test_load_blank_name_is_synchronous(view, pool):
    view.show_html("<p>old</p>", BASE_URL)

    view.load_asset("  ", pool=pool)

    assert view.current_html() == ""
    assert pool.started is False


def test_deleted_view_ignores_late_result(store, pool, wait_until):
    widget = MarkdownView(store=store, use_webengine=False)
    widget.load_asset("help.md", pool=pool)
    shiboken6.delete(widget)

    assert wait_until(lambda: pool.pending_count() == 0)


def test_web_surface_rendering(store, monkeypatch):
    monkeypatch.setattr(markdown_view, "_create_web_surface", FakeWebSurface)

    widget = MarkdownView(store=store, use_webengine=True)
    widget.show_html("<h1>Tïtle</h1>", BASE_URL, MIME_TYPE, ENCODING)
    widget.show_blank()

    assert widget.uses_webengine is True
    assert widget.surface.contents == [
        ("<h1>Tïtle</h1>".encode("utf-8"), "text/html;charset=UTF-8", QUrl("local://")),
    ]
    assert widget.surface.urls == [QUrl("about:blank")]


def test_web_surface_context_on_legacy_qt(store, monkeypatch):
    monkeypatch.setattr(markdown_view, "_create_web_surface", FakeWebSurface)
    monkeypatch.setattr(compat, "qVersion", lambda: LEGACY_PROFILE_QT_VERSIONS[-1])

    widget = MarkdownView(store=store, use_webengine=True)

    assert widget.surface.context.off_the_record is True


def test_document_dialog_shows_asset(store, wait_until):
    dialog = DocumentDialog(title="Help", asset_name="help.md", store=store, use_webengine=False)

    assert dialog.windowTitle() == "Help"
    assert wait_until(lambda: "<h1>Title</h1>" in dialog.view.current_html())

    dialog.load_asset("changelog.md")
    assert wait_until(lambda: "<h1>Changelog</h1>" in dialog.view.current_html())


def test_base_url_is_set_before_content(view):
    seen = []
    set_html = view.surface.setHtml

    def recording_set_html(html):
        seen.append(view.surface.document().baseUrl())
        set_html(html)

    view.surface.setHtml = recording_set_html

    view.show_html("<p><img src=\"logo.png\"></p>", BASE_URL, MIME_TYPE, ENCODING)

    assert seen == [QUrl(BASE_URL)]
    assert view.surface.document().baseUrl() == QUrl(BASE_URL)


def test_off_the_record_profile_is_owned_by_its_page(monkeypatch):
    """The page is torn down before the profile it renders with"""
    class QWebEngineProfile(QObject):
        pass

    class QWebEnginePage(QObject):
        def __init__(self, profile, parent=None):
            super().__init__(parent)
            self.profile = profile

    class QWebEngineView(QWidget):
        def setPage(self, page):
            self.page = page

    monkeypatch.setitem(sys.modules, "PySide6.QtWebEngineCore",
                        types.SimpleNamespace(QWebEngineProfile=QWebEngineProfile, QWebEnginePage=QWebEnginePage))
    monkeypatch.setitem(sys.modules, "PySide6.QtWebEngineWidgets",
                        types.SimpleNamespace(QWebEngineView=QWebEngineView))

    surface = markdown_view._create_web_surface(SurfaceContext(use_webengine=True, off_the_record=True))

    page = surface.page
    assert page.parent() is surface
    assert page.profile.parent() is page

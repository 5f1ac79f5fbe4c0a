# docview/ui/widgets/markdown_view.py - Markdown document view
"""
Embeddable widget that shows a bundled Markdown document

The document is read and converted in the background (see
docview.core.asset_loader) and rendered through either QtWebEngine or a
QTextBrowser, depending on the surface context.
"""

import logging

from PySide6.QtCore import QUrl, Signal
from PySide6.QtWidgets import QTextBrowser, QVBoxLayout, QWidget

from docview.core.asset_loader import load_asset
from docview.core.asset_store import DirectoryAssetStore
from docview.core.config import (
    BLANK_URL, ENCODING, MIME_TYPE, MISSING_ENGINE_MARKERS, MISSING_ENGINE_MESSAGE,
    use_webengine_default,
)
from docview.ui.compat import SurfaceContext, patch_context
from docview.ui.notifications import show_error_toast

logger = logging.getLogger(__name__)


def close_on_missing_engine(host, exception, notifier=None):
    """
    Handle a failure to construct a MarkdownView inside ``host``

    A missing QtWebEngine runtime is reported to the user and the host is
    closed. Any other exception is re-raised.

    Args:
        host: The widget that tried to provision the view
        exception: What the construction raised
        notifier: Callable(parent, message) showing a transient error,
            defaults to show_error_toast
    """
    message = str(exception)
    if any(marker in message for marker in MISSING_ENGINE_MARKERS):
        notifier = notifier or show_error_toast
        logger.error(f"Failed to load QtWebEngine, closing {host.__class__.__name__}: {message}", exc_info=exception)
        notifier(host, MISSING_ENGINE_MESSAGE)
        host.close()
    else:
        raise exception


def _create_web_surface(context):
    """Build a QWebEngineView; raises if QtWebEngine is unavailable"""
    from PySide6.QtWebEngineCore import QWebEnginePage, QWebEngineProfile
    from PySide6.QtWebEngineWidgets import QWebEngineView

    view = QWebEngineView()
    if context.off_the_record:
        # A profile constructed without a storage name is off the record.
        # The page owns the profile, so the page is destroyed before it.
        profile = QWebEngineProfile()
        page = QWebEnginePage(profile, view)
        profile.setParent(page)
        view.setPage(page)
    return view


class MarkdownView(QWidget):
    """
    Widget displaying one Markdown asset as HTML

    Implements the render surface interface (show_blank/show_html) used by
    the asset loader.
    """

    # Emitted with the HTML now shown ("" for a blank page)
    content_changed = Signal(str)

    def __init__(self, parent=None, store=None, use_webengine=None):
        """
        Initialize the view

        Raises whatever constructing the render surface raises, e.g.
        ImportError when QtWebEngine is requested but not installed. Hosts
        pass such failures to close_on_missing_engine().

        Args:
            parent: Parent widget
            store: Asset store to read documents from, defaults to the
                bundled assets directory
            use_webengine: Render with QtWebEngine instead of a QTextBrowser;
                None uses the DOCVIEW_USE_WEBENGINE setting
        """
        super().__init__(parent)
        if use_webengine is None:
            use_webengine = use_webengine_default()
        self.asset_store = store if store is not None else DirectoryAssetStore()
        self._html = ""

        context = patch_context(SurfaceContext(use_webengine=use_webengine))
        self.uses_webengine = context.use_webengine
        self.surface = self._create_surface(context)

        layout = QVBoxLayout()
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self.surface)
        self.setLayout(layout)

    def _create_surface(self, context):
        if context.use_webengine:
            return _create_web_surface(context)

        browser = QTextBrowser()
        browser.setOpenExternalLinks(True)
        browser.setReadOnly(True)
        return browser

    def load_asset(self, asset_name, pool=None):
        """
        Load a bundled Markdown asset into the view (asynchronous)

        Args:
            asset_name: Asset name relative to the store; None/blank shows
                a blank page
            pool: Optional WorkerPool handle, defaults to the shared pool
        """
        load_asset(asset_name, self, self.asset_store, pool=pool)

    def show_blank(self):
        """Display an empty page"""
        if self.uses_webengine:
            self.surface.setUrl(QUrl(BLANK_URL))
        else:
            self.surface.clear()
        self._set_current("")

    def show_html(self, content, base_url, mime_type=MIME_TYPE, encoding=ENCODING):
        """
        Display HTML content

        Args:
            content: HTML document or fragment
            base_url: Base for resolving relative references
            mime_type: Content type of ``content``
            encoding: Text encoding used to hand the content to the surface
        """
        if self.uses_webengine:
            self.surface.setContent(content.encode(encoding), f"{mime_type};charset={encoding}", QUrl(base_url))
        else:
            # Base first so relative references resolve against it
            self.surface.document().setBaseUrl(QUrl(base_url))
            self.surface.setHtml(content)
        self._set_current(content)

    def current_html(self):
        """Return the HTML last shown, or "" for a blank page"""
        return self._html

    def _set_current(self, html):
        self._html = html
        self.content_changed.emit(html)

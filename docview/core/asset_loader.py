# docview/core/asset_loader.py - Background loading of Markdown assets
"""
Asset loading for document views

Reads a bundled Markdown asset and converts it to HTML on the shared worker
pool, then hands the result back to the GUI thread where it is rendered
into the target view. The view is only held weakly: if it is gone by the
time the result arrives, the result is dropped.
"""

import io
import logging
import weakref

import shiboken6
from PySide6.QtCore import QObject, QRunnable, Qt, Signal, Slot

from docview.core.config import BASE_URL, ENCODING, MIME_TYPE
from docview.core.worker_pool import default_pool
from docview.utils.markdown_utils import markdown_to_html

logger = logging.getLogger(__name__)


def load_asset(asset_name, view, store=None, pool=None, converter=markdown_to_html):
    """
    Load a Markdown asset into a view (fire-and-forget)

    Args:
        asset_name: Name of the bundled asset; None or blank shows a blank page
        view: Render target exposing show_blank() and show_html()
        store: Asset store to read from; None means the host context is gone
        pool: WorkerPool handle, defaults to the shared pool
        converter: Callable turning Markdown text into HTML
    """
    if asset_name is None or not asset_name.strip():
        logger.info("No asset requested, showing blank page")
        view.show_blank()
        return

    if store is None:
        logger.error(f"No asset store available, cannot load asset: {asset_name}")
        view.show_blank()
        return

    loader = AssetLoader(asset_name, view, store, pool or default_pool(), converter)
    loader.execute()


class LoadAssetTask(QRunnable):
    """Worker for reading and converting an asset in a background thread"""

    def __init__(self, loader):
        super().__init__()
        self.loader = loader

    @Slot()
    def run(self):
        html = None
        try:
            html = self.loader.read_and_convert()
        except Exception as e:
            logger.error(f"Error loading markdown asset {self.loader.asset_name}: {e}", exc_info=True)
            html = None
        finally:
            # Exactly one delivery per load, whatever happened above
            self.loader.result_ready.emit(html)


class AssetLoader(QObject):
    """
    One load request: read + convert off the GUI thread, render on it

    Must be created on the GUI thread; ``render`` is connected with a queued
    connection so it always runs there.
    """

    result_ready = Signal(object)  # HTML string or None

    def __init__(self, asset_name, view, store, pool, converter=markdown_to_html):
        super().__init__()
        self.asset_name = asset_name
        self.store = store
        self.pool = pool
        self.converter = converter
        self._view_ref = weakref.ref(view)
        self.result_ready.connect(self.render, Qt.QueuedConnection)

    def execute(self):
        """Schedule the background work."""
        self.pool.track(self)
        self.pool.start(LoadAssetTask(self))

    def read_text(self):
        """
        Read the asset as text with every line terminated by a single '\\n'

        Returns:
            The normalized text, or None if the asset could not be read
        """
        lines = []
        try:
            with self.store.open(self.asset_name) as stream:
                reader = io.TextIOWrapper(stream, encoding="utf-8")
                for line in reader:
                    lines.append(line.rstrip("\n"))
        except OSError as e:
            logger.error(f"Could not load asset {self.asset_name}: {e}", exc_info=True)
            return None
        except UnicodeDecodeError as e:
            logger.error(f"Asset {self.asset_name} is not valid UTF-8: {e}", exc_info=True)
            return None
        return "".join(line + "\n" for line in lines)

    def read_and_convert(self):
        """Runs on a worker thread. Returns HTML or None."""
        markdown = self.read_text()
        if markdown is None:
            return None
        if not markdown:
            logger.warning(f"Empty markdown content for asset: {self.asset_name}")
            return None

        try:
            html = self.converter(markdown)
        except Exception as e:
            logger.error(f"Error processing markdown for asset {self.asset_name}: {e}", exc_info=True)
            return None
        logger.debug(f"Converted {self.asset_name} ({len(html) if html else 0} chars of HTML)")
        return html

    def resolve_view(self):
        """Return the target view, or None if it no longer exists."""
        view = self._view_ref()
        if view is None:
            return None
        if isinstance(view, QObject) and not shiboken6.isValid(view):
            return None
        return view

    @Slot(object)
    def render(self, html):
        """Display the result in the view. Runs on the GUI thread."""
        try:
            view = self.resolve_view()
            if view is None:
                logger.warning(f"View is gone, dropping content for asset: {self.asset_name}")
                return

            try:
                if html is None or not html.strip():
                    view.show_blank()
                else:
                    view.show_html(html, BASE_URL, MIME_TYPE, ENCODING)
            except Exception as e:
                logger.error(f"Error loading HTML content into view: {e}", exc_info=True)
                try:
                    view.show_blank()
                except Exception as fallback_error:
                    logger.error(f"Failed to load blank page as fallback: {fallback_error}", exc_info=True)
        finally:
            self.pool.release(self)

# document_dialog.py
# Dialog showing one bundled Markdown document (help pages, changelog)

import logging

from PySide6.QtWidgets import QDialog, QDialogButtonBox, QVBoxLayout

from docview.ui.widgets.markdown_view import MarkdownView, close_on_missing_engine

logger = logging.getLogger(__name__)


class DocumentDialog(QDialog):
    """Dialog hosting a MarkdownView for a single asset."""

    def __init__(self, parent=None, title="Documentation", asset_name=None, store=None, use_webengine=None):
        super().__init__(parent)
        self.setWindowTitle(title)
        self.resize(700, 550)
        self.view = None

        layout = QVBoxLayout(self)
        try:
            self.view = MarkdownView(self, store=store, use_webengine=use_webengine)
        except Exception as e:
            close_on_missing_engine(self, e)
            return
        layout.addWidget(self.view)

        button_box = QDialogButtonBox(QDialogButtonBox.Close)
        button_box.rejected.connect(self.reject)
        layout.addWidget(button_box)

        if asset_name is not None:
            self.load_asset(asset_name)

    def load_asset(self, asset_name):
        """Show another asset in the dialog."""
        if self.view is None:
            logger.warning(f"No document view available, cannot show {asset_name}")
            return
        self.view.load_asset(asset_name)

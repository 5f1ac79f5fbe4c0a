#!/usr/bin/env python3

"""
Main entry point for the DocView demo

Opens a dialog that renders one of the bundled Markdown documents.
"""

import argparse
import logging
import sys
from pathlib import Path

# Add the app directory to the Python path
app_dir = Path(__file__).parent
sys.path.append(str(app_dir))

from PySide6.QtCore import QTimer
from PySide6.QtWidgets import QApplication

from docview.core.config import get_log_path
from docview.core.worker_pool import default_pool
from docview.ui.dialogs.document_dialog import DocumentDialog
from docview.ui.notifications import TOAST_DURATION_MS


def setup_logging():
    """Log everything to the application log file"""
    log_formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    log_file_path = get_log_path()
    # Append mode keeps logs across runs
    file_handler = logging.FileHandler(log_file_path, 'a', encoding='utf-8')
    file_handler.setFormatter(log_formatter)
    file_handler.setLevel(logging.DEBUG)
    root_logger.addHandler(file_handler)
    return log_file_path


def main(argv=None):
    """Main application entry point"""
    parser = argparse.ArgumentParser(description="Show a bundled Markdown document")
    parser.add_argument("asset", nargs="?", default="help.md", help="Asset name, e.g. help.md or changelog.md")
    parser.add_argument("--webengine", action="store_true", help="Render with QtWebEngine")
    args = parser.parse_args(argv)

    log_file_path = setup_logging()
    logging.info("Starting DocView")
    logging.debug(f"Logging DEBUG messages to: {log_file_path}")

    app = QApplication(sys.argv[:1])
    app.setApplicationName("DocView")
    app.setApplicationVersion("0.1.0")

    # Stop the shared pool without blocking exit on a load that hangs
    app.aboutToQuit.connect(lambda: default_pool().shutdown(wait=False))

    dialog = DocumentDialog(title=args.asset, asset_name=args.asset, use_webengine=args.webengine or None)
    if dialog.view is None:
        # The dialog closed itself after reporting a missing QtWebEngine;
        # keep the event loop up long enough for the message to show
        QTimer.singleShot(TOAST_DURATION_MS, app.quit)
        app.exec()
        return 1
    dialog.show()

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())

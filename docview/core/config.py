"""
Configuration settings for DocView

Provides centralized configuration, path management and the fixed
constants used when rendering converted documents.
"""

import os
from pathlib import Path

# Render constants: converted documents are marked as locally sourced so the
# surface never resolves relative references against the network.
BASE_URL = "local://"
BLANK_URL = "about:blank"
MIME_TYPE = "text/html"
ENCODING = "UTF-8"

# Substrings identifying a missing QtWebEngine runtime in provisioning errors:
# the Python module (PySide6.QtWebEngineWidgets) and the shared library
# (libQt6WebEngineCore.so.6).
MISSING_ENGINE_MARKERS = ("QtWebEngine", "Qt6WebEngine")
MISSING_ENGINE_MESSAGE = "Install QtWebEngine and try again"

# Qt releases where web surfaces are built on a fresh off-the-record profile
# instead of the shared default one.
# TODO: drop once the minimum supported PySide6 is past 6.4
LEGACY_PROFILE_QT_VERSIONS = ("6.4.0", "6.4.1")

# Worker pool sizing; the cap is high enough to behave as unbounded for
# document loads.
DEFAULT_MAX_THREADS = 256
THREAD_EXPIRY_MS = 60_000

_TRUE_VALUES = ("1", "true", "yes", "on")


def get_app_dir():
    """
    Get the application directory based on platform

    Returns:
        Path: Path to the application data directory
    """
    # Check for environment variable first (for development/testing)
    if "DOCVIEW_DATA_DIR" in os.environ:
        app_dir = Path(os.environ["DOCVIEW_DATA_DIR"])
        os.makedirs(app_dir, exist_ok=True)
        return app_dir

    home = Path.home()

    if os.name == "nt":  # Windows
        app_dir = home / "AppData" / "Local" / "DocView"
    elif os.name == "posix":  # Linux/Mac
        if os.path.exists(home / "Library"):
            app_dir = home / "Library" / "Application Support" / "DocView"
        else:  # Linux
            app_dir = home / ".local" / "share" / "docview"
    else:
        app_dir = home / ".docview"

    os.makedirs(app_dir, exist_ok=True)

    return app_dir


def get_assets_dir():
    """
    Get the path to the bundled assets directory

    Returns:
        Path: Path to the assets directory
    """
    if "DOCVIEW_ASSETS_DIR" in os.environ:
        return Path(os.environ["DOCVIEW_ASSETS_DIR"])

    # Development layout: assets live next to the docview package
    return Path(__file__).resolve().parent.parent.parent / "assets"


def get_log_path():
    """Path of the application log file."""
    return get_app_dir() / "docview.log"


def use_webengine_default():
    """
    Whether views should render through QtWebEngine by default.

    QtWebEngine is opt-in via DOCVIEW_USE_WEBENGINE; without it views use a
    QTextBrowser.
    """
    return str(os.environ.get("DOCVIEW_USE_WEBENGINE", "0")).strip().lower() in _TRUE_VALUES

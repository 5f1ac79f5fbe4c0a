# docview/ui/notifications.py - Transient user notifications
"""
Small auto-closing message windows ("toasts")
"""

import logging

from PySide6.QtCore import Qt, QTimer
from PySide6.QtWidgets import QLabel

logger = logging.getLogger(__name__)

TOAST_DURATION_MS = 3500

# Parentless toasts are owned by Python; keep them alive until closed
_active_toasts = set()

ERROR_STYLE = """
    QLabel {
        font-size: 13px;
        font-weight: bold;
        padding: 12px 18px;
        background-color: #B03A2E;
        color: white;
        border-radius: 6px;
    }
"""


def show_error_toast(parent, message, duration_ms=TOAST_DURATION_MS):
    """
    Show a transient error message and return the toast widget.

    The toast is a top-level window so it outlives a host that is closed
    right after showing it.
    """
    toast = QLabel(message)
    toast.setWindowFlags(Qt.ToolTip | Qt.FramelessWindowHint | Qt.WindowStaysOnTopHint)
    toast.setAttribute(Qt.WA_DeleteOnClose)
    toast.setStyleSheet(ERROR_STYLE)
    toast.adjustSize()

    # Center over the host when there is one
    if parent is not None and parent.isVisible():
        center = parent.frameGeometry().center()
        toast.move(center.x() - toast.width() // 2, center.y() - toast.height() // 2)

    _active_toasts.add(toast)
    toast.destroyed.connect(lambda: _active_toasts.discard(toast))
    toast.show()
    QTimer.singleShot(duration_ms, toast.close)
    logger.debug(f"Error toast shown: {message}")
    return toast

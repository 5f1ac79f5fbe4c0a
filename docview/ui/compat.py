# docview/ui/compat.py - Qt version workarounds
"""
Context handling for constructing render surfaces on older Qt releases
"""

import dataclasses
from dataclasses import dataclass
from typing import Optional

from PySide6.QtCore import qVersion

from docview.core.config import LEGACY_PROFILE_QT_VERSIONS


@dataclass(frozen=True)
class SurfaceContext:
    """What a render surface is constructed with"""
    use_webengine: bool = False
    off_the_record: bool = False


def patch_context(context: SurfaceContext, qt_version: Optional[str] = None) -> SurfaceContext:
    """
    Return a context that is safe to build a render surface with.

    On the Qt releases in LEGACY_PROFILE_QT_VERSIONS a fresh context is
    derived that builds web surfaces on their own off-the-record profile.
    Every other release gets the given context back unchanged.
    """
    version = qt_version or qVersion()
    if version in LEGACY_PROFILE_QT_VERSIONS:
        return dataclasses.replace(context, off_the_record=True)
    return context

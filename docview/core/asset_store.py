# docview/core/asset_store.py - Bundled asset access
"""
Read-only access to the documents bundled with the application.

A store only has to provide ``open(name)`` returning a binary stream and
raising ``FileNotFoundError``/``OSError`` when the asset cannot be read.
"""

import logging
from pathlib import Path
from typing import BinaryIO, Protocol

from docview.core.config import get_assets_dir

logger = logging.getLogger(__name__)


class AssetStore(Protocol):
    """Anything that can open bundled assets by name."""

    def open(self, name: str) -> BinaryIO:
        ...


class DirectoryAssetStore:
    """Asset store backed by a directory on disk."""

    def __init__(self, root=None):
        self.root = Path(root) if root is not None else get_assets_dir()

    def resolve(self, name: str) -> Path:
        """
        Map an asset name to a path inside the store root

        Raises:
            FileNotFoundError: if the name points outside the root
        """
        root = self.root.resolve()
        path = (root / name).resolve()
        if path != root and root not in path.parents:
            raise FileNotFoundError(f"Asset outside of store: {name}")
        return path

    def open(self, name: str) -> BinaryIO:
        path = self.resolve(name)
        logger.debug(f"Opening asset {name} at {path}")
        return open(path, "rb")

    def __repr__(self):
        return f"DirectoryAssetStore({str(self.root)!r})"

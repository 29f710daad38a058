"""Byte sources for stored documents.

The orchestrator only needs ``fetch(storage_locator) -> bytes``. Uploads,
deletes and remote blob stores belong to the calling layer.
"""

import logging
from pathlib import Path
from typing import Dict, Optional, Protocol, Union

from ..config import Config
from ..exceptions import SourceNotFoundError, SourceUnavailableError

__all__ = ["ByteSource", "InMemoryByteSource", "LocalFileStorage"]

logger = logging.getLogger(__name__)


class ByteSource(Protocol):
    """Protocol for anything that can return stored document bytes."""

    def fetch(self, storage_locator: str) -> bytes:
        """Return the full content stored under ``storage_locator``.

        Raises:
            SourceNotFoundError: If nothing is stored under the locator
            SourceUnavailableError: If the content cannot be read
        """
        ...


class LocalFileStorage:
    """Reads document bytes from a directory on the local filesystem.

    Locators are paths relative to ``root``, for example
    ``tenant_acme/3f2a.pdf``. Locators that resolve outside the root
    are refused.

    Attributes:
        root: Base directory all locators are resolved against
    """

    def __init__(self, root: Union[str, Path, None] = None) -> None:
        self.root: Path = Path(root if root is not None else Config.STORAGE_ROOT).resolve()

    def _resolve(self, storage_locator: str) -> Path:
        if not storage_locator:
            raise SourceUnavailableError("Storage locator is empty")
        path = (self.root / storage_locator).resolve()
        if path != self.root and self.root not in path.parents:
            raise SourceUnavailableError(f"Storage locator outside storage root: {storage_locator}")
        return path

    def fetch(self, storage_locator: str) -> bytes:
        path = self._resolve(storage_locator)
        try:
            return path.read_bytes()
        except FileNotFoundError:
            raise SourceNotFoundError(f"File not found: {storage_locator}")
        except OSError as e:
            raise SourceUnavailableError(f"Failed to read {storage_locator}: {str(e)}")

    def store(self, storage_locator: str, data: bytes) -> str:
        """Write ``data`` under ``storage_locator``, creating parent directories.

        Returns:
            The locator, for chaining into a DocumentDescriptor
        """
        path = self._resolve(storage_locator)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(data)
        except OSError as e:
            raise SourceUnavailableError(f"Failed to write {storage_locator}: {str(e)}")
        logger.debug("Stored %d bytes at %s", len(data), path)
        return storage_locator


class InMemoryByteSource:
    """Dictionary backed byte source."""

    def __init__(self, objects: Optional[Dict[str, bytes]] = None) -> None:
        self.objects: Dict[str, bytes] = dict(objects or {})

    def fetch(self, storage_locator: str) -> bytes:
        try:
            return self.objects[storage_locator]
        except KeyError:
            raise SourceNotFoundError(f"File not found: {storage_locator}")

    def store(self, storage_locator: str, data: bytes) -> str:
        self.objects[storage_locator] = data
        return storage_locator

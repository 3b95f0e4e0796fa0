"""
On-disk storage for uploaded profile photos.
"""

import os
import random
import time
from pathlib import Path
from typing import BinaryIO, Optional

import structlog
from fastapi import UploadFile

from userdeck.core.exceptions import StartupFailure, UploadTooLarge

logger = structlog.get_logger(__name__)

CHUNK_SIZE = 64 * 1024


class PhotoStorage:
    """Writes uploaded photos under a single directory, never deleting them."""

    def __init__(self, root: str | Path, max_bytes: int):
        self.root = Path(root)
        self.max_bytes = max_bytes

    def ensure_directory(self) -> None:
        """Create the storage directory (and parents) if it is missing."""
        if self.root.is_dir():
            return
        try:
            self.root.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StartupFailure(
                f"Could not create storage directory {self.root}",
                details={"error": str(exc)},
            ) from exc
        logger.info("Storage directory created", path=str(self.root))

    @staticmethod
    def generate_filename(original_name: str) -> str:
        """``<unix millis>-<random 0..1e9><original extension>``"""
        ext = os.path.splitext(original_name)[1]
        return f"{int(time.time() * 1000)}-{random.randint(0, 1_000_000_000)}{ext}"

    def save(self, upload: Optional[UploadFile]) -> Optional[str]:
        """Persist an uploaded file and return its stored filename, or None when absent."""
        if upload is None or not upload.filename:
            return None

        filename = self.generate_filename(upload.filename)
        target = self.root / filename
        try:
            written = self._copy_limited(upload.file, target)
        except UploadTooLarge:
            target.unlink(missing_ok=True)
            raise

        logger.info("Photo stored", filename=filename, size=written)
        return filename

    def _copy_limited(self, source: BinaryIO, target: Path) -> int:
        written = 0
        with open(target, "wb") as f:
            while True:
                chunk = source.read(CHUNK_SIZE)
                if not chunk:
                    break
                written += len(chunk)
                if written > self.max_bytes:
                    raise UploadTooLarge(
                        "File too large",
                        details={"limit": self.max_bytes},
                    )
                f.write(chunk)
        return written

"""Zip packaging for downloads"""

import os
import logging
import tempfile
import zipfile
from pathlib import Path
from typing import Iterator, Optional, Union

from sitegen_api.core.artifact_store import is_staging_name
from sitegen_api.models.errors import ArchiveError

logger = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024


class ArchiveBuilder:
    """Builds a zip of the artifact directory into a staged temporary file."""

    def __init__(self, staging_dir: Optional[Union[str, Path]] = None, compresslevel: int = 9):
        self.staging_dir = Path(staging_dir) if staging_dir is not None else None
        self.compresslevel = compresslevel

    def build(self, source_dir: Union[str, Path]) -> Path:
        """
        Zip every file in ``source_dir`` at the archive root.

        The archive is closed before its path is returned. The caller owns the
        file and must hand it to ``discard`` (or ``iter_file``) when done.

        Raises:
            ArchiveError: If the directory is missing or holds no files
        """
        source = Path(source_dir)
        if not source.is_dir():
            raise ArchiveError(f"Nothing to download: {source} does not exist")

        files = sorted(
            (p for p in source.iterdir() if p.is_file() and not is_staging_name(p.name)),
            key=lambda p: p.name,
        )
        if not files:
            raise ArchiveError(f"Nothing to download: {source} is empty")

        if self.staging_dir is not None:
            self.staging_dir.mkdir(parents=True, exist_ok=True)
        fd, name = tempfile.mkstemp(prefix="site-", suffix=".zip", dir=self.staging_dir)
        os.close(fd)
        archive_path = Path(name)

        try:
            with zipfile.ZipFile(archive_path, "w", zipfile.ZIP_DEFLATED, compresslevel=self.compresslevel) as zipf:
                for file_path in files:
                    zipf.write(file_path, arcname=file_path.name)
        except BaseException:
            self.discard(archive_path)
            raise

        logger.info(f"Created archive {archive_path.name} with {len(files)} file(s)")
        return archive_path

    @staticmethod
    def discard(path: Union[str, Path]) -> None:
        """Remove a staged archive; safe to call more than once."""
        try:
            Path(path).unlink()
            logger.debug(f"Removed staged archive {path}")
        except FileNotFoundError:
            pass

    def iter_file(self, path: Union[str, Path], chunk_size: int = CHUNK_SIZE) -> Iterator[bytes]:
        """Yield the archive in chunks, removing it once iteration stops."""
        try:
            with open(path, "rb") as fh:
                while True:
                    chunk = fh.read(chunk_size)
                    if not chunk:
                        break
                    yield chunk
        finally:
            self.discard(path)

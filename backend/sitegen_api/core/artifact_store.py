"""Artifact storage"""

import os
import stat
import logging
import tempfile
from pathlib import Path
from typing import List, Union

from sitegen_api.models.errors import ArtifactIOError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)

# Staging files are hidden so listings and archives never pick them up
STAGING_PREFIX = "."

SITE_INDEX = "index.html"

NOT_FOUND_MESSAGE = "No generated site found"

# umask can only be read by setting it
_UMASK = os.umask(0)
os.umask(_UMASK)


def published_mode(target: Path) -> int:
    """Mode for a file about to replace ``target``: keep the old one, else 0o666 minus umask"""
    try:
        return stat.S_IMODE(target.stat().st_mode)
    except FileNotFoundError:
        return 0o666 & ~_UMASK


def is_staging_name(name: str) -> bool:
    return name.startswith(STAGING_PREFIX)


class ArtifactStore:
    """
    Stores the generated site under a single directory.

    Single-slot contract: the pipeline writes only ``index.html`` and each
    successful generation replaces it. Writes go to a hidden temporary file
    in the same directory and are moved into place with ``os.replace`` so a
    concurrent reader sees either the old or the new content, never a mix.
    """

    def __init__(self, directory: Union[str, Path]):
        self.directory = Path(directory).resolve()
        logger.info(f"Using path: {self.directory}")

    def _path_for(self, name: str) -> Path:
        if not name or Path(name).name != name or is_staging_name(name):
            raise ValidationError(f"Invalid artifact name: {name!r}")
        return self.directory / name

    def write(self, name: str, content: str) -> Path:
        """Atomically replace the named artifact with ``content``."""
        target = self._path_for(name)
        data = content.encode("utf-8")
        tmp_path = None
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(mode="wb", dir=self.directory, prefix=f"{STAGING_PREFIX}{name}.",
                                             suffix=".tmp", delete=False) as tmp:
                tmp_path = Path(tmp.name)
                tmp.write(data)
                tmp.flush()
                os.fsync(tmp.fileno())
            # NamedTemporaryFile creates 0600
            os.chmod(tmp_path, published_mode(target))
            os.replace(tmp_path, target)
        except OSError as e:
            logger.error(f"Failed to write artifact {name}: {e}", exc_info=True)
            if tmp_path is not None and tmp_path.exists():
                tmp_path.unlink()
            raise ArtifactIOError(f"Failed to save {name}", retryable=True) from e

        logger.info(f"Saved {name} ({len(data)} bytes)")
        return target

    def read(self, name: str) -> str:
        """Return the artifact's exact content."""
        path = self._path_for(name)
        try:
            data = path.read_bytes()
        except FileNotFoundError as e:
            raise NotFoundError(NOT_FOUND_MESSAGE) from e
        except OSError as e:
            logger.error(f"Failed to read artifact {name}: {e}", exc_info=True)
            raise ArtifactIOError(f"Failed to read {name}") from e
        return data.decode("utf-8")

    def exists(self, name: str) -> bool:
        return self._path_for(name).is_file()

    def list_names(self) -> List[str]:
        """Sorted names of the stored artifacts."""
        if not self.directory.is_dir():
            return []
        return sorted(
            p.name for p in self.directory.iterdir()
            if p.is_file() and not is_staging_name(p.name)
        )

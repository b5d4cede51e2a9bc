"""Temporary on-disk artifacts used to exchange data with external tools.

Every artifact lives below a configurable root directory. Names carry a
random token so concurrent requests never share a path, and
:meth:`TempResourceStore.scope` guarantees removal of everything a request
created, whether the request succeeds or fails.
"""

from __future__ import annotations

import secrets
import shutil
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

from ..core.utils import get_logger
from ..exceptions import ResourceError

LOGGER = get_logger("pdfsuite.external.tempstore")


def _new_token() -> str:
    return secrets.token_hex(8)


def _ensure_dir(directory: Path) -> Path:
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise ResourceError(f"Unable to create temporary directory {directory}") from exc
    return directory


@dataclass(frozen=True)
class TempArtifact:
    """Handle to a temporary file owned by one request."""

    path: Path

    @property
    def name(self) -> str:
        return self.path.name

    def exists(self) -> bool:
        return self.path.exists()


class TempResourceStore:
    """Create, read, write and delete :class:`TempArtifact` files below ``root``."""

    def __init__(self, root: str | Path) -> None:
        self._root = Path(root).expanduser()

    @property
    def root(self) -> Path:
        return self._root

    def create(self, name: str) -> TempArtifact:
        """Reserve a uniquely named artifact derived from ``name``.

        The root directory is created on first use. The file itself is only
        created by :meth:`write`.
        """

        directory = _ensure_dir(self._root)
        return TempArtifact(directory / f"{_new_token()}-{Path(name).name}")

    def write(self, artifact: TempArtifact, data: bytes) -> TempArtifact:
        try:
            artifact.path.parent.mkdir(parents=True, exist_ok=True)
            artifact.path.write_bytes(data)
        except OSError as exc:
            raise ResourceError(f"Unable to write temporary file {artifact.name}") from exc
        return artifact

    def read(self, artifact: TempArtifact) -> bytes:
        try:
            return artifact.path.read_bytes()
        except OSError as exc:
            raise ResourceError(f"Unable to read temporary file {artifact.name}") from exc

    def delete(self, artifact: TempArtifact) -> None:
        """Remove ``artifact``; missing files are ignored."""

        try:
            artifact.path.unlink(missing_ok=True)
        except OSError as exc:
            raise ResourceError(f"Unable to delete temporary file {artifact.name}") from exc

    @contextmanager
    def scope(self) -> Iterator["ArtifactScope"]:
        """Yield an :class:`ArtifactScope` that is removed when the block exits."""

        directory = _ensure_dir(self._root / _new_token())
        artifact_scope = ArtifactScope(self, directory)
        LOGGER.debug("Opened artifact scope %s", directory)
        try:
            yield artifact_scope
        finally:
            artifact_scope.cleanup()


class ArtifactScope:
    """Set of artifacts created for one request inside a private directory."""

    def __init__(self, store: TempResourceStore, directory: Path) -> None:
        self._store = store
        self.path = directory
        self._artifacts: list[TempArtifact] = []

    @property
    def artifacts(self) -> tuple[TempArtifact, ...]:
        return tuple(self._artifacts)

    def directory(self, name: str) -> Path:
        """Create and return a sub-directory of the scope."""

        return _ensure_dir(self.path / Path(name).name)

    def create(self, name: str, *, subdir: str | None = None) -> TempArtifact:
        """Register an artifact called exactly ``name`` inside the scope."""

        parent = self.directory(subdir) if subdir else self.path
        artifact = TempArtifact(parent / Path(name).name)
        self._artifacts.append(artifact)
        return artifact

    def stage(self, name: str, data: bytes, *, subdir: str | None = None) -> TempArtifact:
        """Create an artifact called ``name`` and write ``data`` to it."""

        return self._store.write(self.create(name, subdir=subdir), data)

    def cleanup(self) -> None:
        """Delete every artifact and the scope directory, logging failures."""

        for artifact in self._artifacts:
            try:
                self._store.delete(artifact)
            except ResourceError as exc:
                LOGGER.warning("%s", exc)
        self._artifacts.clear()

        shutil.rmtree(self.path, ignore_errors=True)
        if self.path.exists():
            LOGGER.warning("Failed to remove temporary directory %s", self.path)
        LOGGER.debug("Closed artifact scope %s", self.path)


__all__ = ["ArtifactScope", "TempArtifact", "TempResourceStore"]

"""
Package identity and import classification.

A package is identified by the directory its files live in, expressed
relative to the GOPATH source root (``<GOPATH>/src``). The package clause
of the source file is never consulted: one directory is one package.
"""
import logging
import os
import posixpath
from pathlib import Path
from typing import List, Union

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


class NamespaceRootError(RuntimeError):
    """Raised when the workspace root (GOPATH) cannot be determined."""


def _normalize(path: PathLike) -> str:
    """Return the absolute, normalized, forward-slash form of a path."""
    return Path(os.path.abspath(path)).as_posix()


class PackageResolver:
    """Maps source files to package identifiers."""

    def __init__(self, gopath: str):
        """
        Initialize the resolver.

        Args:
            gopath: GOPATH value; may list several workspaces separated by
                os.pathsep, each contributing ``<entry>/src`` as a source root

        Raises:
            NamespaceRootError: if gopath is empty or only holds separators
        """
        entries = [entry for entry in (gopath or "").split(os.pathsep) if entry.strip()]
        if not entries:
            raise NamespaceRootError(
                "GOPATH is not set; cannot derive package identifiers"
            )

        self.source_roots: List[str] = [
            _normalize(os.path.join(entry, "src")) for entry in entries
        ]
        logger.debug("Source roots: %s", ", ".join(self.source_roots))

    def strip_root(self, path: PathLike) -> str:
        """Return the normalized path with the first matching source root removed."""
        normalized = _normalize(path)
        for root in self.source_roots:
            prefix = root.rstrip("/") + "/"
            if normalized.startswith(prefix):
                return normalized[len(prefix):]
        return normalized

    def package_of(self, file_path: PathLike) -> str:
        """Get the package identifier of the given source file."""
        return posixpath.dirname(self.strip_root(file_path)) or "."

    def namespace_of(self, repo_path: PathLike) -> str:
        """
        Get the namespace of the analyzed repository.

        A directory is its own namespace; a single file belongs to the
        namespace of its package.
        """
        if os.path.isdir(repo_path):
            return self.strip_root(repo_path)
        return self.package_of(repo_path)


class ImportClassifier:
    """Decides whether an import path belongs to the analyzed repository."""

    def __init__(self, namespace: str):
        self.namespace = namespace

    def is_local(self, import_path: str) -> bool:
        # Containment, not prefix: "other.org/fork/github.com/me/repo" is
        # local to "github.com/me/repo".
        return self.namespace in import_path

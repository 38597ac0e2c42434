"""
Repository walker for instability analysis.

Discovers Go source files under a repository root, extracts their imports
and feeds them into the dependency accumulator.
"""
import logging
import os
from pathlib import Path
from typing import Iterator, Optional

from instabl.resolver import ImportClassifier, PackageResolver
from instabl.stats import DependencyAccumulator, Stats
from instabl.tree_sitter_go import GoImportExtractor

logger = logging.getLogger(__name__)

VENDOR_DIR = "vendor"


class InstabilityAnalyzer:
    """Walks a repository and collects package stability statistics."""

    def __init__(
        self,
        repo_path: Path,
        resolver: PackageResolver,
        extractor: Optional[GoImportExtractor] = None,
    ):
        """
        Initialize the analyzer.

        Args:
            repo_path: Repository root directory, or a single .go file
            resolver: Resolver mapping files to package identifiers
            extractor: Import extractor (a Go tree-sitter extractor by default)

        Raises:
            FileNotFoundError: if repo_path is neither a file nor a directory
        """
        self.repo_path = Path(repo_path)
        if not (self.repo_path.is_dir() or self.repo_path.is_file()):
            raise FileNotFoundError(
                f"provided repo '{repo_path}' is not a folder or file"
            )

        self.resolver = resolver
        self.extractor = extractor or GoImportExtractor()
        self.namespace = resolver.namespace_of(self.repo_path)
        self.accumulator = DependencyAccumulator(ImportClassifier(self.namespace))
        self.counters = {
            "files_parsed": 0,
            "dirs_skipped": 0,
            "imports_found": 0,
            "local_imports": 0,
            "errors": 0,
        }
        logger.info("Analyzing %s (namespace %s)", self.repo_path, self.namespace)

    def analyze(self) -> Stats:
        """
        Walk the repository and collect dependency statistics.

        Returns:
            Stats table mapping package identifiers to Stability records
        """
        if self.repo_path.is_dir():
            for file_path in self.iter_source_files():
                self._analyze_file(file_path)
        else:
            self._analyze_file(self.repo_path)

        logger.info(
            "Parsed %d files, %d imports (%d local), %d walk errors",
            self.counters["files_parsed"],
            self.counters["imports_found"],
            self.counters["local_imports"],
            self.counters["errors"],
        )
        return self.get_stats()

    def get_stats(self) -> Stats:
        """Get the collected dependency statistics."""
        return self.accumulator.stats

    def iter_source_files(self) -> Iterator[Path]:
        """
        Yield every source file below the root, skipping the vendor folder.

        Unreadable directories are logged and skipped.
        """
        extensions = tuple(self.extractor.get_file_extensions())
        root = os.path.abspath(self.repo_path)

        for dirpath, dirnames, filenames in os.walk(root, onerror=self._on_walk_error):
            if os.path.abspath(dirpath) == root and VENDOR_DIR in dirnames:
                dirnames.remove(VENDOR_DIR)
                self.counters["dirs_skipped"] += 1
                logger.debug("Skipping %s", os.path.join(dirpath, VENDOR_DIR))
            dirnames.sort()

            for filename in sorted(filenames):
                if filename.endswith(extensions):
                    yield Path(dirpath) / filename

    def _on_walk_error(self, error: OSError) -> None:
        self.counters["errors"] += 1
        logger.warning("failed walking %s: %s", error.filename, error)

    def _analyze_file(self, file_path: Path) -> None:
        """Extract the imports of one file and record them under its package."""
        imports = self.extractor.extract(file_path)
        owner = self.resolver.package_of(file_path)

        self.counters["files_parsed"] += 1
        self.counters["imports_found"] += len(imports)
        self.counters["local_imports"] += self.accumulator.add_file(owner, imports)

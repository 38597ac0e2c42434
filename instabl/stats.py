"""
Fan-in / fan-out bookkeeping for local packages.
"""
import logging
from dataclasses import dataclass
from typing import Dict, Iterable

from instabl.resolver import ImportClassifier

logger = logging.getLogger(__name__)


@dataclass
class Stability:
    """Incoming (fan_in) and outgoing (fan_out) local dependencies of a package."""

    fan_in: int = 0
    fan_out: int = 0

    @property
    def instability(self) -> float:
        """Instability = fan_out / (fan_in + fan_out), 0.0 for an isolated package."""
        total = self.fan_in + self.fan_out
        if total == 0:
            return 0.0
        return self.fan_out / total


Stats = Dict[str, Stability]


class DependencyAccumulator:
    """Accumulates import edges into a stats table keyed by package identifier."""

    def __init__(self, classifier: ImportClassifier):
        self.classifier = classifier
        self.stats: Stats = {}

    def _get_or_create(self, package: str) -> Stability:
        record = self.stats.get(package)
        if record is None:
            record = self.stats[package] = Stability()
        return record

    def record(self, owner: str, import_path: str) -> bool:
        """
        Record one import made by a file of package ``owner``.

        External imports only make sure the owner has a record; local imports
        count one fan-out for the owner and one fan-in for the imported
        package.

        Returns:
            True if the import was classified as local
        """
        owner_record = self._get_or_create(owner)
        if not self.classifier.is_local(import_path):
            return False

        owner_record.fan_out += 1
        self._get_or_create(import_path).fan_in += 1
        return True

    def add_file(self, owner: str, imports: Iterable[str]) -> int:
        """Record every import of one file and return how many were local."""
        local = 0
        for import_path in imports:
            if self.record(owner, import_path):
                local += 1
        logger.debug("%s: %d local imports", owner, local)
        return local

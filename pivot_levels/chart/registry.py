# pivot_levels/chart/registry.py
"""
Module: Chart Object Registry
Purpose: Named store of drawn chart objects, injected into the renderer
Note: Objects are keyed by name; a prefix sweep removes only the objects that share it
"""

import logging
from typing import Dict, List, Protocol, Union

from pivot_levels.models import LineArtifact, TextArtifact

logger = logging.getLogger(__name__)

Artifact = Union[LineArtifact, TextArtifact]


class ChartObjectRegistry(Protocol):
    """Drawing surface owned by the chart host"""

    def upsert(self, name: str, artifact: Artifact) -> None:
        ...

    def remove_all_with_prefix(self, prefix: str) -> int:
        ...

    def names(self) -> List[str]:
        ...


class InMemoryChartRegistry:
    """
    Dict-backed registry for headless hosts and tests.
    Insertion order is kept so snapshots compare deterministically.
    """

    def __init__(self):
        self._objects: Dict[str, Artifact] = {}

    def upsert(self, name: str, artifact: Artifact) -> None:
        self._objects[name] = artifact

    def remove(self, name: str) -> bool:
        return self._objects.pop(name, None) is not None

    def remove_all_with_prefix(self, prefix: str) -> int:
        to_remove = [name for name in self._objects if name.startswith(prefix)]
        for name in to_remove:
            del self._objects[name]

        if to_remove:
            logger.debug(f"Removed {len(to_remove)} objects with prefix '{prefix}'")
        return len(to_remove)

    def get(self, name: str) -> Artifact:
        return self._objects[name]

    def names(self) -> List[str]:
        return list(self._objects)

    def snapshot(self) -> Dict[str, Artifact]:
        return dict(self._objects)

    def __contains__(self, name: str) -> bool:
        return name in self._objects

    def __len__(self) -> int:
        return len(self._objects)

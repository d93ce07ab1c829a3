"""
Storage Interface

The engine never stores anything itself. Callers hand a ``GameStore`` to the
session service, which reads and writes JSON-shaped records through it.
"""

import copy
from typing import Dict, Optional, Protocol

STATS_KEY = "rackle_stats_v1"


def state_key(date_key: str) -> str:
    """Storage key of the saved game for one day."""
    return f"rackle_state_{date_key}_v1"


class GameStore(Protocol):
    """Key/value storage for JSON-serializable records."""

    def load(self, key: str) -> Optional[Dict]:
        ...

    def save(self, key: str, value: Dict) -> None:
        ...


class MemoryStore:
    """In-process store keeping deep copies, so callers cannot alias stored records."""

    def __init__(self):
        self._records: Dict[str, Dict] = {}

    def load(self, key: str) -> Optional[Dict]:
        record = self._records.get(key)
        return copy.deepcopy(record) if record is not None else None

    def save(self, key: str, value: Dict) -> None:
        self._records[key] = copy.deepcopy(value)

    def __contains__(self, key: str) -> bool:
        return key in self._records

    def __len__(self) -> int:
        return len(self._records)

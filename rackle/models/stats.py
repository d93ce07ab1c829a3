"""
Stats Data Models

Cumulative player results, persisted by the caller alongside daily games.
"""

from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional


@dataclass
class Stats:
    """Cumulative results across days, one entry counted per finished date key."""
    played: int = 0
    wins: int = 0
    current_streak: int = 0
    max_streak: int = 0
    win_dist: Dict[str, int] = field(default_factory=dict)
    last_played_key: Optional[str] = None

    def to_dict(self) -> Dict:
        data = {
            'played': self.played,
            'wins': self.wins,
            'currentStreak': self.current_streak,
            'maxStreak': self.max_streak,
            'winDist': dict(self.win_dist),
        }
        if self.last_played_key is not None:
            data['lastPlayedKey'] = self.last_played_key
        return data

    @classmethod
    def from_dict(cls, data: Optional[Mapping]) -> 'Stats':
        if not data:
            return cls()
        return cls(
            played=int(data.get('played', 0)),
            wins=int(data.get('wins', 0)),
            current_streak=int(data.get('currentStreak', 0)),
            max_streak=int(data.get('maxStreak', 0)),
            win_dist={str(k): int(v) for k, v in (data.get('winDist') or {}).items()},
            last_played_key=data.get('lastPlayedKey'),
        )

"""
Game Data Models

Contains all game-related data structures and enums. Every model converts to
and from the JSON record layout clients persist (camelCase keys), so saved
games stay readable across versions.
"""

from collections import Counter
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

from ..config.game_settings import ALPHABET, WORD_LENGTH


class TileStatus(str, Enum):
    """Per-position outcome of comparing a guess to the answer."""
    CORRECT = "correct"
    PRESENT = "present"
    ABSENT = "absent"

    @property
    def rank(self) -> int:
        """Confidence order used when folding knowledge: correct > present > absent."""
        return _STATUS_RANK[self]


_STATUS_RANK = {TileStatus.ABSENT: 0, TileStatus.PRESENT: 1, TileStatus.CORRECT: 2}


class GameStatus(str, Enum):
    """Lifecycle of a daily game. WON and LOST are terminal."""
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"


class Rack:
    """
    Letter tiles available to the player, as uppercase letter -> count.

    A letter whose count drops to zero is removed, so membership and iteration
    only ever see letters the player can actually use.
    """

    __slots__ = ('_counts',)

    def __init__(self, counts: Optional[Mapping[str, int]] = None):
        self._counts: Dict[str, int] = {}
        if counts is not None and not isinstance(counts, (Mapping, Rack)):
            raise ValueError("Rack must be a mapping of letter -> count")
        for letter, count in (counts or {}).items():
            letter = self._check_letter(letter)
            if not isinstance(count, int) or isinstance(count, bool) or count < 0:
                raise ValueError(f"Rack count for '{letter}' must be a non-negative integer, got {count!r}")
            if count:
                self._counts[letter] = self._counts.get(letter, 0) + count

    @staticmethod
    def _check_letter(letter: str) -> str:
        if not isinstance(letter, str) or len(letter) != 1 or letter.upper() not in ALPHABET:
            raise ValueError(f"Rack letters must be single letters A-Z, got {letter!r}")
        return letter.upper()

    @classmethod
    def coerce(cls, value: Mapping[str, int]) -> 'Rack':
        """Return ``value`` itself if it is already a Rack, else a Rack built from the mapping."""
        return value if isinstance(value, Rack) else cls(value)

    def add(self, letter: str, n: int = 1) -> None:
        if n < 0:
            raise ValueError("Use burn() to remove tiles")
        letter = self._check_letter(letter)
        if n:
            self._counts[letter] = self._counts.get(letter, 0) + n

    def burn(self, letter: str) -> None:
        """Remove one tile of ``letter``; burning a letter the rack lacks is a no-op."""
        letter = self._check_letter(letter)
        remaining = max(0, self._counts.get(letter, 0) - 1)
        if remaining:
            self._counts[letter] = remaining
        else:
            self._counts.pop(letter, None)

    def can_spell(self, word: str) -> bool:
        """Multiset containment: every letter of ``word`` is held at least as often as it is needed."""
        need = Counter(word.upper())
        return all(self._counts.get(letter, 0) >= n for letter, n in need.items())

    def total(self) -> int:
        return sum(self._counts.values())

    def copy(self) -> 'Rack':
        return Rack(self._counts)

    def to_dict(self) -> Dict[str, int]:
        return dict(self._counts)

    def __getitem__(self, letter: str) -> int:
        return self._counts.get(letter.upper(), 0)

    def __contains__(self, letter: object) -> bool:
        return isinstance(letter, str) and letter.upper() in self._counts

    def __iter__(self) -> Iterator[str]:
        return iter(self._counts)

    def __len__(self) -> int:
        return len(self._counts)

    def items(self) -> Iterable[Tuple[str, int]]:
        return self._counts.items()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Rack):
            return self._counts == other._counts
        if isinstance(other, Mapping):
            return self._counts == dict(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"Rack({dict(sorted(self._counts.items()))!r})"


@dataclass(frozen=True)
class Guess:
    """One submitted word (uppercase) with its per-position statuses."""
    word: str
    statuses: Tuple[TileStatus, ...]

    def __post_init__(self):
        if len(self.word) != WORD_LENGTH or len(self.statuses) != WORD_LENGTH:
            raise ValueError(f"A guess needs {WORD_LENGTH} letters and {WORD_LENGTH} statuses")
        object.__setattr__(self, 'word', self.word.upper())
        object.__setattr__(self, 'statuses', tuple(TileStatus(s) for s in self.statuses))

    def to_dict(self) -> Dict:
        return {'word': self.word, 'statuses': [s.value for s in self.statuses]}

    @classmethod
    def from_dict(cls, data: Mapping) -> 'Guess':
        return cls(word=str(data['word']), statuses=tuple(data['statuses']))


@dataclass(frozen=True)
class GameState:
    """
    Aggregate root for one day's game.

    Instances are never changed in place; transitions build a new state with
    ``dataclasses.replace`` and a copied rack.
    """
    date_key: str
    answer: str
    rack: Rack = field(hash=False)
    guesses: Tuple[Guess, ...] = ()
    max_rounds: int = 8
    rack_size_start: int = 12
    draw_per_round: int = 2
    status: GameStatus = GameStatus.PLAYING
    message: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, 'rack', Rack.coerce(self.rack))
        object.__setattr__(self, 'guesses', tuple(self.guesses))
        object.__setattr__(self, 'status', GameStatus(self.status))
        if len(self.guesses) > self.max_rounds:
            raise ValueError(f"{len(self.guesses)} guesses exceed max_rounds={self.max_rounds}")

    @property
    def is_over(self) -> bool:
        return self.status is not GameStatus.PLAYING

    @property
    def rounds_used(self) -> int:
        return len(self.guesses)

    def evolve(self, **changes) -> 'GameState':
        return replace(self, **changes)

    def to_dict(self) -> Dict:
        """Serialize to the persisted record layout; ``message`` is omitted when unset."""
        data = {
            'dateKey': self.date_key,
            'answer': self.answer,
            'rack': self.rack.to_dict(),
            'guesses': [g.to_dict() for g in self.guesses],
            'maxRounds': self.max_rounds,
            'rackSizeStart': self.rack_size_start,
            'drawPerRound': self.draw_per_round,
            'status': self.status.value,
        }
        if self.message is not None:
            data['message'] = self.message
        return data

    @classmethod
    def from_dict(cls, data: Mapping) -> 'GameState':
        """
        Rebuild a state from its persisted record.

        Raises:
            KeyError: If a required field is missing
            ValueError: If a field has the wrong shape
        """
        if not isinstance(data, Mapping):
            raise ValueError("Game state must be a JSON object")
        guesses: List[Guess] = [Guess.from_dict(g) for g in data['guesses']]
        return cls(
            date_key=str(data['dateKey']),
            answer=str(data['answer']).lower(),
            rack=Rack(data['rack']),
            guesses=tuple(guesses),
            max_rounds=int(data['maxRounds']),
            rack_size_start=int(data['rackSizeStart']),
            draw_per_round=int(data['drawPerRound']),
            status=GameStatus(data['status']),
            message=data.get('message'),
        )

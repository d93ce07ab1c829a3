"""
Game Service

Contains the core game logic for the daily rack puzzle: answer selection,
starting rack construction, guess evaluation, rack burning and drawing, and
the summaries built from a finished game.

Every function here is pure. States go in, new states come out; storage is the
caller's business (see ``session_service``).
"""

from collections import Counter
from datetime import datetime, timezone
from typing import Dict, Iterable, List, Mapping, Optional, Sequence
from zoneinfo import ZoneInfo

from ..config.game_settings import (
    DRAW_PER_ROUND, MAX_ROUNDS, PUZZLE_TIMEZONE, RACK_DRAW_CAP,
    RACK_SIZE_START, SEED_SALT, WORD_LENGTH, WORD_LIST, WORD_SET
)
from ..models.game import GameState, GameStatus, Guess, Rack, TileStatus
from .prng import seeded_int, seeded_letter

# User-facing validation messages, checked in this order
ERROR_FORMAT = "Enter a 5-letter word."
ERROR_RACK = "You don't have those letters in your rack."
ERROR_NOT_A_WORD = "Not in word list."

MESSAGE_WON = "You solved it!"

STATUS_EMOJI = {
    TileStatus.CORRECT: "🟩",
    TileStatus.PRESENT: "🟨",
    TileStatus.ABSENT: "⬜",
}


class RackConfigurationError(ValueError):
    """The starting rack could not be filled within the draw cap."""


# Seed derivation. The exact strings are a stable format: see SEED_SALT.

def answer_seed(date_key: str) -> str:
    return f"{SEED_SALT}:answer:{date_key}"


def initial_rack_seed(date_key: str, index: int) -> str:
    return f"{SEED_SALT}:init:{date_key}:{index}"


def draw_seed(date_key: str, round_index: int, draw_index: int) -> str:
    return f"{SEED_SALT}:draw:{date_key}:r{round_index}:i{draw_index}"


def current_date_key(now: Optional[datetime] = None, tz_name: str = PUZZLE_TIMEZONE) -> str:
    """
    Day identifier (``YYYY-MM-DD``) in the puzzle's reference timezone.

    Args:
        now: Instant to convert; defaults to the current time. Naive values are treated as UTC.
        tz_name: IANA timezone that decides when the day rolls over

    Returns:
        str: Date key shared by every player worldwide at that instant
    """
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return now.astimezone(ZoneInfo(tz_name)).strftime('%Y-%m-%d')


def is_date_key(value: str) -> bool:
    """True for well-formed ``YYYY-MM-DD`` calendar dates."""
    if not isinstance(value, str) or len(value) != 10:
        return False
    try:
        datetime.strptime(value, '%Y-%m-%d')
    except ValueError:
        return False
    return True


def pick_answer(date_key: str, words: Sequence[str] = WORD_LIST) -> str:
    """Select the day's answer by seeded index into the ordered word list."""
    return words[seeded_int(answer_seed(date_key), len(words))]


def count_rack(rack: Mapping[str, int]) -> int:
    """Total number of tiles in the rack."""
    return Rack.coerce(rack).total()


def build_initial_rack(date_key: str, answer: str, rack_size_start: int = RACK_SIZE_START) -> Rack:
    """
    Build the starting rack for a day.

    The answer's letters go in first, duplicates included, so the puzzle can
    always be solved. Seeded letters then fill the rack up to
    ``rack_size_start`` tiles.

    Raises:
        RackConfigurationError: If ``RACK_DRAW_CAP`` draws were not enough to reach the requested size
    """
    rack = Rack()
    for letter in answer.upper():
        rack.add(letter)

    i = 0
    while rack.total() < rack_size_start and i < RACK_DRAW_CAP:
        rack.add(seeded_letter(initial_rack_seed(date_key, i)))
        i += 1

    if rack.total() < rack_size_start:
        raise RackConfigurationError(
            f"Starting rack for {date_key} stopped at {rack.total()} of {rack_size_start} tiles "
            f"after {RACK_DRAW_CAP} draws"
        )
    return rack


def new_game(date_key: str,
             max_rounds: int = MAX_ROUNDS,
             rack_size_start: int = RACK_SIZE_START,
             draw_per_round: int = DRAW_PER_ROUND,
             words: Sequence[str] = WORD_LIST) -> GameState:
    """
    Creates the fresh puzzle for a day.

    Args:
        date_key: Day identifier from ``current_date_key``
        max_rounds: Guesses allowed before the game is lost
        rack_size_start: Tiles in the starting rack
        draw_per_round: Tiles drawn after every guess
        words: Ordered answer list

    Returns:
        GameState: Playing state with an empty guess history
    """
    answer = pick_answer(date_key, words)
    return GameState(
        date_key=date_key,
        answer=answer,
        rack=build_initial_rack(date_key, answer, rack_size_start),
        guesses=(),
        max_rounds=max_rounds,
        rack_size_start=rack_size_start,
        draw_per_round=draw_per_round,
        status=GameStatus.PLAYING,
    )


def can_make_word_from_rack(word: str, rack: Mapping[str, int]) -> bool:
    return Rack.coerce(rack).can_spell(word)


def validate_guess(word: str, rack: Mapping[str, int], words: Iterable[str] = WORD_SET) -> Optional[str]:
    """
    Checks whether a word may be played against the current rack.

    Checks run in a fixed order and the first failure is reported: shape,
    then rack letters, then the word list.

    Returns:
        Optional[str]: User-facing reason, or None when the guess is playable
    """
    if not isinstance(word, str):
        return ERROR_FORMAT

    normalized = word.strip().lower()
    if len(normalized) != WORD_LENGTH or not (normalized.isascii() and normalized.isalpha()):
        return ERROR_FORMAT

    if not can_make_word_from_rack(normalized, rack):
        return ERROR_RACK

    if normalized not in words:
        return ERROR_NOT_A_WORD

    return None


def score_guess(guess: str, answer: str) -> List[TileStatus]:
    """
    Wordle-style feedback with duplicate-letter accounting.

    Greens are marked first; each answer letter left unmatched can then turn
    at most one other guess letter yellow.
    """
    g = guess.lower()
    a = answer.lower()

    result = [TileStatus.ABSENT] * WORD_LENGTH
    remaining: Counter = Counter()

    for i in range(WORD_LENGTH):
        if g[i] == a[i]:
            result[i] = TileStatus.CORRECT
        else:
            remaining[a[i]] += 1

    for i in range(WORD_LENGTH):
        if result[i] is TileStatus.CORRECT:
            continue
        if remaining[g[i]] > 0:
            result[i] = TileStatus.PRESENT
            remaining[g[i]] -= 1

    return result


def apply_guess(state: GameState, word: str) -> GameState:
    """
    Plays one pre-validated guess and returns the next state.

    Absent tiles are burned from the rack one instance each; present and
    correct tiles stay. The guess is recorded, ``draw_per_round`` seeded
    letters are drawn, and the game ends on a match or when the last round is
    used. Finished games are returned unchanged.

    Args:
        state: Current state; it is not modified
        word: Guess that already passed ``validate_guess``

    Returns:
        GameState: The following state
    """
    if state.status is not GameStatus.PLAYING:
        return state

    guess = word.strip().lower()
    statuses = score_guess(guess, state.answer)

    rack = state.rack.copy()
    for letter, status in zip(guess.upper(), statuses):
        if status is TileStatus.ABSENT:
            rack.burn(letter)

    guesses = state.guesses + (Guess(guess.upper(), tuple(statuses)),)
    round_index = len(guesses) - 1

    for j in range(state.draw_per_round):
        rack.add(seeded_letter(draw_seed(state.date_key, round_index, j)))

    status = GameStatus.PLAYING
    message = None
    if guess == state.answer.lower():
        status = GameStatus.WON
        message = MESSAGE_WON
    elif len(guesses) >= state.max_rounds:
        status = GameStatus.LOST
        message = f"Out of rounds. Answer: {state.answer.upper()}"

    return state.evolve(rack=rack, guesses=guesses, status=status, message=message)


def overall_letter_knowledge(guesses: Iterable[Guess]) -> Dict[str, TileStatus]:
    """Best status seen per letter across all guesses; a letter never drops to a lower rank."""
    knowledge: Dict[str, TileStatus] = {}
    for guess in guesses:
        for letter, status in zip(guess.word, guess.statuses):
            previous = knowledge.get(letter)
            if previous is None or status.rank > previous.rank:
                knowledge[letter] = status
    return knowledge


def emoji_for_status(status: TileStatus) -> str:
    return STATUS_EMOJI[TileStatus(status)]


def share_text(state: GameState) -> str:
    """
    Spoiler-free summary for sharing.

    ``Rackle <date> <n>/<max>`` on a win (``X/<max>`` otherwise), one glyph
    row per guess, then the tiles left in the rack.
    """
    if state.status is GameStatus.WON:
        score = f"{len(state.guesses)}/{state.max_rounds}"
    else:
        score = f"X/{state.max_rounds}"

    lines = [f"Rackle {state.date_key} {score}"]
    for guess in state.guesses:
        lines.append("".join(emoji_for_status(s) for s in guess.statuses))
    lines.append(f"Rack left: {count_rack(state.rack)}")
    return "\n".join(lines)


KEYBOARD_ROWS = ("QWERTYUIOP", "ASDFGHJKL", "ZXCVBNM")


def keyboard_view(rack: Mapping[str, int], guesses: Iterable[Guess]) -> List[List[Dict]]:
    """
    Keyboard model for clients, one list per QWERTY row.

    A key is playable while the rack holds the letter and it has not been
    seen absent.
    """
    rack = Rack.coerce(rack)
    knowledge = overall_letter_knowledge(guesses)
    rows = []
    for row in KEYBOARD_ROWS:
        keys = []
        for letter in row:
            status = knowledge.get(letter)
            keys.append({
                'letter': letter,
                'count': rack[letter],
                'status': status.value if status else None,
                'playable': rack[letter] > 0 and status is not TileStatus.ABSENT,
            })
        rows.append(keys)
    return rows

from collections import Counter
from datetime import datetime, timedelta, timezone

import pytest

from rackle.models import GameStatus, Rack
from rackle.services import game_service
from rackle.services.game_service import (
    RackConfigurationError, build_initial_rack, current_date_key, is_date_key,
    new_game, pick_answer
)


def test_date_key_uses_los_angeles_day():
    # 07:59 UTC is still the previous evening in Los Angeles (UTC-8 in winter)
    assert current_date_key(datetime(2026, 1, 2, 7, 59, tzinfo=timezone.utc)) == '2026-01-01'
    assert current_date_key(datetime(2026, 1, 2, 8, 0, tzinfo=timezone.utc)) == '2026-01-02'


def test_date_key_follows_daylight_saving():
    # PDT is UTC-7
    assert current_date_key(datetime(2026, 7, 4, 6, 59, tzinfo=timezone.utc)) == '2026-07-03'
    assert current_date_key(datetime(2026, 7, 4, 7, 0, tzinfo=timezone.utc)) == '2026-07-04'


def test_date_key_treats_naive_datetimes_as_utc():
    assert current_date_key(datetime(2026, 1, 2, 7, 59)) == '2026-01-01'


def test_date_key_ignores_caller_timezone():
    tokyo = timezone(timedelta(hours=9))
    assert current_date_key(datetime(2026, 1, 3, 0, 30, tzinfo=tokyo)) == '2026-01-02'


def test_date_key_defaults_to_now():
    assert is_date_key(current_date_key())


@pytest.mark.parametrize('value, expected', [
    ('2026-01-02', True),
    ('2026-02-30', False),
    ('2026-1-2', False),
    ('today', False),
    (None, False),
])
def test_is_date_key(value, expected):
    assert is_date_key(value) is expected


@pytest.mark.parametrize('date_key, answer', [
    ('2026-01-02', 'graph'),
    ('2026-10-18', 'peace'),
    ('2025-12-31', 'pasta'),
])
def test_pick_answer_matches_reference(date_key, answer):
    assert pick_answer(date_key) == answer


def test_initial_rack_matches_reference():
    rack = build_initial_rack('2026-01-02', 'graph', 12)
    assert rack == {'G': 1, 'R': 2, 'A': 1, 'P': 1, 'H': 2, 'N': 1, 'T': 2, 'S': 1, 'U': 1}


def test_initial_rack_covers_repeated_answer_letters():
    rack = build_initial_rack('2026-10-18', 'peace', 12)
    assert rack['E'] >= 2
    assert rack.total() == 12


def test_new_game_is_deterministic():
    first = new_game('2026-03-14')
    second = new_game('2026-03-14')
    assert first.answer == second.answer
    assert first.to_dict() == second.to_dict()


def test_new_game_defaults():
    state = new_game('2026-01-02')
    assert state.answer == 'graph'
    assert state.status is GameStatus.PLAYING
    assert state.guesses == ()
    assert state.message is None
    assert (state.max_rounds, state.rack_size_start, state.draw_per_round) == (8, 12, 2)
    assert state.rack.total() == 12


def test_every_day_of_a_year_is_solvable():
    start = datetime(2026, 1, 1)
    for offset in range(366):
        date_key = (start + timedelta(days=offset)).strftime('%Y-%m-%d')
        state = new_game(date_key)
        need = Counter(state.answer.upper())
        assert all(state.rack[letter] >= n for letter, n in need.items()), date_key
        assert state.rack.can_spell(state.answer)
        assert state.rack.total() == 12


def test_rack_smaller_than_answer_keeps_answer_letters():
    rack = build_initial_rack('2026-01-02', 'graph', 3)
    assert rack == {'G': 1, 'R': 1, 'A': 1, 'P': 1, 'H': 1}


def test_draw_cap_overflow_is_reported(monkeypatch):
    monkeypatch.setattr(game_service, 'RACK_DRAW_CAP', 3)
    with pytest.raises(RackConfigurationError):
        build_initial_rack('2026-01-02', 'graph', 12)


def test_new_game_accepts_custom_word_list():
    state = new_game('2026-01-02', words=['alloy'])
    assert state.answer == 'alloy'
    assert state.rack['L'] >= 2


def test_seed_strings_are_stable():
    assert game_service.answer_seed('2026-01-02') == 'rackle:v1:core:answer:2026-01-02'
    assert game_service.initial_rack_seed('2026-01-02', 7) == 'rackle:v1:core:init:2026-01-02:7'
    assert game_service.draw_seed('2026-01-02', 3, 1) == 'rackle:v1:core:draw:2026-01-02:r3:i1'
    assert isinstance(build_initial_rack('2026-01-02', 'graph'), Rack)

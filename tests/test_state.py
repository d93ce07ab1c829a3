from collections import Counter

import pytest

from rackle.models import GameState, GameStatus, Rack, TileStatus
from rackle.services.game_service import (
    MESSAGE_WON, apply_guess, count_rack, draw_seed, score_guess
)
from rackle.services.prng import seeded_letter

C, P, A = TileStatus.CORRECT, TileStatus.PRESENT, TileStatus.ABSENT


def _draws(state, round_index):
    return [seeded_letter(draw_seed(state.date_key, round_index, j)) for j in range(state.draw_per_round)]


def test_absent_tiles_burn_and_two_letters_are_drawn(graph_state):
    after = apply_guess(graph_state, 'trash')

    assert after.guesses[-1].word == 'TRASH'
    assert after.guesses[-1].statuses == (A, C, C, A, C)
    # Round 0 of 2026-01-02 draws L then A
    assert after.rack == {'G': 2, 'R': 2, 'A': 3, 'P': 2, 'H': 2, 'T': 1, 'S': 1, 'N': 1, 'E': 1, 'L': 1}
    assert after.status is GameStatus.PLAYING
    assert after.message is None


def test_burned_out_letters_leave_the_rack():
    state = GameState(
        date_key='2026-01-02', answer='graph',
        rack=Rack({'T': 1, 'R': 1, 'A': 1, 'S': 1, 'H': 1}),
    )
    after = apply_guess(state, 'trash')
    assert after.rack == {'R': 1, 'A': 2, 'H': 1, 'L': 1}
    assert 'T' not in after.rack
    assert 'S' not in after.rack
    assert all(count > 0 for _, count in after.rack.items())


def test_input_state_is_not_modified(graph_state):
    before = graph_state.to_dict()
    apply_guess(graph_state, 'trash')
    assert graph_state.to_dict() == before


def test_rack_accounting_over_several_rounds(graph_state):
    state = graph_state
    for round_index, word in enumerate(['trash', 'grant', 'sharp']):
        statuses = score_guess(word, state.answer)
        burned = Counter(letter for letter, s in zip(word.upper(), statuses) if s is A)
        drawn = Counter(_draws(state, round_index))

        after = apply_guess(state, word)

        assert count_rack(after.rack) == count_rack(state.rack) - sum(burned.values()) + state.draw_per_round
        for letter in set(word.upper()) | set(drawn):
            assert after.rack[letter] == state.rack[letter] - burned[letter] + drawn[letter]
        state = after

    assert [g.word for g in state.guesses] == ['TRASH', 'GRANT', 'SHARP']
    assert state.status is GameStatus.PLAYING


def test_win_sets_message(graph_state):
    after = apply_guess(graph_state, 'GRAPH')
    assert after.status is GameStatus.WON
    assert after.message == MESSAGE_WON
    assert after.guesses[-1].statuses == (C,) * 5


def test_loss_when_rounds_run_out(graph_state):
    state = graph_state.evolve(max_rounds=2)
    state = apply_guess(state, 'trash')
    assert state.status is GameStatus.PLAYING
    state = apply_guess(state, 'grant')
    assert state.status is GameStatus.LOST
    assert state.message == 'Out of rounds. Answer: GRAPH'
    assert len(state.guesses) == state.max_rounds


def test_win_on_last_round_counts_as_win(graph_state):
    state = apply_guess(graph_state.evolve(max_rounds=1), 'graph')
    assert state.status is GameStatus.WON


@pytest.mark.parametrize('final_word', ['graph', 'trash'])
def test_finished_games_ignore_further_guesses(graph_state, final_word):
    finished = apply_guess(graph_state.evolve(max_rounds=1), final_word)
    assert finished.is_over
    assert apply_guess(finished, 'grant') is finished


def test_present_and_correct_tiles_are_kept(graph_state):
    after = apply_guess(graph_state, 'sharp')
    # S is the only absent tile; H, A, R, P stay
    drawn = Counter(_draws(graph_state, 0))
    for letter in 'HARP':
        assert after.rack[letter] == graph_state.rack[letter] + drawn[letter]
    assert after.rack['S'] == graph_state.rack['S'] - 1 + drawn['S']


def test_each_round_draws_from_its_own_seeds(graph_state):
    first = apply_guess(graph_state, 'trash')
    second = apply_guess(first, 'trash')

    assert _draws(graph_state, 0) == ['L', 'A']
    expected = Counter(first.rack.to_dict())
    expected.subtract({'T': 1, 'S': 1})
    expected.update(_draws(first, 1))
    assert second.rack == {letter: n for letter, n in expected.items() if n > 0}


def test_state_built_from_a_plain_dict_rack_can_be_played():
    state = GameState(
        date_key='2026-01-02', answer='graph',
        rack={'T': 1, 'R': 1, 'A': 1, 'S': 1, 'H': 1},
    )
    assert isinstance(state.rack, Rack)

    after = apply_guess(state, 'trash')
    assert after.rack == {'R': 1, 'A': 2, 'H': 1, 'L': 1}
    assert count_rack(after.rack) == 5

import pytest

from rackle import create_app
from rackle.config import TestingConfig
from rackle.models import GameState, Rack


@pytest.fixture
def app():
    return create_app(TestingConfig)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def graph_state():
    """Game for 2026-01-02, whose answer is GRAPH, with a rack roomy enough for any test guess."""
    return GameState(
        date_key='2026-01-02',
        answer='graph',
        rack=Rack({'G': 2, 'R': 2, 'A': 2, 'P': 2, 'H': 2, 'T': 2, 'S': 2, 'N': 1, 'E': 1}),
        max_rounds=8,
        rack_size_start=12,
        draw_per_round=2,
    )

import json

from rackle.utils.game_logger import GameLogger


def test_file_logging_and_stats(tmp_path):
    logger = GameLogger(str(tmp_path))
    try:
        logger.log_game_event('2026-01-02', 'game_won', rounds_used=3)
        logger.log_game_event('2026-01-02', 'game_reset')

        stats = logger.get_log_stats()
        assert stats['game_events'] == 2
        assert stats['total_entries'] == 2

        line = next(tmp_path.glob('game_log_*.log')).read_text(encoding='utf-8').splitlines()[0]
        entry = json.loads(line.split(' | ', 2)[2])
        assert entry['event_type'] == 'GAME_EVENT'
        assert entry['action'] == 'game_won'
        assert entry['details'] == {'date_key': '2026-01-02', 'rounds_used': 3}
    finally:
        logger.configure(None)


def test_console_only_logger_reports_no_file():
    logger = GameLogger()
    assert logger.get_log_stats() == {'error': 'File logging disabled'}


def test_responses_are_logged_without_the_answer():
    logger = GameLogger()
    record = {
        'success': True,
        'state': {
            'dateKey': '2026-01-02', 'answer': 'graph', 'rack': {'A': 2, 'B': 1},
            'guesses': [{}], 'maxRounds': 8, 'status': 'playing'
        }
    }
    sanitized = logger._sanitize_response_data(record)
    assert 'answer' not in sanitized['state']
    assert sanitized['state'] == {
        'date_key': '2026-01-02', 'status': 'playing', 'max_rounds': 8,
        'guesses_count': 1, 'rack_size': 3
    }
    assert record['state']['answer'] == 'graph'

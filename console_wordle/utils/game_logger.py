"""
Game Logger Module for Console Wordle

One JSON object per log line, written to a dated file under LOG_DIR. The
console front end logs under the 'console' identity; API calls log the
caller's address. Only errors reach the terminal, which is the game board.
"""

import logging
import json
from collections import Counter
from datetime import datetime
from typing import Dict, Any, Optional
from pathlib import Path

from ..config.app_config import Config


CONSOLE_IDENTITY = 'console'

# Summary fields kept when a game state is logged; the answer is never one of them.
_STATE_SUMMARY_FIELDS = ('current_round', 'max_rounds', 'status')


class GameLogger:
    """Structured logger for player actions, API responses and round events."""

    def __init__(self, log_dir: str = "logs", level: str = "INFO"):
        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.level = logging.getLevelName(level.upper()) if isinstance(level, str) else level
        if not isinstance(self.level, int):
            self.level = logging.INFO

        self.logger = self._setup_logger()

    def _log_file(self) -> Path:
        return self.log_dir / f"game_log_{datetime.now().strftime('%Y-%m-%d')}.log"

    def _setup_logger(self) -> logging.Logger:
        logger = logging.getLogger('console_wordle')
        logger.setLevel(self.level)
        logger.propagate = False

        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)

        file_handler = logging.FileHandler(self._log_file(), encoding='utf-8')
        file_handler.setLevel(self.level)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s | %(levelname)s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))

        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.ERROR)
        console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))

        logger.addHandler(file_handler)
        logger.addHandler(console_handler)
        return logger

    @staticmethod
    def _identity(request=None) -> str:
        """The caller's address for API requests, 'console' otherwise."""
        if request is None:
            return CONSOLE_IDENTITY
        return getattr(request, 'remote_addr', None) or 'unknown'

    def _create_log_entry(self,
                          event_type: str,
                          action: str,
                          source: str,
                          details: Dict[str, Any]) -> str:
        return json.dumps({
            'timestamp': datetime.now().isoformat(),
            'event_type': event_type,
            'action': action,
            'source': source,
            'details': details
        }, ensure_ascii=False, default=str)

    def _emit(self, level: int, event_type: str, action: str, source: str, details: Dict[str, Any]):
        self.logger.log(level, self._create_log_entry(event_type, action, source, details))

    def log_user_action(self,
                        request,
                        action: str,
                        game_id: Optional[str] = None,
                        **kwargs):
        """
        Log something the player did.

        Args:
            request: Flask request object, or None for the console
            action: e.g. 'new_game', 'submit_guess', 'invalid_guess', 'reset_stats'
            game_id: API session identifier, if any
            **kwargs: Extra details
        """
        details = {'game_id': game_id}
        if request is not None:
            details['endpoint'] = f"{request.method} {request.path}"
        details.update(kwargs)
        self._emit(logging.INFO, 'USER_ACTION', action, self._identity(request), details)

    def log_server_response(self,
                            request,
                            action: str,
                            success: bool,
                            response_data: Dict[str, Any],
                            game_id: Optional[str] = None,
                            **kwargs):
        """Log an API response; failed responses are logged at ERROR."""
        details = {
            'game_id': game_id,
            'success': success,
            'response': self._sanitize_response_data(response_data),
            **kwargs
        }
        level = logging.INFO if success else logging.ERROR
        self._emit(level, 'SERVER_RESPONSE', action, self._identity(request), details)

    def log_game_event(self,
                       game_id: Optional[str],
                       event: str,
                       user_ip: str,
                       **kwargs):
        """Log a round or statistics event ('round_started', 'game_won', 'stats_disabled', ...)."""
        self._emit(logging.INFO, 'GAME_EVENT', event, user_ip, {'game_id': game_id, **kwargs})

    def log_error(self,
                  request,
                  error: Exception,
                  action: str,
                  game_id: Optional[str] = None):
        details = {
            'game_id': game_id,
            'error_type': type(error).__name__,
            'error_message': str(error)
        }
        self._emit(logging.ERROR, 'ERROR', action, self._identity(request), details)

    def _sanitize_response_data(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Replace a full game state by a summary that never carries the answer."""
        if not isinstance(data, dict):
            return {'data_type': type(data).__name__}

        state = data.get('state')
        if not isinstance(state, dict):
            return dict(data)

        summary = {field: state.get(field) for field in _STATE_SUMMARY_FIELDS}
        summary['guesses_count'] = len(state.get('guesses', []))
        summary['answer_revealed'] = state.get('answer') is not None
        return {**data, 'state': summary}

    def get_log_stats(self) -> Dict[str, Any]:
        """Count today's entries by event type, for the health endpoint."""
        log_file = self._log_file()
        if not log_file.exists():
            return {'error': 'No log file found for today'}

        events = Counter()
        try:
            with open(log_file, 'r', encoding='utf-8') as f:
                for line in f:
                    _, _, message = line.rstrip('\n').partition(' | ')
                    _, _, message = message.partition(' | ')
                    try:
                        events[json.loads(message)['event_type']] += 1
                    except (ValueError, KeyError, TypeError):
                        # plain-text lines such as startup messages
                        events['OTHER'] += 1
        except OSError as e:
            return {'error': f'Failed to read log file: {e}'}

        return {
            'log_file': str(log_file),
            'total_entries': sum(events.values()),
            'events': dict(events)
        }


game_logger = GameLogger(Config.LOG_DIR, Config.LOG_LEVEL)

"""
Console Wordle - Main Entry Point

`play` (the default) runs the terminal game with statistics saved to
STATS_PATH. `serve` starts the single-player JSON API.
"""

import argparse
import random
import sys

from colorama import init as colorama_init

from console_wordle import create_app
from console_wordle.config import get_config
from console_wordle.controllers.console_controller import ConsoleGame
from console_wordle.models.stats import StatsLedger
from console_wordle.services.game_service import GameSession, initialize_game_service
from console_wordle.services.stats_store import StatsStore
from console_wordle.services.word_source import WordSource
from console_wordle.utils.game_logger import game_logger


def build_parser(settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='console-wordle', description='Guess the five-letter word.')
    subparsers = parser.add_subparsers(dest='command')

    play = subparsers.add_parser('play', help='play in the terminal (default)')
    play.add_argument('--stats', default=None, help=f'statistics file (default: {settings.STATS_PATH})')
    play.add_argument('--seed', type=int, default=None, help='seed for reproducible secrets')
    play.add_argument('--no-color', action='store_true', help='plain text board')

    serve = subparsers.add_parser('serve', help='run the JSON API')
    serve.add_argument('--host', default=settings.HOST)
    serve.add_argument('--port', type=int, default=settings.PORT)

    return parser


def play(args, settings) -> int:
    word_source = WordSource.from_files(settings.ANSWERS_PATH, settings.EXTRAS_PATH)
    rng = random.Random(args.seed) if args.seed is not None else None
    store = StatsStore(args.stats or settings.STATS_PATH)
    session = GameSession(word_source, StatsLedger(), store, rng=rng)

    use_color = settings.USE_COLOR and not args.no_color
    if use_color:
        colorama_init()

    game_logger.logger.info(f"Console session starting (stats enabled: {session.stats_enabled})")
    ConsoleGame(session, use_color=use_color).run()
    game_logger.logger.info("Console session finished")
    return 0


def serve(args, settings) -> int:
    game_service = initialize_game_service()
    print(f"✓ Game service initialized with {len(game_service.word_source)} accepted words")

    app = create_app(settings)
    game_logger.logger.info("Wordle API starting")

    print(f"\nStarting Wordle API on {args.host}:{args.port}")
    print(f"Debug mode: {settings.DEBUG}")
    print("=" * 50)

    try:
        app.run(host=args.host, port=args.port, debug=settings.DEBUG)
    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Wordle API shutting down (KeyboardInterrupt)")
    return 0


def main(argv=None) -> int:
    """Main function: parse arguments and run the chosen front end."""
    argv = list(sys.argv[1:] if argv is None else argv)
    if not argv or argv[0] not in ('play', 'serve', '-h', '--help'):
        argv = ['play'] + argv
    settings = get_config()
    args = build_parser(settings).parse_args(argv)

    try:
        if args.command == 'serve':
            return serve(args, settings)
        return play(args, settings)
    except (OSError, ValueError) as e:
        print(f"Error starting game: {e}")
        game_logger.logger.error(f"Error starting game: {e}")
        return 1


if __name__ == '__main__':
    sys.exit(main())

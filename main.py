"""Main entry point for the marble draw hot-seat game."""

import argparse
import logging

from factory import MarbleFactory
from game.player_config import parse_player_names


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Marble Draw - four-player token race",
        epilog="""
Rules in brief:
  Draw four marbles; the number of whites decides the move.
    0 whites -> 4 steps   1 -> 1   2 -> 2   3 -> 2   4 -> 8 (9 on the inner loop)
  All four the same colour lets a token leave home and earns another draw.
  Landing on an opponent off the safe cells (*) sends it home and earns another draw.
  Tokens that have captured turn into the inner loop at the middle of the top/bottom rows.
  Finish all four tokens to win.

Examples:
  --players Ann,Bo,Cy,Di
  --seed 42 --transcript-file logs
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for reproducible games",
    )
    parser.add_argument(
        "--games", type=int, default=1, help="Number of games to play (default: 1)"
    )
    parser.add_argument(
        "--players",
        type=str,
        default=None,
        metavar="NAMES",
        help="Comma-separated player names, in seat order",
    )
    parser.add_argument(
        "--transcript-file",
        nargs="?",
        const=".",
        default=None,
        metavar="DIR",
        help="Log game events to marblelog_<seed>.txt in DIR (default: current directory)",
    )
    parser.add_argument(
        "--transcript-screen",
        action="store_true",
        help="Output transcript format game events to screen",
    )
    parser.add_argument(
        "--no-board", action="store_true", help="Do not print the board after each move"
    )
    parser.add_argument(
        "--no-auto-select",
        action="store_true",
        help="Always ask which token to move, even when only one can",
    )
    parser.add_argument(
        "--stats",
        action="store_true",
        help="Report wins per player when done",
    )
    parser.add_argument(
        "--debug", action="store_true", help="Enable debug logging of engine decisions"
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        player_configs = parse_player_names(args.players)
    except ValueError as e:
        parser.error(f"Invalid player names: {e}")
        return

    factory = MarbleFactory()
    controller = factory.create_controller(
        seed=args.seed,
        player_configs=player_configs,
        log_to_file=args.transcript_file,
        log_to_screen=args.transcript_screen,
        max_games=args.games,
        show_board=not args.no_board,
        auto_select=not args.no_auto_select,
    )
    try:
        controller.run()
    except (EOFError, KeyboardInterrupt):
        print("\nGame abandoned.")
        controller.abandon()

    if args.stats:
        controller.print_statistics()


if __name__ == "__main__":
    main()

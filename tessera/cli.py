"""
Tessera CLI - Command-line interface for the engine.

Usage:
    tessera new --seed N           Print the initial state of a seeded game
    tessera simulate --seed N      Play a seeded random game to the end
    tessera serve                  Run the REST API with uvicorn
"""

import argparse
import json
import random
import sys

from .logging_setup import setup_logging


def main():
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Tessera - Tile-Drafting Game Engine",
        prog="tessera",
    )
    parser.add_argument("--log-level", default=None, help="Logging level (default: TESSERA_LOG_LEVEL or INFO)")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # New game command
    new_parser = subparsers.add_parser("new", help="Print the initial state of a game")
    new_parser.add_argument("--seed", type=int, default=None, help="Root seed")

    # Simulate command
    simulate_parser = subparsers.add_parser("simulate", help="Play a seeded random game")
    simulate_parser.add_argument("--seed", type=int, default=0, help="Root seed")
    simulate_parser.add_argument("--max-actions", type=int, default=5000, help="Safety limit")
    simulate_parser.add_argument("--verbose", "-v", action="store_true", help="Print every change")

    # Serve command
    serve_parser = subparsers.add_parser("serve", help="Run the REST API")
    serve_parser.add_argument("--host", default="127.0.0.1")
    serve_parser.add_argument("--port", type=int, default=8000)

    args = parser.parse_args()
    setup_logging(args.log_level)

    if args.command == "new":
        cmd_new(args)
    elif args.command == "simulate":
        cmd_simulate(args)
    elif args.command == "serve":
        cmd_serve(args)
    else:
        parser.print_help()
        sys.exit(1)


def cmd_new(args):
    """Print a fresh game state as JSON."""
    from .engine_core import new_game
    from .api.schemas import GameStateResponse

    state = new_game(seed=args.seed)
    print(json.dumps(GameStateResponse.from_state(state).model_dump(mode="json"), indent=2))


def cmd_simulate(args):
    """Play random legal actions until the game ends."""
    from .engine_core import GamePhase, legal_actions
    from .session import SessionManager, GameLoop

    manager = SessionManager()
    session = manager.create_session(seed=args.seed)
    loop = GameLoop(session)
    chooser = random.Random(args.seed)

    print(f"Simulating game with seed {args.seed}")
    for _ in range(args.max_actions):
        state = session.game_state
        if state.phase == GamePhase.GAME_OVER:
            break
        action = chooser.choice(legal_actions(state))
        result = loop.submit(action)
        if not result.success:
            print(f"Error: legal action rejected: {result.error}")
            sys.exit(1)
        if args.verbose:
            for change in result.changes:
                print(f"  {change}")
    else:
        print(f"Stopped after {args.max_actions} actions without finishing")
        sys.exit(1)

    state = session.game_state
    print(f"Game over after {state.round_number} rounds")
    for player in state.players:
        print(f"  {player.name}: {player.score} points, {player.board.completed_rows()} completed rows")
    print(f"Winner(s): {', '.join(state.winner_ids)}")


def cmd_serve(args):
    """Run the REST API."""
    import uvicorn

    uvicorn.run("tessera.api.app:app", host=args.host, port=args.port)


if __name__ == "__main__":
    main()

"""Entry point: ``python -m keycrafter``.

Supports two modes:
  - ``python -m keycrafter``            → Launch the FastAPI server
  - ``python -m keycrafter cli``        → Headless play from scripted or automatic keys
"""

from __future__ import annotations

import argparse
import logging

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="KeyCrafter typing-harvest engine")
    sub = parser.add_subparsers(dest="command")

    # --- Server mode (default) ---
    srv = sub.add_parser("serve", help="Start the FastAPI server (default)")
    srv.add_argument("--host", type=str, default="127.0.0.1")
    srv.add_argument("--port", type=int, default=8000)
    srv.add_argument("--seed", type=int, default=42)
    srv.add_argument("--log-level", type=str, default="INFO", choices=["DEBUG", "INFO", "WARNING"])

    # --- Headless CLI mode ---
    cli = sub.add_parser("cli", help="Play headless from a key script or the auto-typist")
    cli.add_argument("--seed", type=int, default=42)
    cli.add_argument("--keys", type=str, default=None, help="Literal keys to type (default: auto-typist)")
    cli.add_argument("--words", type=int, default=20, help="Words for the auto-typist to type")
    cli.add_argument("--log-level", type=str, default="INFO", choices=["DEBUG", "INFO", "WARNING"])
    cli.add_argument("--log-file", type=str, default=None)

    return parser


def _run_server(args: argparse.Namespace) -> None:
    import uvicorn

    from keycrafter.api.app import create_app
    from keycrafter.config import GameConfig

    config = GameConfig(world_seed=args.seed, log_level=args.log_level)
    app = create_app(config)
    uvicorn.run(app, host=args.host, port=args.port, log_level=args.log_level.lower())


def _run_cli(args: argparse.Namespace) -> None:
    from keycrafter.config import GameConfig
    from keycrafter.engine.factory import build_game
    from keycrafter.engine.game_loop import AutoTypist, GameLoop, KeySource, ScriptedKeySource
    from keycrafter.utils.logging import setup_logging

    config = GameConfig(
        world_seed=args.seed,
        poll_interval_seconds=0.0,
        log_level=args.log_level,
        log_file=args.log_file,
    )
    setup_logging(config.log_level, config.log_file)

    game = build_game(config)
    source: KeySource
    if args.keys is not None:
        source = ScriptedKeySource(args.keys)
    else:
        source = AutoTypist(game, max_words=args.words)

    GameLoop(game, source).run()

    stats = game.state.stats
    logger.info(
        "Words %d/%d, mistakes %d, harvested %s, nodes left %d",
        stats.words_completed, stats.words_started, stats.mistakes_made,
        stats.resources_harvested or "nothing", len(game.state.nodes),
    )


def main() -> None:
    parser = _build_parser()
    args = parser.parse_args()

    # Default to serve mode if no subcommand given
    if args.command is None:
        args = parser.parse_args(["serve"])
    if args.command == "serve":
        _run_server(args)
    elif args.command == "cli":
        _run_cli(args)


if __name__ == "__main__":
    main()

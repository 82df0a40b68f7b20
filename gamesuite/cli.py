"""Command line entry points for gamesuite."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console

from .app import SuiteApp
from .config import GameSuiteConfig
from .console import ConsoleIO
from .formatting import build_history_table, format_history_lines
from .loaders import validate_words_file
from .validators import validate_config


def run_menu() -> None:
    parser = _parser("gamesuite interactive menu")
    args = parser.parse_args()
    app = _build_app(args)
    console = app.io.console

    while True:
        console.print("\n[bold]=== Game Menu ===[/bold]")
        games = app.games.all()
        for idx, game in enumerate(games, start=1):
            console.print(f"{idx}) {game.name} - {game.description}", markup=False)
        console.print("h) Show history  c) Clear history  q) Quit")
        try:
            choice = app.io.read_line("Choice: ").strip().lower()
        except EOFError:
            return
        if choice in {"q", "quit", "exit"}:
            return
        if choice in {"h", "history"}:
            console.print(build_history_table(app.history))
            continue
        if choice in {"c", "clear"}:
            if app.clear_history():
                console.print("History cleared.")
            continue
        game = _pick_game(app, choice, len(games))
        if game is None:
            console.print(f"Unknown choice: {choice}", style="red", markup=False)
            continue
        try:
            app.play(game)
        except EOFError:
            return


def run_play() -> None:
    parser = _parser("Play a single gamesuite game")
    parser.add_argument("game", help="Game id or command, e.g. 'word' or 'snake'")
    args = parser.parse_args()
    app = _build_app(args)
    try:
        app.resolve(args.game)
    except KeyError:
        known = ", ".join(game.game_id for game in app.games.all())
        app.io.write(f"Unknown game '{args.game}'. Available: {known}", style="red")
        sys.exit(2)
    try:
        score = app.play(args.game)
    except EOFError:
        app.io.write("\nInput closed before the game finished.", style="red")
        sys.exit(1)
    if score is not None:
        app.io.write(f"Score: {score}")


def run_history() -> None:
    parser = _parser("Show gamesuite play history")
    parser.add_argument("--plain", action="store_true", help="Print one line per game instead of a table")
    args = parser.parse_args()
    app = _build_app(args)
    if args.plain:
        for line in format_history_lines(app.history):
            app.io.write(line)
        return
    app.io.console.print(build_history_table(app.history))


def run_clear() -> None:
    parser = _parser("Clear gamesuite play history")
    args = parser.parse_args()
    app = _build_app(args)
    if not app.clear_history():
        sys.exit(1)
    app.io.write("History cleared.")


def run_validate() -> None:
    parser = _parser("gamesuite configuration validator")
    parser.add_argument("--words", help="Path to a word list JSON file to validate")
    args = parser.parse_args()
    config = _load_config(args)
    console = Console()

    errors = validate_config(config)
    if args.words:
        errors.extend(validate_words_file(Path(args.words), config.word_guess.word_length))
    if errors:
        _print_errors(console, errors)
        sys.exit(1)
    console.print("Configuration is valid.", markup=False)


def _parser(description: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument("--history", help="Path to the play history file")
    return parser


def _load_config(args: argparse.Namespace) -> GameSuiteConfig:
    config = GameSuiteConfig.from_env()
    if args.history:
        config.history.path = Path(args.history).expanduser()
    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return config


def _build_app(args: argparse.Namespace) -> SuiteApp:
    config = _load_config(args)
    console = Console()
    errors = validate_config(config)
    if errors:
        _print_errors(console, errors)
        sys.exit(1)
    return SuiteApp(config, io=ConsoleIO(console))


def _print_errors(console: Console, errors: list[str]) -> None:
    console.print("Configuration errors:", style="red")
    for err in errors:
        console.print(f"- {err}", markup=False)


def _pick_game(app: SuiteApp, choice: str, count: int) -> str | None:
    if choice.isdecimal() and 1 <= int(choice) <= count:
        return app.games.all()[int(choice) - 1].game_id
    game = app.games.find_by_command(choice) if choice else None
    return game.game_id if game else None

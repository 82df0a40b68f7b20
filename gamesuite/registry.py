"""Game capability protocol and the registry the menu dispatches through."""

from __future__ import annotations

from typing import Dict, Iterator, Protocol


class GameIO(Protocol):
    """Line-oriented input source paired with an output sink."""

    def read_line(self, prompt: str = "") -> str: ...
    def write(self, text: str = "", *, style: str | None = None) -> None: ...


class Game(Protocol):
    game_id: str
    name: str
    description: str
    command: str | None
    aliases: tuple[str, ...]

    def play(self) -> int | None: ...


class GameRegistry:
    """Register and look up games."""

    def __init__(self) -> None:
        self._games: Dict[str, Game] = {}
        self._commands: Dict[str, str] = {}

    def register(self, game: Game) -> None:
        if game.game_id in self._games:
            raise ValueError(f"Game {game.game_id} already registered")
        keys = list(self._iter_command_keys(game))
        for key in keys:
            if key in self._commands:
                other = self._commands[key]
                raise ValueError(f"Command '{key}' already used by game {other}")
        for key in keys:
            self._commands[key] = game.game_id
        self._games[game.game_id] = game

    def get(self, game_id: str) -> Game:
        try:
            return self._games[game_id]
        except KeyError as exc:
            raise KeyError(f"Game {game_id} not found") from exc

    def all(self) -> list[Game]:
        return list(self._games.values())

    def find_by_command(self, command: str) -> Game | None:
        key = command.strip().lstrip("/").lower()
        if key in self._games:
            return self._games[key]
        game_id = self._commands.get(key)
        return self._games.get(game_id) if game_id else None

    def _iter_command_keys(self, game: Game) -> Iterator[str]:
        if game.command:
            key = game.command.lstrip("/").lower()
            if key:
                yield key
        for alias in game.aliases:
            key = alias.lstrip("/").lower()
            if key:
                yield key


__all__ = ["Game", "GameIO", "GameRegistry"]

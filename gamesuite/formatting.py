"""Presentation helpers: banners and play-history rendering."""

from __future__ import annotations

from rich.table import Table

from .domain.history import HistoryStore
from .domain.stats import GameStats

WIN_BANNER = "\n".join(
    [
        "██╗    ██╗██╗███╗   ██╗███╗   ██╗███████╗██████╗ ",
        "██║    ██║██║████╗  ██║████╗  ██║██╔════╝██╔══██╗",
        "██║ █╗ ██║██║██╔██╗ ██║██╔██╗ ██║█████╗  ██████╔╝",
        "██║███╗██║██║██║╚██╗██║██║╚██╗██║██╔══╝  ██╔══██╗",
        "╚███╔███╔╝██║██║ ╚████║██║ ╚████║███████╗██║  ██║",
        " ╚══╝╚══╝ ╚═╝╚═╝  ╚═══╝╚═╝  ╚═══╝╚══════╝╚═╝  ╚═╝",
    ]
)

LOSE_BANNER = "\n".join(
    [
        "██╗      ██████╗ ███████╗███████╗██████╗ ",
        "██║     ██╔═══██╗██╔════╝██╔════╝██╔══██╗",
        "██║     ██║   ██║███████╗█████╗  ██████╔╝",
        "██║     ██║   ██║╚════██║██╔══╝  ██╔══██╗",
        "███████╗╚██████╔╝███████║███████╗██║  ██║",
        "╚══════╝ ╚═════╝ ╚══════╝╚══════╝╚═╝  ╚═╝",
    ]
)

EMPTY_HISTORY = "No games played yet."


def format_stats_line(name: str, stats: GameStats) -> str:
    parts = [f"{name} - Played: {stats.times_played}"]
    if stats.scores:
        parts.append(f"Avg Score: {stats.average_score:.2f}")
        parts.append(f"Last Score: {stats.last_score}")
    parts.append(f"Last Played: {stats.format_last_played()}")
    return ", ".join(parts)


def format_history_lines(store: HistoryStore) -> list[str]:
    if not store:
        return [EMPTY_HISTORY]
    return [format_stats_line(name, stats) for name, stats in sorted(store.items())]


def build_history_table(store: HistoryStore) -> Table:
    table = Table(title="Game Play History")
    table.add_column("Game")
    table.add_column("Played", justify="right")
    table.add_column("Avg Score", justify="right")
    table.add_column("Last Score", justify="right")
    table.add_column("Last Played")
    if not store:
        table.caption = EMPTY_HISTORY
        return table
    for name, stats in sorted(store.items()):
        has_scores = bool(stats.scores)
        table.add_row(
            name,
            str(stats.times_played),
            f"{stats.average_score:.2f}" if has_scores else "-",
            str(stats.last_score) if has_scores else "-",
            stats.format_last_played(),
        )
    return table


__all__ = [
    "EMPTY_HISTORY",
    "LOSE_BANNER",
    "WIN_BANNER",
    "build_history_table",
    "format_history_lines",
    "format_stats_line",
]

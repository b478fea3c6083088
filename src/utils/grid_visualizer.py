"""Text rendering of grids, selections and round summaries for the terminal."""

from typing import Dict, Iterable, List, Optional

from ..game.highscores import HighScoreTable
from ..game.models import SubmissionResult
from ..game.scoring import score_word
from ..solver.grid import render_grid
from ..solver.models import Cell, Grid


MESSAGES: Dict[str, Dict[str, str]] = {
    "tr": {
        "TOO_SHORT": "Çok Kısa!",
        "DUPLICATE": "Zaten Bulundu!",
        "NOT_IN_DICTIONARY": "Kelime Bulunamadı",
        "ROUND_INACTIVE": "Oyun bitti",
        "ACCEPTED": "+{points} Puan!",
        "MISSED": "Kaçırılan Kelimeler ({count})",
        "MORE": "+{count} daha...",
        "NO_SCORES": "Henüz skor yok.",
        "POINTS": "Puan",
    },
    "en": {
        "TOO_SHORT": "Too short!",
        "DUPLICATE": "Already found!",
        "NOT_IN_DICTIONARY": "Not in dictionary",
        "ROUND_INACTIVE": "Round is over",
        "ACCEPTED": "+{points} points!",
        "MISSED": "Missed words ({count})",
        "MORE": "+{count} more...",
        "NO_SCORES": "No scores yet.",
        "POINTS": "points",
    },
}


def render_board(grid: Grid, highlight: Optional[Iterable[Cell]] = None) -> str:
    """Render the grid inside a box; highlighted cells are bracketed."""
    width = grid.size * 3
    border = "+" + "-" * (width + 2) + "+"
    lines = [border]
    for line in render_grid(grid, highlight).split("\n"):
        lines.append(f"| {line.ljust(width)} |")
    lines.append(border)
    return "\n".join(lines)


def format_timer(seconds: int) -> str:
    """Format seconds as MM:SS."""
    seconds = max(0, seconds)
    return f"{seconds // 60:02d}:{seconds % 60:02d}"


def format_submission(result: SubmissionResult, language: str = "tr") -> Optional[str]:
    """Feedback line for a submission, or None when it should stay silent."""
    if result.silent:
        return None
    template = MESSAGES[language][result.outcome]
    return template.format(points=result.points)


def format_word_columns(words: List[str], columns: int = 4) -> str:
    """Lay words out in left-aligned columns, each followed by its score."""
    if not words:
        return ""
    labels = [f"{word} ({score_word(word)})" for word in words]
    width = max(len(label) for label in labels) + 2
    lines = []
    for i in range(0, len(labels), columns):
        lines.append("".join(label.ljust(width) for label in labels[i:i + columns]).rstrip())
    return "\n".join(lines)


def format_missed_words(missed: List[str], limit: int = 50, language: str = "tr") -> str:
    """Heading plus up to `limit` missed words, longest first."""
    messages = MESSAGES[language]
    lines = [messages["MISSED"].format(count=len(missed))]
    shown = missed[:limit]
    if shown:
        lines.append(" ".join(shown))
    if len(missed) > limit:
        lines.append(messages["MORE"].format(count=len(missed) - limit))
    return "\n".join(lines)


def format_high_scores(table: HighScoreTable, language: str = "tr") -> str:
    """Numbered high-score list."""
    messages = MESSAGES[language]
    if not table.entries:
        return messages["NO_SCORES"]
    lines = []
    for index, entry in enumerate(table.entries, start=1):
        name = f" {entry.name}" if entry.name else ""
        lines.append(f"{index}. {entry.date}{name}  {entry.score} {messages['POINTS']}")
    return "\n".join(lines)

"""A single typing practice session and its terminal screen."""

from __future__ import annotations

import math
import time
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Sequence

from .lessons import get_random_lesson
from .stats import TypingStats

if TYPE_CHECKING:
    from blessed import Terminal

TARGET_TITLE = " 🚀 ESCRIBE ESTE TEXTO "
INPUT_TITLE = " ✍️ TU ESCRITURA "
RESULTS_TITLE = " 🎉 RESULTADOS "
RESULTS_FOOTER = "Presiona ESC para volver al menú"
_INPUT_VISIBLE_LINES = 3


class CharState(Enum):
    """How a character of the lesson is shown."""

    CORRECT = "correct"
    WRONG = "wrong"
    CURRENT = "current"
    PENDING = "pending"


@dataclass
class PracticeSession:
    """Keeps track of what was typed against a lesson text."""

    lesson: str
    typed: str = ""
    mistakes: int = 0

    def type_char(self, char: str) -> bool:
        """Record a typed character; returns False once the lesson is full."""
        if len(char) != 1:
            raise ValueError("expected a single character")
        position = len(self.typed)
        if position >= len(self.lesson):
            return False
        if self.lesson[position] != char:
            self.mistakes += 1
        self.typed += char
        return True

    def backspace(self) -> None:
        """Remove the last typed character; mistakes already made are kept."""
        self.typed = self.typed[:-1]

    def is_complete(self) -> bool:
        return len(self.typed) == len(self.lesson)

    def next_char(self) -> str | None:
        """The character expected next, or None when the lesson is done."""
        if self.is_complete():
            return None
        return self.lesson[len(self.typed)]

    def char_states(self) -> list[tuple[str, CharState]]:
        """Every lesson character paired with how it should be displayed."""
        states = [
            (expected, CharState.CORRECT if expected == got else CharState.WRONG)
            for expected, got in zip(self.lesson, self.typed)
        ]
        rest = self.lesson[len(self.typed):]
        if rest:
            states.append((rest[0], CharState.CURRENT))
            states.extend((c, CharState.PENDING) for c in rest[1:])
        return states

    def finish(self, seconds: float) -> TypingStats:
        """Statistics for the text typed so far over the given elapsed time."""
        chars = len(self.typed)
        return TypingStats(
            total_chars=chars,
            mistakes=self.mistakes,
            wpm=compute_wpm(chars, seconds),
        )


def compute_wpm(chars: int, seconds: float) -> float:
    """Words per minute, counting five characters as one word."""
    if seconds == 0:
        return math.inf if chars > 0 else math.nan
    return (chars / 5.0) / (seconds / 60.0)


def format_results(stats: TypingStats) -> list[str]:
    """The result lines shown at the end of a session."""
    return [
        f"⌨️  Caracteres: {stats.total_chars}",
        f"❌  Errores: {stats.mistakes}",
        f"🎯  Precisión: {stats.accuracy():.2f}%",
        f"🚀  Velocidad (WPM): {stats.wpm:.2f}",
    ]


def _render(term: Terminal, parts: Sequence[str]) -> None:
    print("".join(parts), end="", flush=True)


def _text_at(term: Terminal, x: int, y: int, text: str, style: str = "") -> str:
    return term.move_xy(x, y) + style + text + term.normal


def _draw_box(
    term: Terminal,
    x: int,
    y: int,
    width: int,
    height: int,
    *,
    border_style: str = "",
    fill_style: str = "",
    title: str = "",
    center_title: bool = False,
) -> str:
    """A bordered box with an optional title in its top edge."""
    if width < 2 or height < 2:
        return ""
    inner = width - 2
    title_text = title if term.length(title) <= inner else ""
    spare = inner - term.length(title_text)
    left = spare // 2 if center_title else 0
    top = "┌" + "─" * left + title_text + "─" * (spare - left) + "┐"
    rows = [_text_at(term, x, y, top, fill_style + border_style)]
    middle = fill_style + border_style + "│" + term.normal + fill_style + " " * inner
    middle += border_style + "│"
    rows.extend(_text_at(term, x, y + row, middle) for row in range(1, height - 1))
    bottom = "└" + "─" * inner + "┘"
    rows.append(_text_at(term, x, y + height - 1, bottom, fill_style + border_style))
    return "".join(rows)


def _wrap(items: Sequence, width: int) -> list:
    width = max(width, 1)
    return [items[start:start + width] for start in range(0, len(items), width)]


def _char_style(term: Terminal, state: CharState) -> str:
    background = term.on_color_rgb(20, 20, 30)
    if state is CharState.CORRECT:
        return background + term.color_rgb(100, 255, 100) + term.bold
    if state is CharState.WRONG:
        return background + term.color_rgb(255, 100, 100)
    if state is CharState.CURRENT:
        return term.on_color_rgb(50, 50, 70) + term.color_rgb(255, 255, 100) + term.underline
    return background + term.color_rgb(200, 200, 200)


def _draw_practice(term: Terminal, session: PracticeSession) -> list[str]:
    x, y = 1, 1
    width = max(term.width - 2, 0)
    height = max(term.height - 2, 0)
    target_h = height * 60 // 100
    input_h = height * 40 // 100
    inner_w = max(width - 2, 1)

    parts = [term.home + term.clear]
    parts.append(
        _draw_box(
            term, x, y, width, target_h,
            border_style=term.color_rgb(70, 210, 255),
            fill_style=term.on_color_rgb(20, 20, 30),
            title=TARGET_TITLE,
            center_title=True,
        )
    )
    for offset, row in enumerate(_wrap(session.char_states(), inner_w)[: max(target_h - 2, 0)]):
        line = "".join(
            _char_style(term, state) + (" " if char == "\n" else char) + term.normal
            for char, state in row
        )
        parts.append(term.move_xy(x + 1, y + 1 + offset) + line)

    input_y = y + target_h
    parts.append(
        _draw_box(
            term, x, input_y, width, input_h,
            border_style=term.color_rgb(100, 255, 150),
            fill_style=term.on_color_rgb(25, 25, 35),
            title=INPUT_TITLE,
            center_title=True,
        )
    )
    rows = [chunk for line in session.typed.split("\n") for chunk in (_wrap(line, inner_w) or [""])]
    skip = max(len(session.typed.splitlines()) - _INPUT_VISIBLE_LINES, 0)
    input_style = term.on_color_rgb(25, 25, 35) + term.bright_white
    for offset, text in enumerate(rows[skip: skip + max(input_h - 2, 0)]):
        parts.append(_text_at(term, x + 1, input_y + 1 + offset, text, input_style))

    upcoming = session.next_char()
    indicator_y = input_y + input_h
    if upcoming is not None and indicator_y < term.height:
        label = term.center(f"Próximo carácter: '{upcoming}'", width)
        parts.append(_text_at(term, x, indicator_y, label, term.color_rgb(150, 150, 255)))
    return parts


def _draw_results(term: Terminal, stats: TypingStats) -> list[str]:
    width, height = term.width, term.height
    box_h = max(height - 4, 0)
    parts = [term.home + term.clear]
    parts.append(
        _draw_box(
            term, 0, 0, width, box_h,
            border_style=term.color_rgb(255, 150, 100),
            fill_style=term.on_color_rgb(20, 20, 30),
            title=RESULTS_TITLE,
            center_title=True,
        )
    )
    metric_style = term.on_color_rgb(20, 20, 30) + term.bright_white + term.bold
    inner_w = max(width - 6, 1)
    for index, line in enumerate(format_results(stats)):
        row = 3 + index * 3
        if row < box_h - 1:
            parts.append(_text_at(term, 3, row, term.center(line, inner_w), metric_style))
    footer_y = box_h
    if footer_y < height:
        parts.append(_text_at(term, 0, footer_y, "─" * width, term.color_rgb(70, 70, 90)))
    if footer_y + 1 < height:
        parts.append(
            _text_at(term, 0, footer_y + 1, term.center(RESULTS_FOOTER, width),
                     term.color_rgb(255, 255, 100))
        )
    return parts


def start_practice(term: Terminal, rng=None) -> TypingStats | None:
    """Run one practice session; returns its stats, or None if abandoned."""
    session = PracticeSession(get_random_lesson(rng))
    started: float | None = None
    while True:
        _render(term, _draw_practice(term, session))
        if started is None:
            started = time.monotonic()
        key = term.inkey(timeout=0.1)
        if key:
            if key.is_sequence:
                if key.code == term.KEY_ESCAPE:
                    return None
                if key.code == term.KEY_BACKSPACE:
                    session.backspace()
            else:
                for char in str(key):
                    session.type_char(char)
        if session.is_complete():
            stats = session.finish(time.monotonic() - started)
            _render(term, _draw_results(term, stats))
            while term.inkey().code != term.KEY_ESCAPE:
                pass
            return stats
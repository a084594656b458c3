"""Main menu of the typing trainer and its command entry point."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, NamedTuple

from .session import _draw_box, _render, _text_at, start_practice

if TYPE_CHECKING:
    from blessed import Terminal

LOGO = (
    "                                              ",
    "████████╗██╗   ██╗██████╗ ██╗███████╗████████╗",
    "╚══██╔══╝╚██╗ ██╔╝██╔══██╗██║██╔════╝╚══██╔══╝",
    "   ██║    ╚████╔╝ ██████╔╝██║███████╗   ██║   ",
    "   ██║     ╚██╔╝  ██╔═══╝ ██║╚════██║   ██║   ",
    "   ██║      ██║   ██║     ██║███████║   ██║   ",
    "   ╚═╝      ╚═╝   ╚═╝     ╚═╝╚══════╝   ╚═╝   ",
    "         C O N S O L E   E D I T I O N        ",
    "                                              ",
)
FOOTER = "↑↓ Seleccionar opción | ENTER Confirmar | ESC Salir"
POPUP_TITLE = " 🚧 En desarrollo"
POPUP_MESSAGE = "Próximamente..."
_LOGO_HEIGHT = 8
_FOOTER_HEIGHT = 3
_ITEM_HEIGHT = 5


@dataclass(frozen=True)
class Rect:
    """A rectangular area of the screen."""

    x: int
    y: int
    width: int
    height: int


class MenuAction(Enum):
    PRACTICE = "practice"
    PROGRESS = "progress"
    QUIT = "quit"


class _Option(NamedTuple):
    key: str
    label: str
    color: tuple[int, int, int]
    action: MenuAction


OPTIONS = (
    _Option("1", "Practicar", (100, 255, 150), MenuAction.PRACTICE),
    _Option("2", "Ver progreso", (255, 150, 100), MenuAction.PROGRESS),
    _Option("3", "Salir", (255, 100, 150), MenuAction.QUIT),
)


@dataclass
class Menu:
    """Menu selection state and key handling."""

    selected: int = 0
    options: tuple[_Option, ...] = OPTIONS

    def move_up(self) -> None:
        self.selected = max(self.selected - 1, 0)

    def move_down(self) -> None:
        self.selected = min(self.selected + 1, len(self.options) - 1)

    def handle_key(self, key: str) -> MenuAction | None:
        """Apply a key name such as "1" or "KEY_UP"; returns the chosen action."""
        for option in self.options:
            if key == option.key:
                return option.action
        if key == "KEY_UP":
            self.move_up()
        elif key == "KEY_DOWN":
            self.move_down()
        elif key == "KEY_ENTER":
            return self.options[self.selected].action
        elif key == "KEY_ESCAPE":
            return MenuAction.QUIT
        return None


def _centered_span(start: int, length: int, percent: int) -> tuple[int, int]:
    if not 0 <= percent <= 100:
        raise ValueError("percent must be between 0 and 100")
    offset = round(length * ((100 - percent) // 2) / 100)
    size = min(round(length * percent / 100), length - offset)
    return start + offset, size


def centered_rect(percent_x: int, percent_y: int, rect: Rect) -> Rect:
    """A rectangle of the given share of ``rect``, centred inside it."""
    x, width = _centered_span(rect.x, rect.width, percent_x)
    y, height = _centered_span(rect.y, rect.height, percent_y)
    return Rect(x, y, width, height)


def _key_name(key) -> str:
    return key.name if key.is_sequence else str(key)


def _draw_menu(term: Terminal, menu: Menu) -> list[str]:
    width, height = term.width, term.height
    parts = [term.home + term.clear]
    logo_style = term.color_rgb(70, 210, 255) + term.bold
    for row, line in enumerate(LOGO[: min(_LOGO_HEIGHT, height)]):
        parts.append(_text_at(term, 0, row, term.center(line, width), logo_style))

    bottom = height - _FOOTER_HEIGHT
    area = max(bottom - _LOGO_HEIGHT, 0)
    items_height = _ITEM_HEIGHT * len(menu.options)
    first = _LOGO_HEIGHT + max(area - items_height, 0) // 2
    for index, option in enumerate(menu.options):
        if index == menu.selected:
            style = term.on_color_rgb(80, 80, 100) + term.bright_white
        else:
            style = term.on_color_rgb(20, 20, 30) + term.color_rgb(*option.color)
        top = first + index * _ITEM_HEIGHT
        for row in range(_ITEM_HEIGHT):
            y = top + row
            if y >= bottom:
                break
            text = f"[{option.key}] {option.label}" if row == _ITEM_HEIGHT // 2 else ""
            parts.append(_text_at(term, 0, y, term.center(text, width), style))

    if bottom >= 0:
        parts.append(_text_at(term, 0, bottom, "─" * width, term.bright_black))
    if 0 <= bottom + 1 < height:
        parts.append(
            _text_at(term, 0, bottom + 1, term.center(FOOTER, width),
                     term.bright_black + term.bold)
        )
    return parts


def show_popup(term: Terminal, title: str, message: str) -> None:
    """Show a centred message box and wait for any key."""
    area = centered_rect(50, 20, Rect(0, 0, term.width, term.height))
    fill = term.on_color_rgb(30, 30, 40)
    parts = [
        _draw_box(term, area.x, area.y, area.width, area.height,
                  fill_style=fill, title=title)
    ]
    if area.width > 2 and area.height > 2:
        text = term.center(message, area.width - 2)
        parts.append(_text_at(term, area.x + 1, area.y + 1, text, fill + term.bright_white))
    _render(term, parts)
    term.inkey()


def run_app(term: Terminal) -> None:
    """Show the main menu until the user quits."""
    menu = Menu()
    while True:
        _render(term, _draw_menu(term, menu))
        action = menu.handle_key(_key_name(term.inkey()))
        if action is MenuAction.PRACTICE:
            start_practice(term)
        elif action is MenuAction.PROGRESS:
            show_popup(term, POPUP_TITLE, POPUP_MESSAGE)
        elif action is MenuAction.QUIT:
            return


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="typistconsole", description="Typing practice in the terminal."
    )
    parser.parse_args(argv)

    from blessed import Terminal

    term = Terminal()
    with term.fullscreen(), term.cbreak(), term.hidden_cursor():
        run_app(term)
    return 0
"""A small immediate-mode widget layer drawn with pygame."""

from __future__ import annotations

import time
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import ClassVar, Union

import pygame

_MOUSE_BUTTONS = {1: 0, 3: 1, 2: 2}
_CTRL_KEYS = frozenset({pygame.K_LCTRL, pygame.K_RCTRL})
_SHIFT_KEYS = frozenset({pygame.K_LSHIFT, pygame.K_RSHIFT})
_ALT_KEYS = frozenset({pygame.K_LALT, pygame.K_RALT})
_SUPER_KEYS = frozenset({pygame.K_LGUI, pygame.K_RGUI})

_TEXT = (255, 255, 255)
_TEXT_DISABLED = (128, 128, 128)
_BUTTON = (41, 74, 122)
_BUTTON_HOVERED = (66, 150, 250)
_MENU_BAR = (36, 36, 36)
_POPUP = (20, 20, 20)
_SEPARATOR = (110, 110, 128)
_SEPARATOR_HEIGHT = 7

_DEFAULT_DELTA = 1.0 / 60.0

Position = tuple[float, float]


@dataclass(frozen=True)
class MenuItem:
    """One entry of a drop-down menu."""

    label: str
    shortcut: str = ""
    enabled: bool = True


MenuEntry = Union[MenuItem, str, None]


class Ui:
    """Input state and widgets for one drawing surface.

    Events are fed through :meth:`process_event`; they become visible to the
    widgets once :meth:`new_frame` starts the next frame.
    """

    active: ClassVar[Ui | None] = None

    def __init__(
        self,
        surface: pygame.Surface,
        font: pygame.font.Font | None = None,
        *,
        font_size: int = 18,
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        if font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            font = pygame.font.Font(None, font_size)
        self.surface = surface
        self.font = font
        self.frame_padding = (4, 3)
        self.item_spacing = (8, 4)
        self.line_height = font.get_height()
        self.frame_height = self.line_height + 2 * self.frame_padding[1]
        self.menu_bar_height = self.frame_height
        self.display_size: tuple[int, int] = surface.get_size()
        self.delta_time = _DEFAULT_DELTA
        self.mouse_pos: tuple[int, int] | None = None
        self.mouse_down = [False, False, False]
        self.mouse_wheel = 0
        self.keys_down: set[int] = set()
        self.input_characters: list[str] = []
        self.item_rects: dict[str, pygame.Rect] = {}

        self._clock = clock
        self._last_time: float | None = None
        self._press: tuple[int, int] | None = None
        self._pending_clicks: list[tuple[tuple[int, int], tuple[int, int]]] = []
        self._clicks: list[tuple[tuple[int, int], tuple[int, int]]] = []
        self._pending_chars: list[str] = []
        self._pending_wheel = 0
        self._open_menu: str | None = None
        self._menu_x: int | None = None

    @property
    def key_ctrl(self) -> bool:
        return bool(self.keys_down & _CTRL_KEYS)

    @property
    def key_shift(self) -> bool:
        return bool(self.keys_down & _SHIFT_KEYS)

    @property
    def key_alt(self) -> bool:
        return bool(self.keys_down & _ALT_KEYS)

    @property
    def key_super(self) -> bool:
        return bool(self.keys_down & _SUPER_KEYS)

    def process_event(self, event: pygame.event.Event) -> bool:
        """Record one pygame event; return whether it was an input event."""
        kind = event.type
        if kind == pygame.MOUSEMOTION:
            self.mouse_pos = tuple(event.pos)
        elif kind == pygame.MOUSEBUTTONDOWN:
            self.mouse_pos = tuple(event.pos)
            index = _MOUSE_BUTTONS.get(event.button)
            if index is not None:
                self.mouse_down[index] = True
            if event.button == 1:
                self._press = tuple(event.pos)
        elif kind == pygame.MOUSEBUTTONUP:
            self.mouse_pos = tuple(event.pos)
            index = _MOUSE_BUTTONS.get(event.button)
            if index is not None:
                self.mouse_down[index] = False
            if event.button == 1 and self._press is not None:
                self._pending_clicks.append((self._press, tuple(event.pos)))
                self._press = None
        elif kind == pygame.MOUSEWHEEL:
            if event.y > 0:
                self._pending_wheel += 1
            elif event.y < 0:
                self._pending_wheel -= 1
        elif kind == pygame.KEYDOWN:
            self.keys_down.add(event.key)
        elif kind == pygame.KEYUP:
            self.keys_down.discard(event.key)
        elif kind == pygame.TEXTINPUT:
            self._pending_chars.extend(event.text)
        else:
            return False
        return True

    def new_frame(self) -> None:
        """Start a frame: publish pending input and make this the active UI."""
        now = self._clock()
        self.delta_time = (
            now - self._last_time if self._last_time is not None else _DEFAULT_DELTA
        )
        self._last_time = now
        self.display_size = self.surface.get_size()

        self._clicks = self._pending_clicks
        self._pending_clicks = []
        self.input_characters = self._pending_chars
        self._pending_chars = []
        self.mouse_wheel = self._pending_wheel
        self._pending_wheel = 0

        self.item_rects = {}
        self._menu_x = None
        Ui.active = self

    def text_size(self, label: str) -> tuple[int, int]:
        """Return the width and height ``label`` takes when drawn."""
        return self.font.size(label)

    def text(self, label: str, pos: Position) -> pygame.Rect:
        """Draw ``label`` with its top-left corner at ``pos``."""
        rect = pygame.Rect((int(pos[0]), int(pos[1])), self.text_size(label))
        self._blit(label, rect.topleft, _TEXT)
        self.item_rects[label] = rect
        return rect

    def button(self, label: str, pos: Position) -> bool:
        """Draw a button; return True when it was clicked in this frame."""
        width, height = self.text_size(label)
        pad_x, pad_y = self.frame_padding
        rect = pygame.Rect(int(pos[0]), int(pos[1]), width + 2 * pad_x, height + 2 * pad_y)
        pygame.draw.rect(self.surface, _BUTTON_HOVERED if self._hovered(rect) else _BUTTON, rect)
        self._blit(label, (rect.x + pad_x, rect.y + pad_y), _TEXT)
        self.item_rects[label] = rect
        return self._take_click(rect)

    def menu(self, label: str, items: Iterable[MenuEntry]) -> str | None:
        """Draw a menu in the main menu bar; return the label of a chosen item.

        ``None`` entries draw separators; plain strings become enabled items.
        """
        entries = [
            entry if entry is None or isinstance(entry, MenuItem) else MenuItem(str(entry))
            for entry in items
        ]
        spacing_x = self.item_spacing[0]
        if self._menu_x is None:
            pygame.draw.rect(
                self.surface, _MENU_BAR, (0, 0, self.display_size[0], self.menu_bar_height)
            )
            self._menu_x = spacing_x

        width, _ = self.text_size(label)
        header = pygame.Rect(self._menu_x, 0, width + 2 * spacing_x, self.menu_bar_height)
        self._menu_x += header.width

        if self._take_click(header):
            self._open_menu = None if self._open_menu == label else label
        is_open = self._open_menu == label
        if is_open or self._hovered(header):
            pygame.draw.rect(self.surface, _BUTTON_HOVERED, header)
        self._blit(label, (header.x + spacing_x, header.y + self.frame_padding[1]), _TEXT)
        self.item_rects[label] = header

        if not is_open:
            return None
        return self._dropdown(header, entries)

    def _dropdown(self, header: pygame.Rect, entries: list[MenuItem | None]) -> str | None:
        pad_x, pad_y = self.frame_padding
        gap = 2 * self.item_spacing[0]
        items = [entry for entry in entries if entry is not None]
        label_width = max((self.text_size(item.label)[0] for item in items), default=0)
        shortcut_width = max(
            (self.text_size(item.shortcut)[0] for item in items if item.shortcut), default=0
        )
        width = label_width + 2 * pad_x + (gap + shortcut_width if shortcut_width else 0)
        height = sum(self.frame_height if entry else _SEPARATOR_HEIGHT for entry in entries)
        popup = pygame.Rect(header.x, header.bottom, width, height)
        pygame.draw.rect(self.surface, _POPUP, popup)

        selected: str | None = None
        y = popup.y
        for entry in entries:
            if entry is None:
                line_y = y + _SEPARATOR_HEIGHT // 2
                pygame.draw.line(
                    self.surface, _SEPARATOR, (popup.x + pad_x, line_y), (popup.right - pad_x, line_y)
                )
                y += _SEPARATOR_HEIGHT
                continue
            rect = pygame.Rect(popup.x, y, width, self.frame_height)
            y += self.frame_height
            if entry.enabled and self._hovered(rect):
                pygame.draw.rect(self.surface, _BUTTON_HOVERED, rect)
            colour = _TEXT if entry.enabled else _TEXT_DISABLED
            self._blit(entry.label, (rect.x + pad_x, rect.y + pad_y), colour)
            if entry.shortcut:
                shortcut_x = rect.right - pad_x - self.text_size(entry.shortcut)[0]
                self._blit(entry.shortcut, (shortcut_x, rect.y + pad_y), colour)
            self.item_rects[entry.label] = rect
            clicked = self._take_click(rect)
            if clicked and entry.enabled and selected is None:
                selected = entry.label

        if selected is not None:
            self._open_menu = None
        return selected

    def _hovered(self, rect: pygame.Rect) -> bool:
        return self.mouse_pos is not None and bool(rect.collidepoint(self.mouse_pos))

    def _take_click(self, rect: pygame.Rect) -> bool:
        for click in self._clicks:
            press, release = click
            if rect.collidepoint(press) and rect.collidepoint(release):
                self._clicks.remove(click)
                return True
        return False

    def _blit(self, label: str, pos: tuple[int, int], colour: tuple[int, int, int]) -> None:
        if label:
            self.surface.blit(self.font.render(label, True, colour), pos)
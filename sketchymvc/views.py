"""The counter view and the layout that frames the current view."""

from __future__ import annotations

from .increment import IncrementController
from .registry import View, register_view
from .ui import MenuItem, Ui

_WINDOW_PADDING = 8

_FILE_MENU = (
    MenuItem("Open", "Ctrl+O"),
    MenuItem("Save", "Ctrl+S"),
    None,
    MenuItem("Exit"),
)
_EDIT_MENU = (
    MenuItem("Undo", "Ctrl+Z"),
    MenuItem("Redo", "Ctrl+Y", enabled=False),
)


def _active_ui() -> Ui:
    if Ui.active is None:
        raise RuntimeError("No UI frame has been started")
    return Ui.active


@register_view
class IncrementView(View):
    """Shows the counter with buttons to raise and lower it."""

    _controller: IncrementController | None = None
    count: int | None = None

    def init(self) -> None:
        self._controller = self.manager.get_controller(IncrementController)

    def _require_controller(self) -> IncrementController:
        if self._controller is None:
            raise RuntimeError("IncrementView used before init")
        return self._controller

    def render(self, el: int) -> None:
        controller = self._require_controller()
        ui = _active_ui()

        screen_width, screen_height = ui.display_size
        top = ui.menu_bar_height
        pad = _WINDOW_PADDING
        window_width = screen_width - 2 * pad
        window_height = screen_height - top - 2 * pad

        increment_width = ui.text_size("Increment")[0]
        text_width = ui.text_size("Count: XX")[0]
        spacing = ui.item_spacing[1]
        content_height = (
            ui.line_height + spacing + ui.frame_height + spacing + ui.frame_height
        )

        y = top + pad + (window_height - content_height) / 2
        ui.text(f"Count: {controller.value}", (pad + (window_width - text_width) / 2, y))

        x = pad + (window_width - increment_width) / 2
        y += ui.line_height + spacing
        if ui.button("Increment", (x, y)):
            controller.increment()

        y += ui.frame_height + spacing
        if ui.button("Decrement", (x, y)):
            controller.decrement()

    def update(self) -> None:
        """Record the counter value seen at this frame."""
        self.count = self._require_controller().value


@register_view
class LayoutView(View):
    """Draws the main menu bar and then the manager's current view."""

    last_selection: str | None = None
    ticks: int = 0

    def init(self) -> None:
        """The layout has no dependencies to resolve."""

    def render(self, el: int) -> None:
        ui = _active_ui()
        for label, items in (("File", _FILE_MENU), ("Edit", _EDIT_MENU)):
            chosen = ui.menu(label, items)
            if chosen is not None:
                self.last_selection = chosen
        self.render_current(el)

    def update(self) -> None:
        """Count the frames the layout has been updated for."""
        self.ticks += 1

    def render_current(self, el: int) -> None:
        """Render the manager's current view."""
        self.manager.current_view.render(el)
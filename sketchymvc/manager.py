"""The application manager that owns every model, controller and view."""

from __future__ import annotations

from typing import Any, TypeVar

from .registry import CONTROLLERS, MODELS, VIEWS, Controller, Model, Registry, View

T = TypeVar("T")


def _type_name(key: type | str) -> str:
    return key if isinstance(key, str) else key.__name__


def _lookup(store: dict[str, Any], kind: str, key: type | str) -> Any:
    name = _type_name(key)
    try:
        return store[name]
    except KeyError:
        raise LookupError(f"{kind} not found: {name}") from None


class AppManager:
    """Builds every registered model, controller and view and routes frames."""

    def __init__(
        self,
        default_view: type | str,
        layout_view: type | str = "LayoutView",
        *,
        models: Registry | None = None,
        controllers: Registry | None = None,
        views: Registry | None = None,
    ) -> None:
        model_registry = MODELS if models is None else models
        controller_registry = CONTROLLERS if controllers is None else controllers
        view_registry = VIEWS if views is None else views

        self._tick = 0
        self._current: View | None = None
        self._models: dict[str, Model] = {
            name: factory() for name, factory in model_registry.factories().items()
        }

        self._controllers: dict[str, Controller] = {}
        for name, factory in controller_registry.factories().items():
            controller = factory(self)
            controller.init()
            self._controllers[name] = controller

        self._views: dict[str, View] = {}
        for name, factory in view_registry.factories().items():
            view = factory(self)
            view.init()
            self._views[name] = view

        self._layout: View = self.get_view(layout_view)
        self._current = self.get_view(default_view)

    def get_model(self, cls: type[T] | str) -> T:
        """Return the model registered under the name of ``cls``."""
        return _lookup(self._models, "Model", cls)

    def get_controller(self, cls: type[T] | str) -> T:
        """Return the controller registered under the name of ``cls``."""
        return _lookup(self._controllers, "Controller", cls)

    def get_view(self, cls: type[T] | str) -> T:
        """Return the view registered under the name of ``cls``."""
        return _lookup(self._views, "View", cls)

    def render(self) -> None:
        """Render the layout with the current frame tick, then advance the tick."""
        tick = self._tick
        self._tick += 1
        self._layout.render(tick)

    def update(self) -> None:
        """Update the current view."""
        self.current_view.update()

    @property
    def current_view(self) -> View:
        """The view shown inside the layout."""
        if self._current is None:
            raise RuntimeError("Current view not set")
        return self._current
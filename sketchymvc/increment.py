"""A counter model and the controller that drives it."""

from __future__ import annotations

from .registry import Controller, Model, register_controller, register_model


@register_model
class IncrementModel(Model):
    """An integer counter starting at zero."""

    def __init__(self) -> None:
        self._count = 0

    def increment(self) -> int:
        """Add one and return the value held before the change."""
        previous = self._count
        self._count += 1
        return previous

    def decrement(self) -> int:
        """Subtract one and return the value held before the change."""
        previous = self._count
        self._count -= 1
        return previous

    @property
    def count(self) -> int:
        """The current value."""
        return self._count


@register_controller
class IncrementController(Controller):
    """Exposes the shared counter model to views."""

    _model: IncrementModel | None = None

    def init(self) -> None:
        self._model = self.manager.get_model(IncrementModel)

    def _counter(self) -> IncrementModel:
        if self._model is None:
            raise RuntimeError("IncrementController used before init")
        return self._model

    def increment(self) -> None:
        """Raise the counter by one."""
        self._counter().increment()

    def decrement(self) -> None:
        """Lower the counter by one."""
        self._counter().decrement()

    @property
    def value(self) -> int:
        """The counter's current value."""
        return self._counter().count
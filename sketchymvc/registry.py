"""Base classes and name-keyed registries for models, controllers and views."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, TypeVar

if TYPE_CHECKING:
    from .manager import AppManager

T = TypeVar("T", bound=type)


class Model:
    """Base class for application models."""


class Controller(ABC):
    """Base class for controllers; each one is bound to an application manager."""

    def __init__(self, manager: AppManager) -> None:
        self.manager = manager

    @abstractmethod
    def init(self) -> None:
        """Resolve dependencies once every model exists."""


class View(ABC):
    """Base class for views; each one is bound to an application manager."""

    def __init__(self, manager: AppManager) -> None:
        self.manager = manager

    @abstractmethod
    def render(self, el: int) -> None:
        """Draw the view for the given frame tick."""

    @abstractmethod
    def update(self) -> None:
        """Advance the view's state by one frame."""

    @abstractmethod
    def init(self) -> None:
        """Resolve dependencies once every controller exists."""


class Registry:
    """A mapping of type names to factories that build instances."""

    def __init__(self) -> None:
        self._factories: dict[str, Callable[..., Any]] = {}

    def register(self, name: str, factory: Callable[..., Any]) -> None:
        """Register ``factory`` under ``name``, replacing any earlier one."""
        self._factories[name] = factory

    def create(self, name: str, *args: Any) -> Any:
        """Build an instance with the factory named ``name``, or return None."""
        factory = self._factories.get(name)
        if factory is None:
            return None
        return factory(*args)

    def factories(self) -> Mapping[str, Callable[..., Any]]:
        """Return a read-only view of the registered factories."""
        return MappingProxyType(self._factories)

    def __contains__(self, name: object) -> bool:
        return name in self._factories

    def __len__(self) -> int:
        return len(self._factories)


MODELS = Registry()
CONTROLLERS = Registry()
VIEWS = Registry()


def register_model(cls: T) -> T:
    """Class decorator that registers a model class under its own name."""
    MODELS.register(cls.__name__, cls)
    return cls


def register_controller(cls: T) -> T:
    """Class decorator that registers a controller class under its own name."""
    CONTROLLERS.register(cls.__name__, cls)
    return cls


def register_view(cls: T) -> T:
    """Class decorator that registers a view class under its own name."""
    VIEWS.register(cls.__name__, cls)
    return cls
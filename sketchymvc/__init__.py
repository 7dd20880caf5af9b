"""A small model-view-controller framework with name-keyed registries and a pygame demo."""

__version__ = "1.0.0"
__all__ = ["__version__"]
# sketchymvc

A small model-view-controller framework. You register models, controllers
and views by class name. An `AppManager` then builds one instance of each
registered class and passes every frame to a layout view. The layout view
draws a menu bar and then the current view.

The package ships a demo that runs in a pygame window. It shows a counter
that you raise and lower with two buttons.

## Install

```
pip install .
```

To run the tests, install the test extra and run pytest:

```
pip install .[test]
pytest
```

## Run the demo

```
sketchymvc
```

This opens a resizable 800×450 window titled "Sketchy MVC". The window has
a File/Edit menu bar and, in the middle, a "Count: N" label above two
buttons, "Increment" and "Decrement".

Close the window or press Escape to quit. With `--frames N`, the demo also
stops on its own after N frames; N must be a positive number:

```
sketchymvc --frames 120
```

## Writing your own parts

### Registering classes

`sketchymvc.registry` provides three base classes: `Model`, `Controller`
and `View`. It also provides three global `Registry` objects: `MODELS`,
`CONTROLLERS` and `VIEWS`.

- To register a class under its own name, decorate it with
  `register_model`, `register_controller` or `register_view`.
- `Registry.register(name, factory)` adds a factory. It replaces any earlier
  factory with the same name.
- `Registry.create(name, *args)` builds an instance, or returns `None` when
  the name is unknown.
- `Registry.factories()` returns a read-only mapping of the factories.

### The manager

`sketchymvc.manager.AppManager(default_view, layout_view="LayoutView")`
builds its parts in this order:

1. Every model.
2. Every controller. The manager passes itself to each controller and then
   calls the controller's `init()`.
3. Every view. The manager passes itself to each view and then calls the
   view's `init()`.

By default the manager uses the global registries. You can pass other
`Registry` objects with the keyword arguments `models=`, `controllers=` and
`views=`.

`get_model`, `get_controller` and `get_view` take a class or a name. They
raise `LookupError` with a message such as `Model not found: Name` when
nothing is registered under that name.

Per frame:

- `update()` updates the current view.
- `render()` renders the layout view with a tick that starts at 0 and goes
  up by one on each call.

The `current_view` property holds the view that the layout shows.

### The bundled example

`sketchymvc.increment` holds the counter:

- `IncrementModel` is a counter that starts at 0. Its `increment()` and
  `decrement()` return the value from before the change. Its `count`
  property holds the current value.
- `IncrementController` gets the model in `init()`. It offers
  `increment()`, `decrement()` and a `value` property.

`sketchymvc.views` holds the views:

- `IncrementView` draws the counter and its buttons.
- `LayoutView` draws the "File" and "Edit" menus, then calls
  `render_current(el)` to draw the current view. It stores the label of the
  last menu item chosen in `last_selection`.

### Widgets

`sketchymvc.ui.Ui` is a small immediate-mode widget layer on a pygame
surface. Its input methods:

- `process_event(event)` records a pygame event.
- `new_frame()` makes the recorded input visible to the widgets and sets
  `Ui.active`.

Its widgets:

- `text_size(label)` returns the size a label takes when drawn.
- `text(label, pos)` draws a label.
- `button(label, pos)` draws a button and returns `True` when it was clicked
  this frame.
- `menu(label, items)` draws a menu in the menu bar. The items are
  `MenuItem`s, plain strings, or `None` for separators. It returns the label
  of the chosen item, or `None` when no item was chosen.

The views draw through `Ui.active`. Rendering them before any
`new_frame()` call raises `RuntimeError`.

## What it does not do

The demo's menu items do not do anything. Choosing "Open", "Save" or
"Undo" only records the item's label in `LayoutView.last_selection`.
Nothing is loaded or saved. "Exit" does not close the window, and "Redo"
is always disabled. The counter lives only in memory and resets when the
program starts.
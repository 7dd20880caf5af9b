import pytest

from sketchymvc.manager import AppManager
from sketchymvc.registry import Controller, Model, Registry, View


class Store(Model):
    def __init__(self):
        self.items = []


class StoreController(Controller):
    def init(self):
        self.store = self.manager.get_model(Store)

    def add(self, item):
        self.store.items.append(item)


class Home(View):
    def init(self):
        self.controller = self.manager.get_controller(StoreController)
        self.rendered = []
        self.updates = 0

    def render(self, el):
        self.rendered.append(el)

    def update(self):
        self.updates += 1


class Other(View):
    def init(self):
        self.updates = 0

    def render(self, el):
        pass

    def update(self):
        self.updates += 1


class LayoutView(View):
    def init(self):
        self.ticks = []

    def render(self, el):
        self.ticks.append(el)
        self.manager.current_view.render(el)

    def update(self):
        pass


def make_registries():
    models = Registry()
    models.register("Store", Store)
    controllers = Registry()
    controllers.register("StoreController", StoreController)
    views = Registry()
    for cls in (Home, Other, LayoutView):
        views.register(cls.__name__, cls)
    return models, controllers, views


@pytest.fixture
def app():
    models, controllers, views = make_registries()
    return AppManager(Home, models=models, controllers=controllers, views=views)


def test_current_view_is_default(app):
    assert app.current_view is app.get_view(Home)


def test_lookup_by_class_and_name_agree(app):
    assert app.get_model(Store) is app.get_model("Store")
    assert app.get_controller("StoreController") is app.get_controller(StoreController)


def test_controller_sees_shared_model(app):
    app.get_controller(StoreController).add("x")
    assert app.get_model(Store).items == ["x"]


def test_view_init_resolves_controller(app):
    assert app.get_view(Home).controller is app.get_controller(StoreController)


def test_render_passes_increasing_ticks(app):
    for _ in range(3):
        app.render()
    layout = app.get_view(LayoutView)
    assert layout.ticks == [0, 1, 2]
    assert app.get_view(Home).rendered == layout.ticks


def test_update_only_touches_current_view(app):
    app.update()
    app.update()
    assert app.get_view(Home).updates == 2
    assert app.get_view(Other).updates == 0


def test_missing_model_raises_lookup_error(app):
    with pytest.raises(LookupError, match="Model not found: Missing"):
        app.get_model("Missing")


def test_missing_controller_and_view_raise(app):
    with pytest.raises(LookupError, match="Controller not found: Home"):
        app.get_controller(Home)
    with pytest.raises(LookupError, match="View not found: Store"):
        app.get_view(Store)


def test_unknown_default_view_fails_construction():
    models, controllers, views = make_registries()
    with pytest.raises(LookupError, match="View not found: Nowhere"):
        AppManager("Nowhere", models=models, controllers=controllers, views=views)


def test_missing_layout_fails_construction():
    models, controllers, _ = make_registries()
    views = Registry()
    views.register("Home", Home)
    with pytest.raises(LookupError, match="View not found: LayoutView"):
        AppManager(Home, models=models, controllers=controllers, views=views)


def test_custom_layout_view_by_class():
    models, controllers, views = make_registries()
    app = AppManager(Other, Home, models=models, controllers=controllers, views=views)
    app.render()
    assert app.get_view(Home).rendered == [0]
    assert app.current_view is app.get_view(Other)
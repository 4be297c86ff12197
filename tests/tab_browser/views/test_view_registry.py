import pytest

from tab_browser.core.base_view import BaseView
from tab_browser.core.dataset import DatasetStore
from tab_browser.core.view_registry import ViewRegistry
from tab_browser.views import HistogramView, ScatterView


def test_register_and_create():
    registry = ViewRegistry()
    registry.register(ScatterView)
    registry.register(HistogramView)
    store = DatasetStore()

    view = registry.create("scatter", store)

    assert isinstance(view, ScatterView)
    assert view.store is store
    assert registry.ids() == ["scatter", "histogram"]
    assert registry.all_classes() == [ScatterView, HistogramView]


def test_duplicate_id_rejected():
    registry = ViewRegistry()
    registry.register(ScatterView)

    with pytest.raises(ValueError):
        registry.register(ScatterView)


def test_non_view_rejected():
    registry = ViewRegistry()

    class NotAView:
        id = "nope"

    with pytest.raises(TypeError):
        registry.register(NotAView)


def test_unknown_view_id():
    registry = ViewRegistry()

    with pytest.raises(KeyError):
        registry.create("pie", DatasetStore())


def test_all_registered_classes_are_views():
    registry = ViewRegistry()
    registry.register(ScatterView)

    assert all(issubclass(cls, BaseView) for cls in registry.all_classes())

from cardstack.widgets.card_list_scroll_service import CardListScrollService
from cardstack.widgets.stack_layout import Frame, StackLayout


class FakeScrollBar:
    def __init__(self, value=0, maximum=10000):
        self._value = value
        self._maximum = maximum
        self.set_calls = []

    def value(self):
        return self._value

    def minimum(self):
        return 0

    def maximum(self):
        return self._maximum

    def setValue(self, value):
        self.set_calls.append(value)
        self._value = value


class FakeViewport:
    def __init__(self, width=320, height=200):
        self._width = width
        self._height = height

    def width(self):
        return self._width

    def height(self):
        return self._height


class FakeView:
    def __init__(self, scroll_value=0, viewport_height=200, maximum=10000):
        self._scrollbar = FakeScrollBar(scroll_value, maximum)
        self._viewport = FakeViewport(height=viewport_height)
        self.stack_layout = StackLayout()
        self.stack_layout.prepare(3, 320.0, None, 1)
        self.log_messages = []

    def verticalScrollBar(self):
        return self._scrollbar

    def viewport(self):
        return self._viewport

    def _log_flow(self, component, message, **kwargs):
        self.log_messages.append((component, message, kwargs))


def test_visible_rect_uses_scroll_value():
    view = FakeView(scroll_value=40)
    service = CardListScrollService(view)

    assert service.visible_rect() == Frame(0, 40, 320, 200)
    assert service.visible_rect(10) == Frame(0, 10, 320, 200)


def test_apply_selection_scroll_brings_expanded_card_bottom_into_view():
    view = FakeView(scroll_value=0)
    service = CardListScrollService(view)

    assert service.apply_selection_scroll() == 200
    assert view.verticalScrollBar().value() == 200
    assert view.log_messages[0][0] == "SCROLL"


def test_apply_selection_scroll_brings_card_top_into_view():
    view = FakeView(scroll_value=150, viewport_height=400)
    service = CardListScrollService(view)

    assert service.apply_selection_scroll() == 100


def test_apply_selection_scroll_leaves_visible_card_alone():
    view = FakeView(scroll_value=50, viewport_height=400)
    service = CardListScrollService(view)

    assert service.apply_selection_scroll() is None
    assert view.verticalScrollBar().set_calls == []


def test_apply_selection_scroll_without_selection():
    view = FakeView(scroll_value=30)
    view.stack_layout.selected_index = None
    service = CardListScrollService(view)

    assert service.apply_selection_scroll() is None


def test_target_scroll_value_is_clamped_to_scroll_range():
    view = FakeView(scroll_value=0, maximum=120)
    service = CardListScrollService(view)

    assert service.target_scroll_value() == 120

from PySide6.QtCore import Qt
from PySide6.QtGui import QColor

from cardstack.models.card_list_model import Card, CardListModel
from cardstack.widgets.stack_layout import Size, StackLayout


def test_card_height_depends_on_expanded_state():
    card = Card(title="Item 0")

    assert card.height_for(250) == 62.5
    card.expanded = True
    assert card.height_for(250) == 250


def test_card_overview_percentage_is_configurable():
    card = Card(title="Item 0", overview_percentage=0.5)

    assert card.height_for(100) == 50
    assert card.compressed_title == "Compressed Item 0"


def test_populate_creates_titled_collapsed_cards():
    model = CardListModel(content_height=250)

    model.populate(3)

    assert model.rowCount() == 3
    assert [card.title for card in model.cards] == ["Item 0", "Item 1", "Item 2"]
    assert not any(card.expanded for card in model.cards)
    assert len(model.colors) == 3


def test_data_roles():
    model = CardListModel(content_height=250)
    model.populate(2)
    index = model.index(1, 0)

    assert model.data(index, Qt.ItemDataRole.DisplayRole) == "Item 1"
    assert model.data(index, Qt.ItemDataRole.ToolTipRole) == "Compressed Item 1"
    assert model.data(index, Qt.ItemDataRole.UserRole) is model.cards[1]
    assert isinstance(model.data(index, Qt.ItemDataRole.BackgroundRole), QColor)
    assert model.data(model.index(5, 0), Qt.ItemDataRole.DisplayRole) is None


def test_toggle_expanded_emits_data_changed():
    model = CardListModel(content_height=250)
    model.populate(2)
    changed_rows = []
    model.dataChanged.connect(lambda top_left, bottom_right, *_: changed_rows.append(top_left.row()))

    assert model.toggle_expanded(1) is True
    assert model.cards[1].expanded is True
    assert changed_rows == [1]

    assert model.toggle_expanded(1) is True
    assert model.cards[1].expanded is False


def test_toggle_expanded_ignores_unknown_rows():
    model = CardListModel(content_height=250)
    model.populate(1)

    assert model.toggle_expanded(3) is False
    assert model.toggle_expanded(-1) is False


def test_size_for_row_feeds_stack_layout():
    model = CardListModel(content_height=200)
    model.populate(3)
    model.toggle_expanded(1)
    layout = StackLayout()

    layout.prepare(model.rowCount(), 320.0, lambda row: model.size_for_row(row, 320.0))

    assert [frame.height for frame in layout.frames()] == [50, 200, 50]
    assert layout.content_size() == Size(320, 300)
    assert model.size_for_row(3, 320.0) is None


def test_insert_and_remove_cards():
    model = CardListModel(content_height=250)
    model.populate(2)
    removed = []
    model.rowsRemoved.connect(lambda parent, first, last: removed.append((first, last)))

    assert model.insert_card(1, "Inserted") is True
    assert [card.title for card in model.cards] == ["Item 0", "Inserted", "Item 1"]
    assert len(model.colors) == 3

    assert model.remove_card(0) is True
    assert removed == [(0, 0)]
    assert [card.title for card in model.cards] == ["Inserted", "Item 1"]
    assert len(model.colors) == 2


def test_insert_and_remove_reject_unknown_rows():
    model = CardListModel(content_height=250)
    model.populate(1)

    assert model.insert_card(3, "Far") is False
    assert model.remove_card(1) is False
    assert model.rowCount() == 1

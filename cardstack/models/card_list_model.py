from dataclasses import dataclass, field

from PySide6.QtCore import QAbstractListModel, QModelIndex, Qt
from PySide6.QtGui import QColor

try:
    from utils.colors import random_color
    from utils.settings import get_int_setting
    from widgets.stack_layout import Size
except ModuleNotFoundError:
    from cardstack.utils.colors import random_color
    from cardstack.utils.settings import get_int_setting
    from cardstack.widgets.stack_layout import Size


@dataclass
class Card:
    title: str
    texts: list[str] = field(default_factory=list)
    expanded: bool = False
    # Share of the full height that stays visible while collapsed.
    overview_percentage: float = 0.25

    @property
    def compressed_title(self) -> str:
        return f'Compressed {self.title}'

    def height_for(self, content_height: float) -> float:
        if self.expanded:
            return content_height
        return content_height * self.overview_percentage


class CardListModel(QAbstractListModel):
    def __init__(self, content_height: float | None = None):
        super().__init__()
        self.cards: list[Card] = []
        self.colors: list[QColor] = []
        if content_height is None:
            content_height = get_int_setting('card_content_height')
        self.content_height = content_height

    def rowCount(self, parent=None) -> int:
        return len(self.cards)

    def data(self, index: QModelIndex, role=None):
        if not index.isValid() or not 0 <= index.row() < len(self.cards):
            return None
        card = self.cards[index.row()]
        if role == Qt.ItemDataRole.DisplayRole:
            return card.title
        if role == Qt.ItemDataRole.ToolTipRole:
            return card.compressed_title
        if role == Qt.ItemDataRole.BackgroundRole:
            return self.colors[index.row()]
        if role == Qt.ItemDataRole.UserRole:
            return card
        return None

    def populate(self, count: int):
        """Replace all cards with `count` collapsed cards titled "Item 0" onwards."""
        self.beginResetModel()
        self.cards = [Card(title=f'Item {number}') for number in range(count)]
        self.colors = [random_color() for _ in range(count)]
        self.endResetModel()

    def insert_card(self, row: int, title: str) -> bool:
        if not 0 <= row <= len(self.cards):
            return False
        self.beginInsertRows(QModelIndex(), row, row)
        self.cards.insert(row, Card(title=title))
        self.colors.insert(row, random_color())
        self.endInsertRows()
        return True

    def remove_card(self, row: int) -> bool:
        if not 0 <= row < len(self.cards):
            return False
        self.beginRemoveRows(QModelIndex(), row, row)
        del self.cards[row]
        del self.colors[row]
        self.endRemoveRows()
        return True

    def toggle_expanded(self, row: int) -> bool:
        """Flip the expanded state of a card. Returns False for unknown rows."""
        if not 0 <= row < len(self.cards):
            return False
        card = self.cards[row]
        card.expanded = not card.expanded
        model_index = self.index(row)
        self.dataChanged.emit(model_index, model_index)
        return True

    def size_for_row(self, row: int, width: float) -> Size | None:
        """Card size at the given width, or None to fall back to the layout default."""
        if not 0 <= row < len(self.cards):
            return None
        return Size(width, self.cards[row].height_for(self.content_height))

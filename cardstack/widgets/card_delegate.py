from PySide6.QtCore import QPointF, QRectF, QSize, Qt
from PySide6.QtGui import QColor, QPainter
from PySide6.QtWidgets import QStyledItemDelegate


class CardDelegate(QStyledItemDelegate):
    """Paints one card into the rect the stack layout assigned to it."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.dot_size = 50

    def dot_center(self, rect: QRectF, expanded: bool) -> QPointF:
        if not expanded:
            return QPointF(rect.x() + self.dot_size, rect.y() + self.dot_size)
        return QPointF(rect.center().x(), rect.y() + self.dot_size)

    def sizeHint(self, option, index):
        view = self.parent()
        layout = getattr(view, 'stack_layout', None)
        if layout is not None:
            frame = layout.frame_for_item(index.row())
            if frame is not None:
                return QSize(int(frame.width), int(frame.height))
        return super().sizeHint(option, index)

    def paint(self, painter, option, index):
        if not painter or not painter.isActive() or not index.isValid():
            return
        card = index.data(Qt.ItemDataRole.UserRole)
        if card is None:
            return

        rect = QRectF(option.rect)
        painter.save()
        try:
            painter.setRenderHint(QPainter.RenderHint.Antialiasing)
            painter.setClipRect(rect)

            color = index.data(Qt.ItemDataRole.BackgroundRole)
            painter.fillRect(rect, color if isinstance(color, QColor) else option.palette.base())

            painter.setPen(option.palette.text().color())
            if card.expanded:
                painter.drawText(rect, Qt.AlignmentFlag.AlignCenter, card.title)
            else:
                painter.drawText(rect, Qt.AlignmentFlag.AlignCenter, card.compressed_title)

            radius = self.dot_size / 2
            painter.setPen(Qt.PenStyle.NoPen)
            painter.setBrush(QColor(Qt.GlobalColor.white))
            painter.drawEllipse(self.dot_center(rect, card.expanded), radius, radius)
        finally:
            painter.restore()

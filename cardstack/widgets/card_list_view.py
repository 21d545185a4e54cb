import math

from PySide6.QtCore import QEasingCurve, QModelIndex, QRect, QSize, Qt, QTimer, QVariantAnimation
from PySide6.QtGui import QPainter
from PySide6.QtWidgets import QAbstractItemView, QListView, QStyleOptionViewItem

try:
    from models.card_list_model import CardListModel
    from utils.flow_log import log_flow
    from utils.settings import get_int_setting
    from widgets.card_delegate import CardDelegate
    from widgets.card_list_scroll_service import CardListScrollService
    from widgets.card_selection_service import CardSelectionService
    from widgets.card_transition_service import CardTransitionService
    from widgets.stack_layout import Size, StackLayout
except ModuleNotFoundError:
    from cardstack.models.card_list_model import CardListModel
    from cardstack.utils.flow_log import log_flow
    from cardstack.utils.settings import get_int_setting
    from cardstack.widgets.card_delegate import CardDelegate
    from cardstack.widgets.card_list_scroll_service import CardListScrollService
    from cardstack.widgets.card_selection_service import CardSelectionService
    from cardstack.widgets.card_transition_service import CardTransitionService
    from cardstack.widgets.stack_layout import Size, StackLayout


class CardListView(QListView):
    """List view that places its cards with a StackLayout instead of QListView's own layout."""

    def __init__(self, parent, card_list_model: CardListModel):
        super().__init__(parent)
        self.setModel(card_list_model)
        self.stack_layout = StackLayout(
            collapsed_height=get_int_setting('collapsed_height'),
            expanded_height=get_int_setting('expanded_height'))
        self.scroll_service = CardListScrollService(self)
        self.selection_service = CardSelectionService(self)
        self.transition_service = CardTransitionService(self.stack_layout)
        self.delegate = CardDelegate(self)
        self.setItemDelegate(self.delegate)

        self.setSelectionMode(QAbstractItemView.SelectionMode.NoSelection)
        self.setVerticalScrollMode(QAbstractItemView.ScrollMode.ScrollPerPixel)
        self.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setUniformItemSizes(False)

        self._last_viewport_size = Size(0.0, 0.0)

        # Debounce resize-triggered recalcs while the window is being dragged.
        self._resize_timer = QTimer(self)
        self._resize_timer.setSingleShot(True)
        self._resize_timer.timeout.connect(self._on_resize_finished)

        self._transition = QVariantAnimation(self)
        self._transition.setStartValue(0.0)
        self._transition.setEndValue(1.0)
        self._transition.setEasingCurve(QEasingCurve(QEasingCurve.Type.Linear))
        self._transition.valueChanged.connect(self._on_transition_step)
        self._transition.finished.connect(self._on_transition_finished)

        card_list_model.modelReset.connect(self._on_model_reset)
        card_list_model.rowsInserted.connect(self._on_rows_inserted)
        card_list_model.rowsRemoved.connect(self._on_rows_removed)
        self.clicked.connect(self._on_card_clicked)

    def _log_flow(self, component: str, message: str, **kwargs):
        log_flow(component, message, **kwargs)

    def relayout(self, reason: str, animate: bool = False):
        """Run a stack layout pass for the current model and viewport width."""
        model = self.model()
        item_count = model.rowCount() if model is not None else 0
        width = float(self.viewport().width())
        size_provider = None
        if model is not None and hasattr(model, 'size_for_row'):
            size_provider = lambda row: model.size_for_row(row, width)
        self.stack_layout.prepare(item_count, width, size_provider)
        self._last_viewport_size = Size.from_qsize(self.viewport().size())
        self._log_flow("LAYOUT", f"Relayout ({reason}): items={item_count}, "
                                 f"height={self.stack_layout.content_size().height}")

        self._transition.stop()
        duration = get_int_setting('transition_duration_ms')
        if animate and duration > 0:
            self.transition_service.start()
            self._transition.setDuration(duration)
            self._transition.start()
        else:
            self.transition_service.finish()
        self.updateGeometries()
        self.viewport().update()

    def _on_model_reset(self):
        self.selection_service.clear()
        self.relayout("modelReset")

    def _on_rows_inserted(self, parent, first, last):
        self.selection_service.rows_inserted(first, last)
        self.relayout("rowsInserted", animate=True)

    def _on_rows_removed(self, parent, first, last):
        self.selection_service.rows_removed(first, last)
        self.relayout("rowsRemoved", animate=True)

    def _on_card_clicked(self, index: QModelIndex):
        if index.isValid():
            self.selection_service.toggle(index.row())

    def _on_transition_step(self, value):
        self.transition_service.set_progress(value)
        self.viewport().update()

    def _on_transition_finished(self):
        self.transition_service.finish()
        self.updateGeometries()
        self.viewport().update()

    def _frame_rect(self, frame) -> QRect:
        """Frame in viewport coordinates."""
        scroll_offset = self.verticalScrollBar().value()
        return frame.to_qrectf().translated(0, -scroll_offset).toAlignedRect()

    def resizeEvent(self, event):
        super().resizeEvent(event)
        new_size = Size.from_qsize(self.viewport().size())
        if self.stack_layout.should_recompute(self._last_viewport_size, new_size):
            self._resize_timer.stop()
            self._resize_timer.start(50)

    def _on_resize_finished(self):
        print("[RESIZE] Viewport resize finished, recalculating stack layout...")
        self.relayout("resize")

    def viewportSizeHint(self):
        size = self.stack_layout.content_size()
        return QSize(int(size.width), int(math.ceil(size.height)))

    def updateGeometries(self):
        super().updateGeometries()
        content_height = self.transition_service.content_height_at()
        viewport_height = self.viewport().height()
        scroll_bar = self.verticalScrollBar()
        scroll_bar.setRange(0, max(0, int(math.ceil(content_height - viewport_height))))
        scroll_bar.setPageStep(viewport_height)
        scroll_bar.setSingleStep(20)

    def scrollContentsBy(self, dx, dy):
        # Frames are painted relative to the scroll bar value, so a repaint is enough.
        self.viewport().update()

    def visualRect(self, index):
        if not index.isValid():
            return QRect()
        frame = self.transition_service.frame_at(index.row())
        if frame is None:
            return QRect()
        return self._frame_rect(frame)

    def indexAt(self, point):
        scroll_offset = self.verticalScrollBar().value()
        row = self.transition_service.index_at(point.x(), point.y() + scroll_offset)
        if row is None:
            return QModelIndex()
        return self.model().index(row, 0)

    def scrollTo(self, index, hint=QAbstractItemView.ScrollHint.EnsureVisible):
        if not index.isValid():
            return
        scroll_bar = self.verticalScrollBar()
        target = self.stack_layout.corrected_scroll_offset(
            scroll_bar.value(), self.viewport().height(), index.row())
        scroll_bar.setValue(int(round(target)))

    def paintEvent(self, event):
        model = self.model()
        if model is None or model.rowCount() == 0:
            super().paintEvent(event)
            return

        painter = QPainter(self.viewport())
        try:
            painter.fillRect(self.viewport().rect(), self.palette().base())
            visible = self.scroll_service.visible_rect()
            if self.transition_service.running:
                rows = [row for row, frame in enumerate(self.transition_service.frames_at())
                        if frame.intersects(visible)]
            else:
                rows = self.stack_layout.indices_intersecting(visible)

            for row in rows:
                index = model.index(row, 0)
                option = QStyleOptionViewItem()
                self.initViewItemOption(option)
                option.rect = self.visualRect(index)
                self.delegate.paint(painter, option, index)
        finally:
            painter.end()

try:
    from widgets.stack_layout import Frame
except ModuleNotFoundError:
    from cardstack.widgets.stack_layout import Frame


class CardListScrollService:
    """Keeps the selected card visible for CardListView after layout passes."""

    def __init__(self, view):
        self._view = view

    def visible_rect(self, scroll_value: float | None = None) -> Frame:
        """Viewport band in content coordinates."""
        if scroll_value is None:
            scroll_value = self._view.verticalScrollBar().value()
        viewport = self._view.viewport()
        return Frame(0.0, float(scroll_value), float(viewport.width()), float(viewport.height()))

    def target_scroll_value(self, proposed_value: float | None = None) -> int:
        """Scroll value that brings the layout's selected card into view."""
        scroll_bar = self._view.verticalScrollBar()
        if proposed_value is None:
            proposed_value = scroll_bar.value()
        corrected = self._view.stack_layout.corrected_scroll_offset(
            proposed_value, self._view.viewport().height())
        return max(scroll_bar.minimum(), min(int(round(corrected)), scroll_bar.maximum()))

    def apply_selection_scroll(self) -> int | None:
        """Move the scroll bar so the selected card is visible.

        Returns the new scroll value, or None if the scroll bar was left alone.
        """
        scroll_bar = self._view.verticalScrollBar()
        current = scroll_bar.value()
        target = self.target_scroll_value(current)
        if target == current:
            return None
        scroll_bar.setValue(target)
        self._view._log_flow("SCROLL", f"Selection scroll {current} -> {target}")
        return target

class CardSelectionService:
    """Click-to-expand handling for CardListView.

    The layout only reads its selection; this service is the one place that
    changes it.
    """

    def __init__(self, view):
        self._view = view

    @staticmethod
    def next_selection(current: int | None, row: int) -> int | None:
        """Clicking the selected row again clears the selection."""
        return None if current == row else row

    def toggle(self, row: int) -> bool:
        layout = self._view.stack_layout
        if not self._view.model().toggle_expanded(row):
            return False
        layout.selected_index = self.next_selection(layout.selected_index, row)
        self._view._log_flow("SELECTION", f"Row {row} toggled, selected={layout.selected_index}")
        self._view.relayout("user_click", animate=True)
        self._view.scroll_service.apply_selection_scroll()
        return True

    def clear(self):
        self._view.stack_layout.selected_index = None

    def rows_inserted(self, first: int, last: int):
        """Keep the selection on the same card when rows are inserted before it."""
        layout = self._view.stack_layout
        selected = layout.selected_index
        if selected is not None and selected >= first:
            layout.selected_index = selected + (last - first + 1)

    def rows_removed(self, first: int, last: int):
        """Drop the selection if its card was removed, else shift it up."""
        layout = self._view.stack_layout
        selected = layout.selected_index
        if selected is None or selected < first:
            return
        if selected <= last:
            layout.selected_index = None
        else:
            layout.selected_index = selected - (last - first + 1)

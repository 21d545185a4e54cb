try:
    from widgets.stack_layout import Frame
except ModuleNotFoundError:
    from cardstack.widgets.stack_layout import Frame


def interpolate_frame(start: Frame, end: Frame, progress: float) -> Frame:
    """Linear blend between two frames; `progress` is clamped to [0, 1]."""
    t = max(0.0, min(1.0, progress))
    return Frame(
        start.x + (end.x - start.x) * t,
        start.y + (end.y - start.y) * t,
        start.width + (end.width - start.width) * t,
        start.height + (end.height - start.height) * t,
    )


class CardTransitionService:
    """Computes in-between card frames while a layout change is animating."""

    def __init__(self, layout):
        self._layout = layout
        self.progress = 1.0

    @property
    def running(self) -> bool:
        return self.progress < 1.0

    def start(self):
        self.progress = 0.0

    def set_progress(self, progress: float):
        self.progress = max(0.0, min(1.0, float(progress)))

    def finish(self):
        self.progress = 1.0

    def frame_at(self, index: int, progress: float | None = None) -> Frame | None:
        """Frame of an item at the given progress (defaults to the current one)."""
        end = self._layout.frame_for_item(index)
        if end is None:
            return None
        if progress is None:
            progress = self.progress
        start = self._layout.initial_frame_for_appearing_item(index) or end
        return interpolate_frame(start, end, progress)

    def frames_at(self, progress: float | None = None) -> list[Frame]:
        return [self.frame_at(index, progress) for index in range(len(self._layout.frames()))]

    def content_height_at(self, progress: float | None = None) -> float:
        """Height the content needs so every in-between frame stays reachable."""
        frames = self.frames_at(progress)
        animated = max((frame.bottom for frame in frames), default=0.0)
        return max(animated, self._layout.content_size().height)

    def index_at(self, x: float, y: float, progress: float | None = None) -> int | None:
        """Index of the item drawn at a content point, following in-between frames."""
        if progress is None and not self.running:
            return self._layout.index_at(x, y)
        for index, frame in enumerate(self.frames_at(progress)):
            if frame.x <= x < frame.right and frame.y <= y < frame.bottom:
                return index
        return None

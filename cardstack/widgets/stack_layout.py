"""Vertical stack layout calculator for expandable card lists."""

from dataclasses import dataclass
from typing import Callable, Optional

from PySide6.QtCore import QRectF, QSizeF

try:
    from utils.flow_log import log_flow
except ModuleNotFoundError:
    from cardstack.utils.flow_log import log_flow


@dataclass(frozen=True)
class Size:
    width: float
    height: float

    @classmethod
    def from_qsize(cls, size) -> 'Size':
        return cls(float(size.width()), float(size.height()))

    def to_qsizef(self) -> QSizeF:
        return QSizeF(self.width, self.height)


@dataclass(frozen=True)
class Frame:
    """Placement of one item in content coordinates."""
    x: float
    y: float
    width: float
    height: float

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def right(self) -> float:
        return self.x + self.width

    def intersects(self, other: 'Frame') -> bool:
        """True if both frames share a positive area; touching edges do not count."""
        return (self.x < other.right and other.x < self.right
                and self.y < other.bottom and other.y < self.bottom)

    @classmethod
    def from_qrect(cls, rect) -> 'Frame':
        return cls(float(rect.x()), float(rect.y()),
                   float(rect.width()), float(rect.height()))

    def to_qrectf(self) -> QRectF:
        return QRectF(self.x, self.y, self.width, self.height)


# Returns the host's size for an item, or None to use the default size.
SizeProvider = Callable[[int], Optional[Size]]

_KEEP = object()


class StackLayout:
    """Stacks items top to bottom in a single full-width column.

    Each `prepare` pass keeps the frames from the pass before it so hosts can
    animate items from where they were to where they are now.
    """

    def __init__(self, collapsed_height: float = 100.0, expanded_height: float = 300.0):
        """
        Args:
            collapsed_height: Default height of an unselected item
            expanded_height: Default height of the selected item
        """
        self.collapsed_height = collapsed_height
        self.expanded_height = expanded_height
        self.selected_index: Optional[int] = None
        self._previous_frames: tuple[Frame, ...] = ()
        self._current_frames: tuple[Frame, ...] = ()
        self._content_size = Size(0.0, 0.0)

    def prepare(self, item_count: int, viewport_width: float,
                size_provider: Optional[SizeProvider] = None,
                selected_index=_KEEP):
        """
        Recompute the frame of every item.

        Args:
            item_count: Number of items to lay out
            viewport_width: Width of the viewport; default sizes use it as their width
            size_provider: Called once per item in ascending order; its size wins over the default
            selected_index: Replaces `self.selected_index` when given
        """
        if selected_index is not _KEEP:
            self.selected_index = selected_index

        self._previous_frames = self._current_frames

        frames = []
        y = 0.0
        for index in range(item_count):
            size = size_provider(index) if size_provider is not None else None
            if size is None:
                size = self.default_size(index, viewport_width)
            frames.append(Frame(0.0, y, size.width, size.height))
            y += size.height

        self._current_frames = tuple(frames)
        self._content_size = Size(viewport_width, y)
        log_flow("LAYOUT", f"Prepared {item_count} items, width={viewport_width}, "
                           f"height={y}, selected={self.selected_index}",
                 throttle_key="layout_prepare", every_s=0.25)

    def default_size(self, index: int, viewport_width: float) -> Size:
        """Size used for an item the size provider has no opinion on."""
        if index == self.selected_index:
            return Size(viewport_width, self.expanded_height)
        return Size(viewport_width, self.collapsed_height)

    @staticmethod
    def _lookup(frames: tuple[Frame, ...], index) -> Optional[Frame]:
        if index is None or not 0 <= index < len(frames):
            return None
        return frames[index]

    def frame_for_item(self, index: int) -> Optional[Frame]:
        """Get the current frame of an item, or None if the index is out of range."""
        return self._lookup(self._current_frames, index)

    def initial_frame_for_appearing_item(self, index: int) -> Optional[Frame]:
        """Get the frame the item had before the last prepare pass."""
        return self._lookup(self._previous_frames, index)

    def final_frame_for_disappearing_item(self, index: int) -> Optional[Frame]:
        return self.frame_for_item(index)

    def frames(self) -> tuple[Frame, ...]:
        return self._current_frames

    def previous_frames(self) -> tuple[Frame, ...]:
        return self._previous_frames

    def frames_intersecting(self, rect: Frame) -> list[Frame]:
        """
        Get the frames overlapping the given rectangle.

        Args:
            rect: Query rectangle in content coordinates

        Returns:
            Overlapping frames in index order
        """
        return [frame for frame in self._current_frames if frame.intersects(rect)]

    def indices_intersecting(self, rect: Frame) -> list[int]:
        return [index for index, frame in enumerate(self._current_frames)
                if frame.intersects(rect)]

    def index_at(self, x: float, y: float) -> Optional[int]:
        """Get the index of the item containing a point, if any."""
        for index, frame in enumerate(self._current_frames):
            if frame.x <= x < frame.right and frame.y <= y < frame.bottom:
                return index
        return None

    @staticmethod
    def should_recompute(old_size: Size, new_size: Size) -> bool:
        """True if a viewport size change requires a new prepare pass."""
        return old_size != new_size

    def content_size(self) -> Size:
        return self._content_size

    def corrected_scroll_offset(self, proposed_y: float, viewport_height: float,
                                selected_index=_KEEP) -> float:
        """
        Adjust a proposed vertical scroll offset so the selected item stays visible.

        The bottom edge is checked first, so an item taller than the viewport
        ends up with its bottom aligned to the viewport bottom.

        Args:
            proposed_y: Offset the host intends to scroll to
            viewport_height: Visible height of the viewport
            selected_index: Item to keep visible; defaults to `self.selected_index`

        Returns:
            The corrected offset
        """
        if selected_index is _KEEP:
            selected_index = self.selected_index
        frame = self.frame_for_item(selected_index)
        if frame is None:
            return proposed_y

        visible_top = proposed_y
        visible_bottom = visible_top + viewport_height
        if frame.bottom > visible_bottom:
            return visible_top + (frame.bottom - visible_bottom)
        if frame.y < visible_top:
            return frame.y
        return proposed_y

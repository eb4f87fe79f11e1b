"""
Interaction Controller
Hover highlighting and click-to-focus for airport markers.

States:
    Idle      nothing hovered, nothing focused
    Hovering  one airport marker highlighted, no focus lock
    Focused   one airport clicked; only it, its destinations and its
              routes are visible

Every handler takes the current SelectionState and returns the next one.
Marker visibility and the ``selected`` flag are updated in place on the
markers, which the renderer reads.
"""

from dataclasses import dataclass, replace
from typing import Dict, Optional, Sequence

from airmap.data.models import AirportId
from .index import VisibilityIndex
from .markers import AirportMarker, RouteMarker
from .viewport import Viewport


@dataclass(frozen=True)
class SelectionState:
    """Currently hovered and focused airport ids, each optional."""

    hovered: Optional[AirportId] = None
    focused: Optional[AirportId] = None

    @property
    def is_focused(self) -> bool:
        """True while a focus lock is held."""
        return self.focused is not None

    @property
    def mode(self) -> str:
        """State name: 'idle', 'hovering' or 'focused'."""
        if self.focused is not None:
            return "focused"
        if self.hovered is not None:
            return "hovering"
        return "idle"


class InteractionController:
    """
    Applies pointer events to airport and route markers.

    Hit scans only consider visible airport markers, and the first match
    in list order wins when markers overlap.
    """

    def __init__(
        self,
        airports: Sequence[AirportMarker],
        routes: Sequence[RouteMarker],
        index: VisibilityIndex,
        viewport: Viewport,
    ):
        """
        Initialize controller.

        Args:
            airports: Airport markers in draw order
            routes: Route markers
            index: Visibility index built over the same markers
            viewport: Projection used for hit tests
        """
        self.airports = airports
        self.routes = routes
        self.index = index
        self.viewport = viewport
        self._by_id: Dict[AirportId, AirportMarker] = {m.airport_id: m for m in airports}

    def marker_at(self, x: float, y: float) -> Optional[AirportMarker]:
        """
        Find the first visible airport marker under a pixel.

        Pixels outside the viewport box never hit a marker.

        Args:
            x: Window x coordinate
            y: Window y coordinate

        Returns:
            Matching marker or None
        """
        if not self.viewport.contains(x, y):
            return None
        for marker in self.airports:
            if marker.is_visible() and marker.hit_test(self.viewport, x, y):
                return marker
        return None

    def hovered_marker(self, state: SelectionState) -> Optional[AirportMarker]:
        return self._by_id.get(state.hovered) if state.hovered is not None else None

    def focused_marker(self, state: SelectionState) -> Optional[AirportMarker]:
        return self._by_id.get(state.focused) if state.focused is not None else None

    def pointer_moved(self, state: SelectionState, x: float, y: float) -> SelectionState:
        """
        Recompute the hover highlight.

        The previous highlight is always cleared, then the first visible
        marker under the pointer, if any, is highlighted. Under a focus
        lock only the focus and its destinations are visible, so only
        they can be hovered.

        Args:
            state: Current selection
            x: Pointer x coordinate
            y: Pointer y coordinate

        Returns:
            Next selection
        """
        return self._set_hover(state, self.marker_at(x, y))

    def hover_airport(self, state: SelectionState, airport_id: AirportId) -> SelectionState:
        """
        Highlight an airport by id, as if the pointer were over its marker.

        Hidden airports cannot be hovered; the highlight is cleared instead.

        Raises:
            KeyError: If the id is not loaded
        """
        marker = self._by_id[airport_id]
        return self._set_hover(state, marker if marker.is_visible() else None)

    def clicked(self, state: SelectionState, x: float, y: float) -> SelectionState:
        """
        Toggle the focus lock.

        With a lock held any click releases it, wherever it lands. Without
        a lock, a click on a visible airport focuses it and a click on
        empty space changes nothing.

        Args:
            state: Current selection
            x: Pointer x coordinate
            y: Pointer y coordinate

        Returns:
            Next selection
        """
        if state.is_focused:
            return self._release(state)

        marker = self.marker_at(x, y)
        if marker is None:
            return state

        return self._focus(state, marker)

    def select_airport(self, state: SelectionState, airport_id: AirportId) -> SelectionState:
        """
        Click an airport by id.

        Same toggle rules as clicked(), but the target is resolved by id,
        so overlapping markers cannot redirect the click.

        Raises:
            KeyError: If the id is not loaded
        """
        if state.is_focused:
            return self._release(state)

        marker = self._by_id[airport_id]
        if not marker.is_visible():
            return state

        return self._focus(state, marker)

    def _set_hover(self, state: SelectionState, marker: Optional[AirportMarker]) -> SelectionState:
        previous = self.hovered_marker(state)
        if previous is not None:
            previous.selected = False

        if marker is None:
            return replace(state, hovered=None)

        marker.selected = True
        return replace(state, hovered=marker.airport_id)

    def _focus(self, state: SelectionState, marker: AirportMarker) -> SelectionState:
        """Hide every airport, then show the focus and its departing routes."""
        for airport in self.airports:
            airport.set_visible(False)
        marker.set_visible(True)

        for edge in self.index.edges_from(marker.airport_id):
            edge.destination.set_visible(True)
            edge.route.set_visible(True)

        # A highlight on an airport the focus just hid is dropped
        hovered = self.hovered_marker(state)
        if hovered is not None and not hovered.is_visible():
            state = self._set_hover(state, None)

        return replace(state, focused=marker.airport_id)

    def _release(self, state: SelectionState) -> SelectionState:
        """Unhide every airport and hide every route."""
        for airport in self.airports:
            airport.set_visible(True)
        for route in self.routes:
            route.set_visible(False)
        return replace(state, focused=None)

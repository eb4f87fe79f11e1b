"""
Tests for the interaction controller.

Tests cover:
1. Hover highlight and clearing
2. Click to focus and toggle-off
3. Empty-space clicks
4. Overlapping marker tie-break
5. Focus idempotence and single-selection invariants
"""

import pytest

from airmap.data.models import Airport, Location, Route
from airmap.interaction.controller import InteractionController, SelectionState
from airmap.interaction.index import build_map_layers
from airmap.interaction.viewport import Viewport


def make_controller(airports, routes, viewport=None):
    viewport = viewport or Viewport()
    layers = build_map_layers(airports, routes)
    controller = InteractionController(layers.airports, layers.routes, layers.index, viewport)
    return controller, layers


def pixel_of(controller, airport_id):
    marker = next(m for m in controller.airports if m.airport_id == airport_id)
    return controller.viewport.to_screen(marker.location)


def visible_ids(layers):
    return (
        {m.airport_id for m in layers.airports if m.is_visible()},
        {m.route_id for m in layers.routes if m.is_visible()},
    )


@pytest.fixture
def two_airports():
    return [
        Airport(1, Location(10.0, 10.0), "AAA"),
        Airport(2, Location(40.0, 60.0), "BBB"),
    ]


@pytest.fixture
def empty_space(viewport):
    """A pixel far from every fixture airport."""
    return viewport.to_screen(Location(-60.0, 150.0))


class TestSelectionState:
    """Tests for SelectionState."""

    def test_modes(self):
        assert SelectionState().mode == "idle"
        assert SelectionState(hovered=1).mode == "hovering"
        assert SelectionState(hovered=1, focused=2).mode == "focused"

    def test_immutable(self):
        state = SelectionState()
        with pytest.raises(AttributeError):
            state.focused = 1


class TestHover:
    """Tests for pointer_moved."""

    def test_hover_highlights_marker(self, airports, routes):
        controller, layers = make_controller(airports, routes)

        state = controller.pointer_moved(SelectionState(), *pixel_of(controller, 2))

        assert state.hovered == 2
        assert state.mode == "hovering"
        assert [m.airport_id for m in layers.airports if m.selected] == [2]

    def test_move_away_clears_hover(self, two_airports, empty_space):
        """Hover airport 1, then move the pointer away."""
        controller, layers = make_controller(two_airports, [Route(1, 1, 2)])

        state = controller.pointer_moved(SelectionState(), *pixel_of(controller, 1))
        state = controller.pointer_moved(state, *empty_space)

        assert state.hovered is None
        assert state.mode == "idle"
        assert not any(m.selected for m in layers.airports)

    def test_hover_moves_between_markers(self, airports, routes):
        controller, layers = make_controller(airports, routes)

        state = SelectionState()
        for airport_id in (1, 2, 4, 1):
            state = controller.pointer_moved(state, *pixel_of(controller, airport_id))
            selected = [m.airport_id for m in layers.airports if m.selected]
            assert selected == [airport_id]

    def test_hidden_marker_not_hoverable(self, airports, routes):
        controller, layers = make_controller(airports, routes)
        layers.airports[1].set_visible(False)

        state = controller.pointer_moved(SelectionState(), *pixel_of(controller, 2))

        assert state.hovered is None
        assert not layers.airports[1].selected

    def test_hover_works_while_focused(self, airports, routes, empty_space):
        """Under a lock the focus and its destinations stay hoverable."""
        controller, layers = make_controller(airports, routes)
        state = controller.clicked(SelectionState(), *pixel_of(controller, 1))

        state = controller.pointer_moved(state, *pixel_of(controller, 2))
        assert state == SelectionState(hovered=2, focused=1)
        assert [m.airport_id for m in layers.airports if m.selected] == [2]

        state = controller.pointer_moved(state, *pixel_of(controller, 1))
        assert state.hovered == 1
        assert [m.airport_id for m in layers.airports if m.selected] == [1]

        state = controller.pointer_moved(state, *empty_space)
        assert state == SelectionState(focused=1)
        assert not any(m.selected for m in layers.airports)

    def test_move_away_after_focus_clears_hover(self, airports, routes, empty_space):
        """Hover and click airport 1, then move to empty space."""
        controller, layers = make_controller(airports, routes)
        x, y = pixel_of(controller, 1)

        state = controller.pointer_moved(SelectionState(), x, y)
        state = controller.clicked(state, x, y)
        state = controller.pointer_moved(state, *empty_space)

        assert state.hovered is None
        assert state.focused == 1
        assert not any(m.selected for m in layers.airports)

    def test_airport_hidden_by_focus_not_hoverable(self, airports, routes):
        controller, layers = make_controller(airports, routes)
        # BBB only flies to AAA, so DDD is hidden
        state = controller.clicked(SelectionState(), *pixel_of(controller, 2))

        state = controller.pointer_moved(state, *pixel_of(controller, 4))

        assert state.hovered is None
        assert not layers.airports[2].selected

    def test_outside_viewport_not_hoverable(self):
        viewport = Viewport(zoom=4)
        controller, layers = make_controller([Airport(1, Location(0.0, 60.0), "AAA")], [], viewport)
        x, y = pixel_of(controller, 1)
        assert not viewport.contains(x, y)

        state = controller.pointer_moved(SelectionState(), x, y)

        assert state.hovered is None
        assert not layers.airports[0].selected

    def test_hover_airport_by_id(self, airports, routes):
        controller, layers = make_controller(airports, routes)

        state = controller.hover_airport(SelectionState(), 4)
        state = controller.hover_airport(state, 2)

        assert state.hovered == 2
        assert [m.airport_id for m in layers.airports if m.selected] == [2]

    def test_hover_hidden_airport_by_id_clears(self, airports, routes):
        controller, layers = make_controller(airports, routes)
        state = controller.hover_airport(SelectionState(), 1)
        layers.airports[2].set_visible(False)

        state = controller.hover_airport(state, 4)

        assert state.hovered is None
        assert not any(m.selected for m in layers.airports)

    def test_overlapping_markers_first_wins(self):
        airports = [
            Airport(1, Location(10.0, 10.0), "AAA"),
            Airport(2, Location(10.0, 10.01), "BBB"),
        ]
        controller, layers = make_controller(airports, [])

        state = controller.pointer_moved(SelectionState(), *pixel_of(controller, 2))

        assert state.hovered == 1
        assert layers.airports[0].selected
        assert not layers.airports[1].selected


class TestClick:
    """Tests for clicked."""

    def test_focus_shows_airport_routes_and_destinations(self, two_airports):
        """Focusing airport 1 of {1, 2} with route 1->2."""
        controller, layers = make_controller(two_airports, [Route(1, 1, 2)])

        state = controller.clicked(SelectionState(), *pixel_of(controller, 1))

        assert state.focused == 1
        assert visible_ids(layers) == ({1, 2}, {1})

    def test_focus_without_known_routes(self, two_airports):
        """Route to an unknown airport: focus hides the other airport."""
        controller, layers = make_controller(two_airports, [Route(1, 1, 99)])

        state = controller.clicked(SelectionState(), *pixel_of(controller, 1))

        assert state.focused == 1
        assert visible_ids(layers) == ({1}, set())

    def test_focus_hides_unrelated(self, airports, routes):
        controller, layers = make_controller(airports, routes)

        controller.clicked(SelectionState(), *pixel_of(controller, 2))

        # BBB only flies to AAA
        assert visible_ids(layers) == ({1, 2}, {3})

    def test_click_empty_space_is_noop(self, airports, routes, empty_space):
        controller, layers = make_controller(airports, routes)
        before = visible_ids(layers)

        state = SelectionState()
        after = controller.clicked(state, *empty_space)

        assert after is state
        assert visible_ids(layers) == before
        assert before == ({1, 2, 4}, set())

    def test_click_focused_airport_releases(self, two_airports):
        controller, layers = make_controller(two_airports, [Route(1, 1, 2)])

        state = controller.clicked(SelectionState(), *pixel_of(controller, 1))
        state = controller.clicked(state, *pixel_of(controller, 1))

        assert state.focused is None
        assert visible_ids(layers) == ({1, 2}, set())

    def test_click_anywhere_releases(self, airports, routes, empty_space):
        controller, layers = make_controller(airports, routes)

        state = controller.clicked(SelectionState(), *pixel_of(controller, 1))
        state = controller.clicked(state, *empty_space)

        assert not state.is_focused
        assert visible_ids(layers) == ({1, 2, 4}, set())

    def test_click_other_airport_only_releases(self, airports, routes):
        """A second click on a different airport unlocks instead of refocusing."""
        controller, layers = make_controller(airports, routes)

        state = controller.clicked(SelectionState(), *pixel_of(controller, 1))
        state = controller.clicked(state, *pixel_of(controller, 2))

        assert state.focused is None
        assert visible_ids(layers) == ({1, 2, 4}, set())

        state = controller.clicked(state, *pixel_of(controller, 2))
        assert state.focused == 2

    def test_refocus_is_idempotent(self, airports, routes):
        controller, layers = make_controller(airports, routes)
        x, y = pixel_of(controller, 1)

        state = controller.clicked(SelectionState(), x, y)
        first = visible_ids(layers)
        state = controller.clicked(state, x, y)
        state = controller.clicked(state, x, y)

        assert state.focused == 1
        assert visible_ids(layers) == first

    def test_hidden_marker_not_clickable(self, airports, routes):
        """Hidden markers cannot be focused."""
        controller, layers = make_controller(airports, routes)
        layers.airports[2].set_visible(False)

        state = controller.clicked(SelectionState(), *pixel_of(controller, 4))

        assert state.focused is None

    def test_focus_keeps_hover_on_visible_airport(self, airports, routes):
        controller, layers = make_controller(airports, routes)
        x, y = pixel_of(controller, 1)

        state = controller.pointer_moved(SelectionState(), x, y)
        state = controller.clicked(state, x, y)

        assert state == SelectionState(hovered=1, focused=1)
        assert controller.focused_marker(state).airport_id == 1
        assert controller.hovered_marker(state).airport_id == 1
        assert layers.airports[0].selected

    def test_focus_drops_hover_on_hidden_airport(self, airports, routes):
        """A click that hides the hovered airport also clears its highlight."""
        controller, layers = make_controller(airports, routes)

        state = controller.pointer_moved(SelectionState(), *pixel_of(controller, 4))
        state = controller.clicked(state, *pixel_of(controller, 2))

        assert state == SelectionState(focused=2)
        assert not layers.airports[2].is_visible()
        assert not any(m.selected for m in layers.airports)

    def test_outside_viewport_not_clickable(self):
        viewport = Viewport(zoom=4)
        controller, _ = make_controller([Airport(1, Location(0.0, 60.0), "AAA")], [], viewport)

        state = SelectionState()
        assert controller.clicked(state, *pixel_of(controller, 1)) is state


class TestSelectAirport:
    """Tests for select_airport."""

    def test_select_overlapping_airport(self):
        """The id path reaches an airport drawn under another marker."""
        airports = [
            Airport(1, Location(10.0, 10.0), "AAA"),
            Airport(2, Location(10.0, 10.01), "BBB"),
        ]
        controller, layers = make_controller(airports, [Route(1, 2, 1)])

        state = controller.select_airport(SelectionState(), 2)

        assert state.focused == 2
        assert visible_ids(layers) == ({1, 2}, {1})

    def test_select_toggles_like_click(self, airports, routes):
        controller, layers = make_controller(airports, routes)

        state = controller.select_airport(SelectionState(), 1)
        state = controller.select_airport(state, 2)

        assert state.focused is None
        assert visible_ids(layers) == ({1, 2, 4}, set())

    def test_select_hidden_airport_is_noop(self, airports, routes):
        controller, layers = make_controller(airports, routes)
        layers.airports[2].set_visible(False)

        state = SelectionState()
        assert controller.select_airport(state, 4) is state

    def test_select_unknown_id_raises(self, airports, routes):
        controller, _ = make_controller(airports, routes)

        with pytest.raises(KeyError):
            controller.select_airport(SelectionState(), 99)


def test_at_most_one_highlight(airports, routes, viewport, empty_space):
    """Any pointer path leaves at most one highlighted airport."""
    controller, layers = make_controller(airports, routes, viewport)
    path = [pixel_of(controller, 1), empty_space, pixel_of(controller, 4), pixel_of(controller, 2)]

    state = SelectionState()
    for x, y in path:
        state = controller.pointer_moved(state, x, y)
        assert sum(m.selected for m in layers.airports) <= 1


def test_single_highlight_through_focus_and_release(airports, routes, empty_space):
    """Hover, focus, hover a destination, release, then move on."""
    controller, layers = make_controller(airports, routes)

    def selected():
        ids = [m.airport_id for m in layers.airports if m.selected]
        assert len(ids) <= 1
        return ids

    state = controller.pointer_moved(SelectionState(), *pixel_of(controller, 1))
    assert selected() == [1]

    state = controller.clicked(state, *pixel_of(controller, 1))
    assert state == SelectionState(hovered=1, focused=1)
    assert selected() == [1]

    state = controller.pointer_moved(state, *pixel_of(controller, 4))
    assert state == SelectionState(hovered=4, focused=1)
    assert selected() == [4]

    # Release leaves the hover alone until the pointer moves
    state = controller.clicked(state, *empty_space)
    assert state == SelectionState(hovered=4)
    assert selected() == [4]

    state = controller.pointer_moved(state, *pixel_of(controller, 2))
    assert state == SelectionState(hovered=2)
    assert selected() == [2]

    state = controller.pointer_moved(state, *empty_space)
    assert state == SelectionState()
    assert selected() == []

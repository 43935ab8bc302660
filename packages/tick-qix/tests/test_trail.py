"""Tests for the trail state machine."""

import pytest
from tick_qix import Grid, Trail, TrailEvent, TrailMode, TransitionError, update_trail
from tick_qix.trail import TRAIL_TRANSITIONS, classify, next_mode

GRID = Grid.bordered(10, 8)
FAR = (8, 6)


def _trail(*points, mode=TrailMode.DRAWING):
    return Trail(points=tuple(points), mode=mode)


# --- Transition table ---


def test_transition_table_is_exhaustive():
    for mode in TrailMode:
        for event in TrailEvent:
            assert (mode, event) in TRAIL_TRANSITIONS


def test_next_mode_raises_for_unknown_pair():
    with pytest.raises(TransitionError):
        next_mode("drawing", TrailEvent.CUT)


# --- Classification precedence ---


class TestClassify:

    def test_cut_beats_everything(self):
        trail = _trail((3, 1), (3, 2))
        # Runner back on the wall, but the hunter head sits on the trail.
        assert classify(trail, (3, 0), (3, 2), GRID) is TrailEvent.CUT

    def test_wall_beats_backtrack(self):
        trail = _trail((3, 0), (3, 1))
        grid = GRID.with_filled([(3, 0)])
        assert classify(trail, (3, 0), FAR, grid) is TrailEvent.WALL

    def test_backtrack_beats_crossed(self):
        trail = _trail((3, 1), (3, 2), (3, 3))
        assert classify(trail, (3, 2), FAR, GRID) is TrailEvent.BACKTRACK

    def test_crossed_when_revisiting_older_point(self):
        trail = _trail((3, 1), (3, 2), (4, 2), (4, 1))
        assert classify(trail, (3, 1), FAR, GRID) is TrailEvent.CROSSED

    def test_standing_on_last_point_is_advance(self):
        trail = _trail((3, 1), (3, 2))
        assert classify(trail, (3, 2), FAR, GRID) is TrailEvent.ADVANCE

    def test_fresh_open_cell_is_advance(self):
        assert classify(_trail(), (3, 1), FAR, GRID) is TrailEvent.ADVANCE


# --- Updates ---


class TestUpdateTrail:

    def test_advance_appends_when_drawing(self):
        trail, event = update_trail(_trail((3, 1)), (3, 2), FAR, GRID)
        assert event is TrailEvent.ADVANCE
        assert trail.points == ((3, 1), (3, 2))
        assert trail.drawing

    def test_advance_does_not_duplicate_last_point(self):
        trail, _ = update_trail(_trail((3, 1), (3, 2)), (3, 2), FAR, GRID)
        assert trail.points == ((3, 1), (3, 2))

    def test_advance_while_idle_records_nothing(self):
        trail, _ = update_trail(_trail(mode=TrailMode.IDLE), (3, 2), FAR, GRID)
        assert trail.points == ()
        assert trail.mode is TrailMode.IDLE

    def test_backtrack_erases_last_point(self):
        trail, event = update_trail(_trail((3, 1), (3, 2), (3, 3)), (3, 2), FAR, GRID)
        assert event is TrailEvent.BACKTRACK
        assert trail.points == ((3, 1), (3, 2))
        assert trail.drawing

    def test_crossing_clears_and_disables_drawing(self):
        trail, event = update_trail(
            _trail((3, 1), (3, 2), (4, 2), (4, 1)), (3, 1), FAR, GRID,
        )
        assert event is TrailEvent.CROSSED
        assert trail.points == ()
        assert trail.mode is TrailMode.IDLE

    def test_cut_clears_and_disables_drawing(self):
        trail, event = update_trail(_trail((3, 1), (3, 2), (3, 3)), (3, 4), (3, 2), GRID)
        assert event is TrailEvent.CUT
        assert trail == Trail(points=(), mode=TrailMode.IDLE)

    def test_wall_contact_resets_and_enables_drawing(self):
        trail, event = update_trail(_trail(mode=TrailMode.IDLE), (0, 3), FAR, GRID)
        assert event is TrailEvent.WALL
        assert trail == Trail(points=(), mode=TrailMode.DRAWING)

    def test_idle_stays_idle_until_wall(self):
        trail = _trail(mode=TrailMode.IDLE)
        for pos in [(2, 2), (3, 2), (4, 2)]:
            trail, _ = update_trail(trail, pos, FAR, GRID)
            assert trail.mode is TrailMode.IDLE
            assert trail.points == ()
        trail, _ = update_trail(trail, (9, 2), FAR, GRID)
        assert trail.mode is TrailMode.DRAWING

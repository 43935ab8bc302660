"""Tests for level descriptors and the lifecycle state machine."""

import pytest
from tick_qix import LEVELS, Lifecycle, LifecycleEvent, LevelSpec, QixConfig, TransitionError, transition
from tick_qix.levels import LIFECYCLE_TRANSITIONS, can_transition


# --- Level table ---


def test_level_zero_descriptor():
    spec = QixConfig().level(0)
    assert spec.hunter_length == 6
    assert spec.required_percent == 50


def test_level_lookup_clamps_to_last_entry():
    config = QixConfig()
    assert config.level(len(LEVELS) - 1) == LEVELS[-1]
    assert config.level(len(LEVELS) + 10) == LEVELS[-1]


def test_negative_level_raises_value_error():
    with pytest.raises(ValueError):
        QixConfig().level(-1)


def test_levels_get_harder():
    for easier, harder in zip(LEVELS, LEVELS[1:]):
        assert harder.hunter_length >= easier.hunter_length
        assert harder.required_percent >= easier.required_percent


@pytest.mark.parametrize(
    "kwargs",
    [
        {"hunter_length": 0, "required_percent": 50, "time_budget": 10},
        {"hunter_length": 4, "required_percent": 0, "time_budget": 10},
        {"hunter_length": 4, "required_percent": 101, "time_budget": 10},
        {"hunter_length": 4, "required_percent": 50, "time_budget": 0},
    ],
)
def test_level_spec_validation(kwargs):
    with pytest.raises(ValueError):
        LevelSpec(**kwargs)


def test_config_validation():
    with pytest.raises(ValueError):
        QixConfig(tps=0)
    with pytest.raises(ValueError):
        QixConfig(levels=())


# --- Lifecycle transitions ---


class TestLifecycle:

    @pytest.mark.parametrize(
        "event, target",
        [
            (LifecycleEvent.CAUGHT, Lifecycle.OVER_CAUGHT),
            (LifecycleEvent.TIMED_OUT, Lifecycle.OVER_TIMEOUT),
            (LifecycleEvent.THRESHOLD_MET, Lifecycle.LEVEL_COMPLETED),
        ],
    )
    def test_running_transitions(self, event, target):
        assert transition(Lifecycle.RUNNING, event) is target

    def test_restart_from_every_state(self):
        for lifecycle in Lifecycle:
            assert transition(lifecycle, LifecycleEvent.RESTART) is Lifecycle.RUNNING

    def test_advance_only_after_completion(self):
        assert can_transition(Lifecycle.LEVEL_COMPLETED, LifecycleEvent.ADVANCE)
        assert not can_transition(Lifecycle.RUNNING, LifecycleEvent.ADVANCE)
        assert not can_transition(Lifecycle.OVER_CAUGHT, LifecycleEvent.ADVANCE)
        assert not can_transition(Lifecycle.OVER_TIMEOUT, LifecycleEvent.ADVANCE)

    def test_terminal_states_ignore_game_events(self):
        for lifecycle in (Lifecycle.LEVEL_COMPLETED, Lifecycle.OVER_CAUGHT, Lifecycle.OVER_TIMEOUT):
            for event in (LifecycleEvent.CAUGHT, LifecycleEvent.TIMED_OUT, LifecycleEvent.THRESHOLD_MET):
                with pytest.raises(TransitionError):
                    transition(lifecycle, event)

    def test_only_running_is_not_terminal(self):
        assert [s for s in Lifecycle if not s.terminal] == [Lifecycle.RUNNING]

    def test_every_target_is_a_lifecycle(self):
        assert all(isinstance(t, Lifecycle) for t in LIFECYCLE_TRANSITIONS.values())

from gtm_studio.schemas.contracts import BUDGET_LEVELS, LAUNCH_TIMELINES, STAGES
from gtm_studio.services.playbooks import (
    BUDGET_EXPERIMENT_SLOTS,
    BUDGET_OPTIONS,
    CHANNEL_MIX,
    FOCUS_AREA_OPTIONS,
    FOCUS_PLAYBOOKS,
    STAGE_OPTIONS,
    STAGE_PROFILES,
    STAGE_RISKS,
    TIMELINE_OPTIONS,
    TIMELINE_PHASES,
    lookup,
)


def test_tables_cover_every_enum_value():
    assert set(CHANNEL_MIX) == set(BUDGET_LEVELS)
    assert set(BUDGET_EXPERIMENT_SLOTS) == set(BUDGET_LEVELS)
    assert set(TIMELINE_PHASES) == set(LAUNCH_TIMELINES)
    assert set(STAGE_PROFILES) == set(STAGES)
    assert set(STAGE_RISKS) == set(STAGES)


def test_options_match_enums():
    assert [o.value for o in STAGE_OPTIONS] == list(STAGES)
    assert [o.value for o in BUDGET_OPTIONS] == list(BUDGET_LEVELS)
    assert [o.value for o in TIMELINE_OPTIONS] == list(LAUNCH_TIMELINES)
    assert {o.value for o in FOCUS_AREA_OPTIONS} == set(FOCUS_PLAYBOOKS)


def test_timeline_phase_counts_grow_with_horizon():
    counts = [len(TIMELINE_PHASES[key]) for key in LAUNCH_TIMELINES]
    assert counts == sorted(counts)
    assert counts[0] < counts[-1]


def test_lookup_returns_entry_or_default():
    table = {"a": 1, "b": 2}
    assert lookup(table, "b", "a") == 2
    assert lookup(table, "zzz", "a") == 1
    assert lookup(table, ["b"], "a") == 1

"""Domain types tests — closed enums and transition tables stay consistent."""

from occam_razor.core.domain_types import (
    SEQUENTIAL_NEXT,
    LoopbackTarget,
    Stage,
    StepStatus,
)


def test_loopback_targets_are_stages_minus_reporting_issue():
    assert {t.value for t in LoopbackTarget} == {
        s.value for s in Stage if s != Stage.REPORTING_ISSUE
    }


def test_as_stage_maps_to_same_value():
    for target in LoopbackTarget:
        assert target.as_stage().value == target.value


def test_sequential_table_covers_every_stage_but_reporting_issue():
    assert set(SEQUENTIAL_NEXT) == set(Stage) - {Stage.REPORTING_ISSUE}


def test_sequential_table_never_enters_reporting_issue():
    assert Stage.REPORTING_ISSUE not in SEQUENTIAL_NEXT.values()


def test_sequential_table_follows_declared_order():
    order = [s for s in Stage if s != Stage.REPORTING_ISSUE]
    for current, following in zip(order, order[1:]):
        assert SEQUENTIAL_NEXT[current] == following
    assert SEQUENTIAL_NEXT[Stage.IMPLEMENTATION] == Stage.IMPLEMENTATION


def test_stage_values_serialize_as_strings():
    assert Stage.CONTEXT_ANALYSIS == "context_analysis"
    assert StepStatus.NEXT_THOUGHT.value == "NEXT_THOUGHT"

import pytest

from rental_engine.domain.entities.coverage import Covered, Gap
from rental_engine.domain.errors import SlotNotCoveredError
from rental_engine.domain.services.coverage import SlotCoverageValidator
from tests.helpers import at, make_slot, window


@pytest.fixture
def validator():
    return SlotCoverageValidator()


def test_single_slot_containing_window(validator):
    slot = make_slot(0, 24)
    result = validator.is_covered(window(9, 12), [slot])
    assert isinstance(result, Covered)
    assert result.slots == (slot,)


def test_gap_between_slots_is_reported_at_first_uncovered_instant(validator):
    slots = [make_slot(0, 5, slot_id="a"), make_slot(6, 10, slot_id="b")]
    result = validator.is_covered(window(2, 8), slots)
    assert result == Gap(at=at(5))


def test_adjacent_slots_are_contiguous(validator):
    first, second = make_slot(0, 5, slot_id="a"), make_slot(5, 10, slot_id="b")
    result = validator.is_covered(window(1, 9), [second, first])
    assert isinstance(result, Covered)
    assert result.slot_ids == ["a", "b"]


def test_no_overlapping_slot_reports_gap_at_window_start(validator):
    result = validator.is_covered(window(12, 14), [make_slot(0, 5)])
    assert result == Gap(at=at(12))


def test_gap_at_window_start_when_first_slot_begins_late(validator):
    result = validator.is_covered(window(2, 8), [make_slot(4, 10)])
    assert result == Gap(at=at(2))


def test_gap_at_tail_when_slots_end_early(validator):
    result = validator.is_covered(window(2, 8), [make_slot(0, 6)])
    assert result == Gap(at=at(6))


def test_inactive_slots_are_ignored(validator):
    slots = [make_slot(0, 5, slot_id="a"), make_slot(5, 10, slot_id="b", is_active=False)]
    assert validator.is_covered(window(1, 9), slots) == Gap(at=at(5))


def test_nested_slot_does_not_shrink_frontier(validator):
    slots = [make_slot(0, 10, slot_id="wide"), make_slot(2, 4, slot_id="inner")]
    assert isinstance(validator.is_covered(window(1, 9), slots), Covered)


def test_result_is_independent_of_input_order(validator):
    slots = [make_slot(6, 12, slot_id="c"), make_slot(0, 3, slot_id="a"), make_slot(3, 6, slot_id="b")]
    forward = validator.is_covered(window(1, 11), slots)
    backward = validator.is_covered(window(1, 11), list(reversed(slots)))
    assert forward == backward
    assert forward.slot_ids == ["a", "b", "c"]


def test_repeated_checks_are_idempotent(validator):
    slots = [make_slot(0, 5, slot_id="a"), make_slot(6, 10, slot_id="b")]
    first = validator.is_covered(window(2, 8), slots)
    assert validator.is_covered(window(2, 8), slots) == first


def test_governing_slot_contains_window_start(validator):
    slots = [make_slot(0, 5, slot_id="a"), make_slot(5, 10, slot_id="b")]
    coverage = validator.is_covered(window(6, 9), slots)
    assert validator.governing_slot(window(6, 9), coverage).id == "b"


def test_governing_slot_prefers_earliest_then_widest(validator):
    slots = [
        make_slot(4, 8, slot_id="late"),
        make_slot(2, 6, slot_id="short"),
        make_slot(2, 10, slot_id="wide"),
    ]
    coverage = validator.is_covered(window(5, 7), slots)
    assert validator.governing_slot(window(5, 7), coverage).id == "wide"


def test_governing_slot_requires_covered_start(validator):
    coverage = Covered(slots=(make_slot(5, 10),))
    with pytest.raises(SlotNotCoveredError):
        validator.governing_slot(window(2, 6), coverage)


def test_covered_payload_lists_contributing_ids():
    coverage = Covered(slots=(make_slot(0, 5, slot_id="a"), make_slot(5, 10, slot_id="b")))
    assert coverage.to_payload() == {"covered": True, "contributing_slot_ids": ["a", "b"]}


def test_gap_payload_uses_iso_instant():
    assert Gap(at=at(5)).to_payload() == {"covered": False, "gap_at": "2026-03-10T05:00:00+00:00"}

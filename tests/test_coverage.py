from movemutant.coverage import Coverage, merge_spans_after_removing_whitespaces
from movemutant.operators.common import Loc, Span


def _coverage_with(spans):
    return Coverage({"m::f": list(spans)})


def test_function_without_entry_is_covered():
    coverage = Coverage()
    assert coverage.check_location("m::f", Loc(0, Span(3, 5))) is True


def test_location_inside_uncovered_span_is_not_covered():
    coverage = _coverage_with([Span(10, 20)])
    assert coverage.check_location("m::f", Loc(0, Span(12, 15))) is False
    assert coverage.check_location("m::f", Loc(0, Span(10, 20))) is False


def test_location_before_uncovered_span_is_covered():
    coverage = _coverage_with([Span(10, 20)])
    assert coverage.check_location("m::f", Loc(0, Span(5, 8))) is True


def test_location_after_uncovered_span_is_covered():
    coverage = _coverage_with([Span(10, 20)])
    assert coverage.check_location("m::f", Loc(0, Span(20, 22))) is True


def test_location_reaching_beyond_uncovered_span_is_covered():
    coverage = _coverage_with([Span(10, 20)])
    assert coverage.check_location("m::f", Loc(0, Span(15, 25))) is True


def test_later_uncovered_span_is_found():
    coverage = _coverage_with([Span(0, 4), Span(10, 20)])
    assert coverage.check_location("m::f", Loc(0, Span(11, 12))) is False
    assert coverage.check_location("other::g", Loc(0, Span(11, 12))) is True


def test_merge_empty():
    assert merge_spans_after_removing_whitespaces([], "abc") == []


def test_merge_single_span_unchanged():
    assert merge_spans_after_removing_whitespaces([Span(0, 3)], "abc") == [Span(0, 3)]


def test_merge_spans_separated_by_spaces():
    first, second = Span(0, 3), Span(5, 8)
    result = merge_spans_after_removing_whitespaces([first, second], "abc  def")
    assert result == [first.merge(second)]


def test_spans_separated_by_other_characters_stay_apart():
    spans = [Span(0, 3), Span(5, 8)]
    assert merge_spans_after_removing_whitespaces(spans, "abc;xdef") == spans


def test_spans_separated_by_tabs_stay_apart():
    spans = [Span(0, 3), Span(5, 8)]
    assert merge_spans_after_removing_whitespaces(spans, "abc\t\tdef") == spans


def test_out_of_bound_span_drops_following_span():
    result = merge_spans_after_removing_whitespaces([Span(0, 100), Span(101, 102)], "abc")
    assert result == [Span(0, 100)]


def test_add_uncovered_spans_merges_and_checks():
    coverage = Coverage()
    coverage.add_uncovered_spans("m::f", [Span(5, 8), Span(0, 3)], "abc  def")
    assert coverage.all_uncovered_spans["m::f"] == [Span(0, 3).merge(Span(5, 8))]
    assert coverage.check_location("m::f", Loc(0, Span(2, 6))) is False


def test_add_no_spans_keeps_full_coverage():
    coverage = Coverage()
    coverage.add_uncovered_spans("m::f", [], "abc")
    assert "m::f" not in coverage.all_uncovered_spans
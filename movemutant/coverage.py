"""Unit test coverage data used to mutate only covered code."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable

from movemutant.operators.common import Loc, Span

log = logging.getLogger(__name__)


def merge_spans_after_removing_whitespaces(
    spans: Iterable[Span], source_code: str
) -> list[Span]:
    """Merge consecutive spans separated only by spaces in ``source_code``.

    A span whose end lies beyond the source is reported and the following
    span is dropped.
    """
    remaining = list(spans)
    if not remaining:
        return []

    file_len = len(source_code)
    new_spans: list[Span] = []
    curr = remaining[0]

    for span in remaining[1:]:
        curr_end = curr.end
        if curr_end > file_len:
            log.warning(
                "coverage report contains out of bound index %r (file length: %d)",
                curr,
                file_len,
            )
            continue

        merged = False
        for char in source_code[curr_end:]:
            if char != " ":
                break
            curr_end += 1
            if curr_end == span.start:
                curr = curr.merge(span)
                merged = True
                break
        if merged:
            continue

        new_spans.append(curr)
        curr = span

    new_spans.append(curr)
    return new_spans


@dataclass
class Coverage:
    """Uncovered spans keyed by qualified function name (e.g. ``vector::append``)."""

    all_uncovered_spans: dict[str, list[Span]] = field(default_factory=dict)

    def add_uncovered_spans(
        self, associated_fn_name: str, spans: Iterable[Span], source_code: str
    ) -> None:
        """Record the uncovered spans of a function, merging those split by spaces."""
        merged = merge_spans_after_removing_whitespaces(sorted(spans), source_code)
        if merged:
            self.all_uncovered_spans[associated_fn_name] = merged

    def check_location(self, associated_fn_name: str, loc: Loc) -> bool:
        """Whether ``loc`` inside the named function is covered by unit tests."""
        span = loc.span
        spans = self.all_uncovered_spans.get(associated_fn_name)
        if spans is None:
            log.debug("location has coverage since %s has full coverage", associated_fn_name)
            return True

        for uncovered in spans:
            if span.start >= uncovered.end:
                continue
            if uncovered.start > span.start:
                break
            if uncovered.end < span.end:
                break
            log.debug("%s has no coverage for the given location", associated_fn_name)
            return False

        log.debug("%s has coverage for the given location", associated_fn_name)
        return True
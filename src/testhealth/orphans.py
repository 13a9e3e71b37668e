"""
testhealth.orphans - Find records the sunburst builder will drop.

The builder silently skips any record whose parent chain does not reach a
team. This module reports those records so callers can surface them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List

from testhealth.models import TestResultData


@dataclass(frozen=True)
class OrphanRecord:
    """
    A record that is unreachable from the root.

    Attributes:
        collection: Name of the record's collection (e.g., "testSuites")
        record_id: The record's id
        parent_field: Name of the parent reference field (e.g., "applicationId")
        parent_id: The parent id the record references
        missing_parent: True if the parent record does not exist; False if
            the parent exists but is itself unreachable
    """

    collection: str
    record_id: str
    parent_field: str
    parent_id: str
    missing_parent: bool

    def describe(self) -> str:
        reason = "missing" if self.missing_parent else "unreachable"
        return (
            f"{self.collection} {self.record_id}: "
            f"{self.parent_field}={self.parent_id} ({reason})"
        )


def _check_level(
    collection: str,
    parent_field: str,
    records: Iterable[tuple[str, str]],
    existing_parents: set[str],
    reachable_parents: set[str],
    orphans: List[OrphanRecord],
) -> set[str]:
    """Classify one level; return the ids reachable from the root."""
    reachable: set[str] = set()
    for record_id, parent_id in records:
        if parent_id in reachable_parents:
            reachable.add(record_id)
            continue
        orphans.append(
            OrphanRecord(
                collection=collection,
                record_id=record_id,
                parent_field=parent_field,
                parent_id=parent_id,
                missing_parent=parent_id not in existing_parents,
            )
        )
    return reachable


def find_orphans(data: TestResultData) -> List[OrphanRecord]:
    """
    Find every record whose parent chain does not resolve to a team.

    Records are reported level by level (applications first), each level
    in input order.

    Args:
        data: Snapshot bundle

    Returns:
        List of OrphanRecord, empty when every record is reachable
    """
    orphans: List[OrphanRecord] = []

    team_ids = {t.id for t in data.teams}
    app_ids = _check_level(
        "applications",
        "teamId",
        ((a.id, a.team_id) for a in data.applications),
        team_ids,
        team_ids,
        orphans,
    )
    suite_ids = _check_level(
        "testSuites",
        "applicationId",
        ((s.id, s.application_id) for s in data.test_suites),
        {a.id for a in data.applications},
        app_ids,
        orphans,
    )
    execution_ids = _check_level(
        "testExecutions",
        "testSuiteId",
        ((e.id, e.test_suite_id) for e in data.test_executions),
        {s.id for s in data.test_suites},
        suite_ids,
        orphans,
    )
    case_ids = _check_level(
        "testCases",
        "testExecutionId",
        ((c.id, c.test_execution_id) for c in data.test_cases),
        {e.id for e in data.test_executions},
        execution_ids,
        orphans,
    )
    _check_level(
        "testResults",
        "testCaseId",
        ((r.id, r.test_case_id) for r in data.test_results),
        {c.id for c in data.test_cases},
        case_ids,
        orphans,
    )
    return orphans


def count_reachable_results(data: TestResultData) -> int:
    """Count test results whose full parent chain resolves to a team."""
    orphaned = {
        o.record_id for o in find_orphans(data) if o.collection == "testResults"
    }
    return sum(1 for r in data.test_results if r.id not in orphaned)


__all__ = ["OrphanRecord", "count_reachable_results", "find_orphans"]

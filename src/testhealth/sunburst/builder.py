"""Sunburst tree builder.

Reassembles the six flat record collections of a TestResultData snapshot
into a single rooted SunburstNode tree:

    root -> team -> application -> testSuite -> testExecution
         -> testCase -> testResult

Children keep their input order. A record whose parent id matches no
parent record is never attached and is dropped without error; use
``testhealth.orphans`` to find such records beforehand.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Any, Sequence

from testhealth.models import (
    Application,
    Team,
    TestCase,
    TestExecution,
    TestResult,
    TestResultData,
    TestSuite,
)
from testhealth.sunburst.index import ChildIndex, group_by_parent
from testhealth.sunburst.node import NodeType, SunburstNode

DEFAULT_ROOT_NAME = "Test Results"

EXECUTION_NAME_PREFIX = "Execution "
EXECUTION_ID_CHARS = 8


def _metadata(**fields: Any) -> dict[str, Any]:
    """Build a metadata bag, omitting unset fields.

    Lists and dicts are deep-copied so nodes never share containers
    with the source records.
    """
    return {
        key: copy.deepcopy(value) if isinstance(value, (list, dict)) else value
        for key, value in fields.items()
        if value is not None
    }


def _node(
    name: str,
    node_type: NodeType,
    children: Sequence[SunburstNode],
    **kwargs: Any,
) -> SunburstNode:
    """Create a leaf when there are no children, else a branch."""
    if not children:
        return SunburstNode.leaf(name, node_type, **kwargs)
    return SunburstNode.branch(name, node_type, children, **kwargs)


def execution_name(execution: TestExecution) -> str:
    """Synthesize a display name for an execution from its id."""
    return f"{EXECUTION_NAME_PREFIX}{execution.id[:EXECUTION_ID_CHARS]}"


@dataclass
class _Indexes:
    apps_by_team: ChildIndex[str, Application]
    suites_by_app: ChildIndex[str, TestSuite]
    executions_by_suite: ChildIndex[str, TestExecution]
    cases_by_execution: ChildIndex[str, TestCase]
    results_by_case: ChildIndex[str, TestResult]

    @classmethod
    def from_data(cls, data: TestResultData) -> _Indexes:
        return cls(
            apps_by_team=group_by_parent(data.applications, lambda a: a.team_id),
            suites_by_app=group_by_parent(data.test_suites, lambda s: s.application_id),
            executions_by_suite=group_by_parent(data.test_executions, lambda e: e.test_suite_id),
            cases_by_execution=group_by_parent(data.test_cases, lambda c: c.test_execution_id),
            results_by_case=group_by_parent(data.test_results, lambda r: r.test_case_id),
        )


class SunburstBuilder:
    """Builds a SunburstNode tree from a TestResultData snapshot.

    Each builder call works on freshly built indexes; nothing is cached
    between calls.

    Example:
        builder = SunburstBuilder(root_name="Nightly")
        root = builder.build(data)
    """

    def __init__(self, root_name: str = DEFAULT_ROOT_NAME) -> None:
        self.root_name = root_name

    def build(self, data: TestResultData) -> SunburstNode:
        """Build the tree.

        The root is always a branch, even with no teams.

        Args:
            data: Snapshot bundle of the six record collections.

        Returns:
            Root SunburstNode.
        """
        indexes = _Indexes.from_data(data)
        teams = [self._team_node(team, indexes) for team in data.teams]
        return SunburstNode.branch(self.root_name, NodeType.ROOT, teams)

    def _team_node(self, team: Team, indexes: _Indexes) -> SunburstNode:
        children = [
            self._application_node(app, indexes)
            for app in indexes.apps_by_team.children_of(team.id)
        ]
        return _node(
            team.name,
            NodeType.TEAM,
            children,
            id=team.id,
            metadata=_metadata(
                description=team.description,
                createdAt=team.created_at,
                tags=team.tags,
            ),
        )

    def _application_node(self, app: Application, indexes: _Indexes) -> SunburstNode:
        children = [
            self._suite_node(suite, indexes)
            for suite in indexes.suites_by_app.children_of(app.id)
        ]
        return _node(
            app.name,
            NodeType.APPLICATION,
            children,
            id=app.id,
            metadata=_metadata(
                description=app.description,
                createdAt=app.created_at,
                tags=app.tags,
                version=app.version,
                repositoryUrl=app.repository_url,
            ),
        )

    def _suite_node(self, suite: TestSuite, indexes: _Indexes) -> SunburstNode:
        children = [
            self._execution_node(execution, indexes)
            for execution in indexes.executions_by_suite.children_of(suite.id)
        ]
        return _node(
            suite.name,
            NodeType.TEST_SUITE,
            children,
            id=suite.id,
            metadata=_metadata(
                description=suite.description,
                createdAt=suite.created_at,
                tags=suite.tags,
                sourceLocation=suite.source_location,
            ),
        )

    def _execution_node(self, execution: TestExecution, indexes: _Indexes) -> SunburstNode:
        children = [
            self._case_node(case, indexes)
            for case in indexes.cases_by_execution.children_of(execution.id)
        ]
        return _node(
            execution_name(execution),
            NodeType.TEST_EXECUTION,
            children,
            id=execution.id,
            status=execution.status,
            metadata=_metadata(
                createdAt=execution.created_at,
                tags=execution.tags,
                startedAt=execution.started_at,
                completedAt=execution.completed_at,
                environment=execution.environment,
                triggeredBy=execution.triggered_by,
                buildId=execution.build_id,
            ),
        )

    def _case_node(self, case: TestCase, indexes: _Indexes) -> SunburstNode:
        children = [
            self._result_node(result)
            for result in indexes.results_by_case.children_of(case.id)
        ]
        return _node(
            case.name,
            NodeType.TEST_CASE,
            children,
            id=case.id,
            status=case.status,
            metadata=_metadata(
                description=case.description,
                createdAt=case.created_at,
                tags=case.tags,
                startedAt=case.started_at,
                completedAt=case.completed_at,
                durationMs=case.duration_ms,
            ),
        )

    def _result_node(self, result: TestResult) -> SunburstNode:
        # Results are the bottom of the hierarchy.
        error_details = result.error_details.to_dict() if result.error_details else None
        return SunburstNode.leaf(
            result.name,
            NodeType.TEST_RESULT,
            id=result.id,
            status=result.status,
            metadata=_metadata(
                description=result.description,
                createdAt=result.created_at,
                tags=result.tags,
                expected=result.expected,
                actual=result.actual,
                priority=result.priority,
                durationMs=result.duration_ms,
                errorDetails=error_details,
            ),
        )


def build_sunburst(data: TestResultData, root_name: str = DEFAULT_ROOT_NAME) -> SunburstNode:
    """Build the sunburst tree for a snapshot.

    Args:
        data: Snapshot bundle of the six record collections.
        root_name: Display name of the root node.

    Returns:
        Root SunburstNode.
    """
    return SunburstBuilder(root_name=root_name).build(data)


__all__ = [
    "DEFAULT_ROOT_NAME",
    "SunburstBuilder",
    "build_sunburst",
    "execution_name",
]

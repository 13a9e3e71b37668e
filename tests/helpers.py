"""Test helpers for building snapshot bundles.

Factories return model records with sensible defaults so tests only spell
out the fields they care about.
"""

from __future__ import annotations

from testhealth.models import (
    Application,
    Team,
    TestCase,
    TestExecution,
    TestResult,
    TestResultData,
    TestSuite,
)

CREATED_AT = "2025-01-15T10:00:00Z"


# === Record Factories ===


def make_team(team_id: str = "team-1", name: str = "", **kwargs) -> Team:
    return Team(id=team_id, name=name or team_id, created_at=CREATED_AT, **kwargs)


def make_app(
    app_id: str = "app-1", team_id: str = "team-1", name: str = "", **kwargs
) -> Application:
    return Application(
        id=app_id, team_id=team_id, name=name or app_id, created_at=CREATED_AT, **kwargs
    )


def make_suite(
    suite_id: str = "suite-1", app_id: str = "app-1", name: str = "", **kwargs
) -> TestSuite:
    return TestSuite(
        id=suite_id,
        application_id=app_id,
        name=name or suite_id,
        created_at=CREATED_AT,
        **kwargs,
    )


def make_execution(
    execution_id: str = "exec-0001-abcd",
    suite_id: str = "suite-1",
    status: str = "completed",
    **kwargs,
) -> TestExecution:
    return TestExecution(
        id=execution_id,
        test_suite_id=suite_id,
        status=status,
        created_at=CREATED_AT,
        **kwargs,
    )


def make_case(
    case_id: str = "case-1",
    execution_id: str = "exec-0001-abcd",
    status: str = "passed",
    name: str = "",
    **kwargs,
) -> TestCase:
    return TestCase(
        id=case_id,
        test_execution_id=execution_id,
        name=name or case_id,
        status=status,
        created_at=CREATED_AT,
        **kwargs,
    )


def make_result(
    result_id: str,
    case_id: str = "case-1",
    status: str = "passed",
    name: str = "",
    **kwargs,
) -> TestResult:
    return TestResult(
        id=result_id,
        test_case_id=case_id,
        name=name or result_id,
        status=status,
        created_at=CREATED_AT,
        **kwargs,
    )


# === Snapshot Factories ===


def single_chain(*result_statuses: str) -> TestResultData:
    """One team → app → suite → execution → case with the given results."""
    return TestResultData(
        teams=[make_team()],
        applications=[make_app()],
        test_suites=[make_suite()],
        test_executions=[make_execution()],
        test_cases=[make_case()],
        test_results=[
            make_result(f"result-{i}", status=status)
            for i, status in enumerate(result_statuses, start=1)
        ],
    )


def snapshot_dict() -> dict:
    """A JSON-form snapshot with one full chain and one orphaned suite."""
    return {
        "teams": [
            {
                "id": "team-1",
                "name": "Platform",
                "description": "Platform team",
                "createdAt": CREATED_AT,
                "tags": ["core"],
            }
        ],
        "applications": [
            {
                "id": "app-1",
                "teamId": "team-1",
                "name": "Checkout",
                "version": "2.1.0",
                "repositoryUrl": "https://git.example.com/checkout",
                "createdAt": CREATED_AT,
            }
        ],
        "testSuites": [
            {
                "id": "suite-1",
                "applicationId": "app-1",
                "name": "API",
                "sourceLocation": "tests/api",
                "createdAt": CREATED_AT,
            },
            {
                "id": "suite-orphan",
                "applicationId": "app-missing",
                "name": "Lost",
                "createdAt": CREATED_AT,
            },
        ],
        "testExecutions": [
            {
                "id": "0123456789abcdef",
                "testSuiteId": "suite-1",
                "status": "completed",
                "startedAt": CREATED_AT,
                "environment": {"os": "linux"},
                "buildId": "build-42",
                "createdAt": CREATED_AT,
            }
        ],
        "testCases": [
            {
                "id": "case-1",
                "testExecutionId": "0123456789abcdef",
                "name": "login",
                "status": "failed",
                "startedAt": CREATED_AT,
                "durationMs": 120,
                "createdAt": CREATED_AT,
            }
        ],
        "testResults": [
            {
                "id": "result-1",
                "testCaseId": "case-1",
                "name": "status code",
                "status": "passed",
                "priority": "high",
                "createdAt": CREATED_AT,
            },
            {
                "id": "result-2",
                "testCaseId": "case-1",
                "name": "body",
                "status": "failed",
                "expected": "ok",
                "actual": "error",
                "errorDetails": {"message": "mismatch", "stackTrace": "at line 3"},
                "createdAt": CREATED_AT,
            },
        ],
    }

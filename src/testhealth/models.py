"""
testhealth.models - Test result record models.

Provides dataclasses for the six flat record kinds (team, application,
test suite, test execution, test case, test result), the status enums
naming their known values, and the TestResultData snapshot bundle.

Records are parsed from JSON-like dicts using the camelCase field names
of the ingest format (``teamId``, ``createdAt``, ...).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, TypeVar


class SnapshotError(ValueError):
    """Raised when a record does not match the declared record shape."""


class ExecutionStatus(Enum):
    """Status of a test execution."""

    PENDING = "pending"
    RUNNING = "running"
    COMPLETED = "completed"
    ABORTED = "aborted"
    FAILED = "failed"


class CaseStatus(Enum):
    """Status of a test case."""

    PASSED = "passed"
    FAILED = "failed"
    SKIPPED = "skipped"
    BLOCKED = "blocked"
    NOT_RUN = "not_run"


class ResultStatus(Enum):
    """Status of a single test result."""

    PASSED = "passed"
    FAILED = "failed"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class ResultPriority(Enum):
    """Priority level for a test result."""

    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


def _require_id(data: dict[str, Any], where: str) -> str:
    record_id = data.get("id")
    if not isinstance(record_id, str) or not record_id:
        raise SnapshotError(f"{where}: record is missing a string 'id'")
    return record_id


def _require_str(data: dict[str, Any], key: str, where: str) -> str:
    value = data.get(key)
    if not isinstance(value, str):
        raise SnapshotError(f"{where}: record is missing a string '{key}'")
    return value


@dataclass
class ErrorDetails:
    """
    Error details attached to a failed test result.

    Attributes:
        message: Error message
        stack_trace: Stack trace of the error
        screenshot_url: URL to a screenshot taken at the time of failure
        logs_url: URL to logs related to the failure
        console_output: Console output captured during the test
        network_requests: Network requests made during the test (JSON-like)
    """

    message: str
    stack_trace: str | None = None
    screenshot_url: str | None = None
    logs_url: str | None = None
    console_output: str | None = None
    network_requests: list[Any] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any], where: str = "errorDetails") -> ErrorDetails:
        return cls(
            message=_require_str(data, "message", where),
            stack_trace=data.get("stackTrace"),
            screenshot_url=data.get("screenshotUrl"),
            logs_url=data.get("logsUrl"),
            console_output=data.get("consoleOutput"),
            network_requests=list(data.get("networkRequests") or []),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the camelCase JSON form, omitting unset fields."""
        result: dict[str, Any] = {"message": self.message}
        if self.stack_trace is not None:
            result["stackTrace"] = self.stack_trace
        if self.screenshot_url is not None:
            result["screenshotUrl"] = self.screenshot_url
        if self.logs_url is not None:
            result["logsUrl"] = self.logs_url
        if self.console_output is not None:
            result["consoleOutput"] = self.console_output
        if self.network_requests:
            result["networkRequests"] = list(self.network_requests)
        return result


@dataclass
class Team:
    """A team that owns one or more applications."""

    id: str
    name: str
    created_at: str | None = None
    description: str | None = None
    tags: list[str] | None = None
    metadata: dict[str, Any] | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any], where: str = "team") -> Team:
        return cls(
            id=_require_id(data, where),
            name=_require_str(data, "name", where),
            created_at=data.get("createdAt"),
            description=data.get("description"),
            tags=data.get("tags"),
            metadata=data.get("metadata"),
        )


@dataclass
class Application:
    """An application owned by a team."""

    id: str
    team_id: str
    name: str
    created_at: str | None = None
    description: str | None = None
    version: str | None = None
    repository_url: str | None = None
    tags: list[str] | None = None
    metadata: dict[str, Any] | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any], where: str = "application") -> Application:
        return cls(
            id=_require_id(data, where),
            team_id=_require_str(data, "teamId", where),
            name=_require_str(data, "name", where),
            created_at=data.get("createdAt"),
            description=data.get("description"),
            version=data.get("version"),
            repository_url=data.get("repositoryUrl"),
            tags=data.get("tags"),
            metadata=data.get("metadata"),
        )


@dataclass
class TestSuite:
    """A test suite belonging to an application."""

    __test__ = False

    id: str
    application_id: str
    name: str
    created_at: str | None = None
    description: str | None = None
    source_location: str | None = None
    tags: list[str] | None = None
    metadata: dict[str, Any] | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any], where: str = "testSuite") -> TestSuite:
        return cls(
            id=_require_id(data, where),
            application_id=_require_str(data, "applicationId", where),
            name=_require_str(data, "name", where),
            created_at=data.get("createdAt"),
            description=data.get("description"),
            source_location=data.get("sourceLocation"),
            tags=data.get("tags"),
            metadata=data.get("metadata"),
        )


@dataclass
class TestExecution:
    """
    A single execution of a test suite.

    Executions have no name of their own; display code synthesizes one
    from the id.
    """

    __test__ = False

    id: str
    test_suite_id: str
    status: str
    created_at: str | None = None
    started_at: str | None = None
    completed_at: str | None = None
    environment: dict[str, str] | None = None
    configuration: dict[str, Any] | None = None
    triggered_by: str | None = None
    build_id: str | None = None
    tags: list[str] | None = None
    metadata: dict[str, Any] | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any], where: str = "testExecution") -> TestExecution:
        return cls(
            id=_require_id(data, where),
            test_suite_id=_require_str(data, "testSuiteId", where),
            status=_require_str(data, "status", where),
            created_at=data.get("createdAt"),
            started_at=data.get("startedAt"),
            completed_at=data.get("completedAt"),
            environment=data.get("environment"),
            configuration=data.get("configuration"),
            triggered_by=data.get("triggeredBy"),
            build_id=data.get("buildId"),
            tags=data.get("tags"),
            metadata=data.get("metadata"),
        )


@dataclass
class TestCase:
    """A single test case within a test execution."""

    __test__ = False

    id: str
    test_execution_id: str
    name: str
    status: str
    created_at: str | None = None
    description: str | None = None
    started_at: str | None = None
    completed_at: str | None = None
    duration_ms: int | float | None = None
    tags: list[str] | None = None
    metadata: dict[str, Any] | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any], where: str = "testCase") -> TestCase:
        return cls(
            id=_require_id(data, where),
            test_execution_id=_require_str(data, "testExecutionId", where),
            name=_require_str(data, "name", where),
            status=_require_str(data, "status", where),
            created_at=data.get("createdAt"),
            description=data.get("description"),
            started_at=data.get("startedAt"),
            completed_at=data.get("completedAt"),
            duration_ms=data.get("durationMs"),
            tags=data.get("tags"),
            metadata=data.get("metadata"),
        )


@dataclass
class TestResult:
    """A single test step or assertion result within a test case."""

    __test__ = False

    id: str
    test_case_id: str
    name: str
    status: str
    created_at: str | None = None
    description: str | None = None
    priority: str | None = None
    expected: str | None = None
    actual: str | None = None
    error_details: ErrorDetails | None = None
    duration_ms: int | float | None = None
    tags: list[str] | None = None
    metadata: dict[str, Any] | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any], where: str = "testResult") -> TestResult:
        error_data = data.get("errorDetails")
        error_details = None
        if error_data is not None:
            if not isinstance(error_data, dict):
                raise SnapshotError(f"{where}: 'errorDetails' must be an object")
            error_details = ErrorDetails.from_dict(error_data, f"{where}.errorDetails")

        return cls(
            id=_require_id(data, where),
            test_case_id=_require_str(data, "testCaseId", where),
            name=_require_str(data, "name", where),
            status=_require_str(data, "status", where),
            created_at=data.get("createdAt"),
            description=data.get("description"),
            priority=data.get("priority"),
            expected=data.get("expected"),
            actual=data.get("actual"),
            error_details=error_details,
            duration_ms=data.get("durationMs"),
            tags=data.get("tags"),
            metadata=data.get("metadata"),
        )


RecordT = TypeVar("RecordT")


def _parse_collection(
    data: dict[str, Any],
    key: str,
    parse: Callable[[dict[str, Any], str], RecordT],
) -> list[RecordT]:
    raw = data.get(key)
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise SnapshotError(f"'{key}' must be a list, got {type(raw).__name__}")

    records = []
    for i, item in enumerate(raw):
        where = f"{key}[{i}]"
        if not isinstance(item, dict):
            raise SnapshotError(f"{where}: record must be an object")
        records.append(parse(item, where))
    return records


@dataclass
class TestResultData:
    """
    Snapshot bundle of all six record collections.

    Each collection keeps its input order; the sunburst builder relies on
    that order and never sorts.
    """

    __test__ = False

    teams: list[Team] = field(default_factory=list)
    applications: list[Application] = field(default_factory=list)
    test_suites: list[TestSuite] = field(default_factory=list)
    test_executions: list[TestExecution] = field(default_factory=list)
    test_cases: list[TestCase] = field(default_factory=list)
    test_results: list[TestResult] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TestResultData:
        """
        Parse a snapshot from its JSON-like form.

        Args:
            data: Dict with optional camelCase keys teams, applications,
                  testSuites, testExecutions, testCases, testResults

        Returns:
            TestResultData with every collection parsed

        Raises:
            SnapshotError: If a collection or record is malformed
        """
        if not isinstance(data, dict):
            raise SnapshotError("snapshot must be a JSON object")

        return cls(
            teams=_parse_collection(data, "teams", Team.from_dict),
            applications=_parse_collection(data, "applications", Application.from_dict),
            test_suites=_parse_collection(data, "testSuites", TestSuite.from_dict),
            test_executions=_parse_collection(data, "testExecutions", TestExecution.from_dict),
            test_cases=_parse_collection(data, "testCases", TestCase.from_dict),
            test_results=_parse_collection(data, "testResults", TestResult.from_dict),
        )

    def record_count(self) -> int:
        """Return the total number of records across all collections."""
        return (
            len(self.teams)
            + len(self.applications)
            + len(self.test_suites)
            + len(self.test_executions)
            + len(self.test_cases)
            + len(self.test_results)
        )


__all__ = [
    "SnapshotError",
    "ExecutionStatus",
    "CaseStatus",
    "ResultStatus",
    "ResultPriority",
    "ErrorDetails",
    "Team",
    "Application",
    "TestSuite",
    "TestExecution",
    "TestCase",
    "TestResult",
    "TestResultData",
]

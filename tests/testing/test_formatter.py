"""Tests for testing/formatter.py module."""

from __future__ import annotations

import json
from typing import Any

import pytest

from phpunit_mcp.core.errors import ErrorCode, TestError
from phpunit_mcp.testing.formatter import Formatter
from phpunit_mcp.testing.models import IssueRecord, TestResult
from phpunit_mcp.testing.parsers import parse_junit_xml

FAILURE = IssueRecord(
    class_name="App\\Tests\\UserTest",
    method="testCreate",
    file="/path/to/UserTest.php",
    line=45,
    kind="AssertionFailed",
    message="Expected 200 got 404",
)
ERROR = IssueRecord(
    class_name="App\\Tests\\OrderTest",
    method="testFind",
    file="/path/to/OrderTest.php",
    line=8,
    kind="RuntimeException",
    message="Connection refused",
)


def _render(result: TestResult, mode: str) -> dict[str, Any]:
    return json.loads(Formatter().format(result, mode))


@pytest.fixture
def successful() -> TestResult:
    return TestResult(tests=5, assertions=9, time=0.5)


@pytest.fixture
def failing() -> TestResult:
    return TestResult(
        tests=10,
        failures=1,
        errors=1,
        warnings=2,
        skipped=1,
        time=5.5678,
        failure_records=(FAILURE,),
        error_records=(ERROR,),
    )


class TestModes:
    """Tests for mode dispatch."""

    def test_unknown_mode_raises(self, successful: TestResult) -> None:
        with pytest.raises(TestError) as exc_info:
            Formatter().format(successful, "invalid")

        assert exc_info.value.code == ErrorCode.TEST_UNSUPPORTED_MODE
        assert exc_info.value.message == "Unknown format mode: invalid"

    def test_unknown_mode_raises_for_any_result(self, failing: TestResult) -> None:
        with pytest.raises(TestError, match="Unknown format mode: toon"):
            Formatter().format(failing, "toon")

    def test_default_mode_is_default(self, failing: TestResult) -> None:
        assert Formatter().format(failing) == Formatter().format(failing, "default")

    def test_uses_injected_encoder(self, successful: TestResult) -> None:
        seen: list[Any] = []

        def encoder(data: Any) -> str:
            seen.append(data)
            return "encoded"

        assert Formatter(encoder).format(successful, "summary") == "encoded"
        assert seen[0]["status"] == "OK"

    def test_default_encoder_is_compact(self, successful: TestResult) -> None:
        output = Formatter().format(successful, "summary")
        assert " " not in output


class TestDefaultMode:
    """Tests for the default view."""

    def test_successful_result(self, successful: TestResult) -> None:
        data = _render(successful, "default")

        assert data == {
            "summary": {
                "tests": 5,
                "passed": 5,
                "failed": 0,
                "errors": 0,
                "warnings": 0,
                "skipped": 0,
                "time": "0.5s",
            },
            "status": "OK",
        }

    def test_failures_and_errors_shortened(self, failing: TestResult) -> None:
        data = _render(failing, "default")

        assert data["status"] == "FAILED"
        assert data["summary"]["passed"] == 7
        assert data["summary"]["time"] == "5.568s"
        assert data["failures"] == [
            {
                "class": "UserTest",
                "method": "testCreate",
                "message": "Expected 200 got 404",
                "file": "UserTest.php",
                "line": 45,
            }
        ]
        assert data["errors"] == [
            {
                "class": "OrderTest",
                "method": "testFind",
                "exception": "Connection refused",
                "file": "OrderTest.php",
                "line": 8,
            }
        ]

    def test_omits_empty_lists(self) -> None:
        data = _render(TestResult(tests=1, failures=1, failure_records=(FAILURE,)), "default")

        assert "failures" in data
        assert "errors" not in data


class TestSummaryMode:
    """Tests for the summary view."""

    def test_flat_counts(self, failing: TestResult) -> None:
        assert _render(failing, "summary") == {
            "tests": 10,
            "passed": 7,
            "failed": 1,
            "errors": 1,
            "time": "5.568s",
            "status": "FAILED",
        }

    def test_never_contains_failure_details(self, failing: TestResult) -> None:
        output = Formatter().format(failing, "summary")

        assert "failures" not in output
        assert "Expected 200" not in output


class TestDetailedMode:
    """Tests for the detailed view."""

    def test_full_names_and_paths(self, failing: TestResult) -> None:
        data = _render(failing, "detailed")

        assert set(data["summary"]) == {"tests", "passed", "failed", "errors", "time"}
        assert data["failures"][0]["class"] == "App\\Tests\\UserTest"
        assert data["failures"][0]["file"] == "/path/to/UserTest.php"
        assert data["errors"][0]["exception"] == "Connection refused"


class TestGroupedModes:
    """Tests for by-file and by-class views."""

    def test_by_file(self, failing: TestResult) -> None:
        data = _render(failing, "by-file")

        assert data["status"] == "FAILED"
        assert list(data["by_file"]) == ["OrderTest.php", "UserTest.php"]
        assert data["by_file"]["UserTest.php"] == [FAILURE.to_dict()]
        assert data["by_file"]["OrderTest.php"] == [ERROR.to_dict()]

    def test_by_class(self, failing: TestResult) -> None:
        data = _render(failing, "by-class")

        assert list(data["by_class"]) == ["OrderTest", "UserTest"]
        assert data["by_class"]["UserTest"][0]["class"] == "App\\Tests\\UserTest"
        assert data["by_class"]["UserTest"][0]["type"] == "AssertionFailed"

    def test_grouped_views_empty_when_successful(self, successful: TestResult) -> None:
        assert _render(successful, "by-file")["by_file"] == {}
        assert _render(successful, "by-class")["by_class"] == {}


class TestEndToEnd:
    """Parse then format a realistic report."""

    def test_by_file_from_report(self, junit_with_failures: str) -> None:
        data = _render(parse_junit_xml(junit_with_failures), "by-file")

        assert data["summary"] == {
            "tests": 4,
            "passed": 1,
            "failed": 1,
            "errors": 1,
            "time": "1.235s",
        }
        assert list(data["by_file"]) == ["OrderTest.php", "UserTest.php"]
        assert data["by_file"]["UserTest.php"][0]["method"] == "testCreate"
        assert data["by_file"]["OrderTest.php"][0]["type"] == "RuntimeException"

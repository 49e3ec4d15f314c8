"""Unit tests for stage results."""

from stage_result import ErrorKind, StageResult


def test_success():
    result = StageResult.success([1, 2])

    assert result.ok
    assert result.error is None
    assert result.value == [1, 2]


def test_failure():
    result = StageResult.failure(ErrorKind.IO, "disk full", detail="OSError(28)")

    assert not result.ok
    assert result.value is None
    assert result.error.kind is ErrorKind.IO
    assert result.error.detail == "OSError(28)"
    assert str(result.error) == "IOError: disk full"

"""Shared fixtures for filtered report tests."""

import pytest

from tests.helpers import HEADER, make_workbook


@pytest.fixture
def report_rows():
    """Sheet rows with duplicated asset names."""
    return [
        HEADER,
        ["1", "h1", "x", "alice"],
        ["2", "h2", "y", "bob"],
        ["3", "h3", "x", "carol"],
        ["4", "h4", "z", "dave"],
    ]


@pytest.fixture
def report_file(tmp_path, report_rows):
    """Workbook holding the report sheet plus an unrelated sheet."""
    return make_workbook(tmp_path / "report.xlsx", {
        "Summary": [["total", "4"]],
        "work (2)": report_rows,
    })

"""
Pytest configuration and shared fixtures.
"""

import pytest
from typing import Dict, List

from refmatch.candidate import RefactoringCandidate
from refmatch.logger import StructuredLogger, reset_logger


@pytest.fixture(autouse=True)
def fresh_global_logger():
    """Each test starts without a cached global logger."""
    reset_logger()
    yield
    reset_logger()


@pytest.fixture
def quiet_logger() -> StructuredLogger:
    """Logger that writes nowhere but still tracks metrics."""
    return StructuredLogger(
        name="refmatch-test",
        level="DEBUG",
        enable_file=False,
        enable_console=False,
    )


@pytest.fixture
def deleted_methods() -> List[RefactoringCandidate]:
    """Methods removed from the old version of a class."""
    return [
        RefactoringCandidate("getTotal", "method", "int getTotal()", "return sum;", "Invoice"),
        RefactoringCandidate("printReport", "method", "void printReport()", "print(lines);", "Invoice"),
        RefactoringCandidate("rate", "field", "double rate", "", "Invoice"),
    ]


@pytest.fixture
def inserted_methods() -> List[RefactoringCandidate]:
    """Methods added in the new version."""
    return [
        RefactoringCandidate("computeTotal", "method", "int computeTotal()", "return sum;", "Invoice"),
        RefactoringCandidate("printReport", "method", "void printReport()", "print(lines);", "ReportWriter"),
        RefactoringCandidate("taxRate", "field", "double taxRate", "", "Invoice"),
    ]


@pytest.fixture
def score_table() -> Dict[tuple, float]:
    """Similarity by (deleted name, inserted name); missing entries score 0."""
    return {
        ("getTotal", "computeTotal"): 0.9,
        ("getTotal", "printReport"): 0.1,
        ("printReport", "computeTotal"): 0.2,
        ("printReport", "printReport"): 0.95,
        ("rate", "taxRate"): 0.7,
    }


@pytest.fixture
def table_similarity(score_table):
    """Similarity function backed by score_table."""
    def similarity(deleted, inserted):
        return score_table.get((deleted.name, inserted.name), 0.0)
    return similarity

# apps/domains/results/models/__init__.py

from .mock_test_result import MockTestResult, MockTestResultAnswer

__all__ = [
    "MockTestResult",
    "MockTestResultAnswer",
]

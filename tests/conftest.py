from __future__ import annotations

from typing import Any

import pytest

from ngqlspec.core.statement import StatementConfig


class RecordingExecutor:
    """Execution collaborator that records the queries it receives."""

    def __init__(self, result: Any = None) -> None:
        self.queries: list[str] = []
        self.result = result
        self.closed = False

    def execute(self, query: str) -> Any:
        self.queries.append(query)
        return self.result

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def executor() -> RecordingExecutor:
    return RecordingExecutor(result=["row"])


@pytest.fixture
def ngql_config() -> StatementConfig:
    return StatementConfig()


@pytest.fixture
def postgres_config() -> StatementConfig:
    return StatementConfig.for_dialect("postgres")

from unittest.mock import AsyncMock, MagicMock

import pytest

from depgraph.model import SemanticCycle, SemanticResult, SourceEntry


@pytest.fixture
def semantic_result() -> SemanticResult:
	return SemanticResult(
		circular_dependencies=[
			SemanticCycle(path=["src/a.ts", "src/b.ts", "src/a.ts"], reason="a and b depend on each other"),
		],
		refactoring_recommendations=["Extract shared types into their own module."],
	)


@pytest.fixture
def semantic_analyzer(semantic_result):
	analyzer = MagicMock()
	analyzer.analyze = AsyncMock(return_value=semantic_result)
	return analyzer


@pytest.fixture
def source_entries():
	return [
		SourceEntry(module="src/a.ts", path="/p/src/a.ts", content="import { b } from './b';\n"),
		SourceEntry(module="src/b.ts", path="/p/src/b.ts", content="import { a } from './a';\n"),
		SourceEntry(module="src/c.ts", path="/p/src/c.ts", error="Permission denied"),
	]


@pytest.fixture
def source_provider(source_entries):
	return MagicMock(return_value=source_entries)

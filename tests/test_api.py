import logging
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from api import create_app
from depgraph.config import Settings
from depgraph.exceptions import SemanticAnalysisError
from depgraph.orchestrator import AnalysisOrchestrator, OrchestratorState


@pytest.fixture
def settings():
	return Settings(warm_on_startup=False)


@pytest.fixture
def orchestrator(source_provider, semantic_analyzer):
	return AnalysisOrchestrator(source_provider, semantic_analyzer)


@pytest.fixture
def client(settings, orchestrator):
	with TestClient(create_app(settings, orchestrator)) as c:
		yield c


def test_get_analysis_runs_on_demand(client, source_provider):
	resp = client.get("/api/analysis")
	assert resp.status_code == 200
	body = resp.json()
	assert body["status"] == "success"
	assert body["data"]["heuristic_analysis"]["circular_dependencies"] == [
		{"path": ["src/a.ts", "src/b.ts", "src/a.ts"]}
	]
	assert body["data"]["llm_analysis"]["refactoring_recommendations"]

	again = client.get("/api/analysis")
	assert again.json()["data"]["timestamp"] == body["data"]["timestamp"]
	assert source_provider.call_count == 1


def test_refresh_runs_again(client, source_provider):
	client.get("/api/analysis")
	resp = client.post("/api/analysis/refresh")
	assert resp.status_code == 200
	assert resp.json()["message"] == "Analysis successfully refreshed."
	assert source_provider.call_count == 2


def test_failed_run_returns_error(client, semantic_analyzer):
	semantic_analyzer.analyze.side_effect = SemanticAnalysisError("LLM request failed: timeout")
	resp = client.get("/api/analysis")
	assert resp.status_code == 500
	body = resp.json()
	assert body["status"] == "error"
	assert body["message"] == "Analysis failed to run on demand."
	assert body["error"] == "LLM request failed: timeout"


def test_failed_refresh_keeps_previous_report(client, orchestrator, semantic_analyzer):
	first = client.get("/api/analysis").json()["data"]
	semantic_analyzer.analyze.side_effect = SemanticAnalysisError("boom")

	resp = client.post("/api/analysis/refresh")
	assert resp.status_code == 500
	assert resp.json()["message"] == "Failed to refresh analysis."

	assert client.get("/api/analysis").json()["data"] == first


def test_pending_while_running(settings):
	orch = MagicMock()
	orch.cached = None
	orch.is_running = True
	orch.state = OrchestratorState.RUNNING
	with TestClient(create_app(settings, orch)) as c:
		resp = c.get("/api/analysis")
		assert resp.status_code == 503
		assert resp.json()["status"] == "pending"
		assert c.get("/health").json() == {"status": "ok", "state": "running"}


def test_health(client):
	assert client.get("/health").json() == {"status": "ok", "state": "idle-empty"}
	client.get("/api/analysis")
	assert client.get("/health").json()["state"] == "idle-cached"


def test_create_app_configures_logging(orchestrator):
	depgraph_logger = logging.getLogger("depgraph")
	previous = depgraph_logger.level
	try:
		create_app(Settings(warm_on_startup=False, log_level="DEBUG"), orchestrator)
		assert depgraph_logger.level == logging.DEBUG
		assert logging.getLogger("depgraph.orchestrator").isEnabledFor(logging.INFO)
	finally:
		depgraph_logger.setLevel(previous)

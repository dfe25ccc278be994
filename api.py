from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from depgraph.config import Settings, get_settings
from depgraph.exceptions import DepGraphError
from depgraph.log import setup_logging
from depgraph.orchestrator import AnalysisOrchestrator, create_orchestrator


logger = logging.getLogger("depgraph.api")


def _error_response(message: str, error: Exception) -> JSONResponse:
	detail = error.message if isinstance(error, DepGraphError) else str(error)
	return JSONResponse(
		status_code=500,
		content={"status": "error", "message": message, "error": detail},
	)


async def _warm_up(orchestrator: AnalysisOrchestrator) -> None:
	try:
		await orchestrator.get_or_compute()
	except DepGraphError as e:
		logger.error("Startup analysis failed: %s", e)


def create_app(
	settings: Optional[Settings] = None,
	orchestrator: Optional[AnalysisOrchestrator] = None,
) -> FastAPI:
	settings = settings or get_settings()
	setup_logging("depgraph", settings.log_level)
	orchestrator = orchestrator or create_orchestrator(settings)

	@asynccontextmanager
	async def lifespan(app: FastAPI):
		logger.info("Dependency Analyzer API ready: GET /api/analysis, POST /api/analysis/refresh")
		warm_task = None
		if settings.warm_on_startup:
			warm_task = asyncio.create_task(_warm_up(orchestrator))
		yield
		if warm_task is not None and not warm_task.done():
			warm_task.cancel()

	app = FastAPI(title="Dependency Analyzer", lifespan=lifespan)
	app.state.orchestrator = orchestrator

	@app.get("/health")
	async def health() -> dict:
		return {"status": "ok", "state": orchestrator.state.value}

	@app.get("/api/analysis")
	async def get_analysis():
		if orchestrator.cached is not None and not orchestrator.is_running:
			return {"status": "success", "data": orchestrator.cached.model_dump()}

		if orchestrator.is_running:
			return JSONResponse(
				status_code=503,
				content={
					"status": "pending",
					"message": "Analysis is currently running in the background. Please try again shortly.",
				},
			)

		try:
			report = await orchestrator.get_or_compute()
		except DepGraphError as e:
			return _error_response("Analysis failed to run on demand.", e)
		return {"status": "success", "data": report.model_dump()}

	@app.post("/api/analysis/refresh")
	async def refresh_analysis():
		try:
			report = await orchestrator.force_refresh()
		except DepGraphError as e:
			return _error_response("Failed to refresh analysis.", e)
		return {
			"status": "success",
			"message": "Analysis successfully refreshed.",
			"data": report.model_dump(),
		}

	return app


app = create_app()

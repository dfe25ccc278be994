"""
Analysis runs with single-flight execution and report caching.

The orchestrator owns the only shared mutable state of the process: the
latest successful report and the task of the run in flight. Concurrent
callers join the in-flight run instead of starting another one.
"""

import asyncio
import logging
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Callable, List, Optional

from .config import Settings
from .exceptions import AnalysisRunError, DepGraphError, EmptyGraphError
from .fs_scan import make_source_provider
from .graph import build_dependency_graph, graph_to_dict
from .heuristics import analyze_heuristically
from .hubs import DEFAULT_HUB_THRESHOLD
from .model import AnalysisReport, GraphBuild, SourceEntry, freeze_graph
from .semantic import SemanticAnalyzer


logger = logging.getLogger(__name__)


class OrchestratorState(str, Enum):
    IDLE_EMPTY = "idle-empty"
    RUNNING = "running"
    IDLE_CACHED = "idle-cached"


class AnalysisOrchestrator:
    """Runs graph build, heuristics and semantic analysis; caches the report.

    Args:
        source_provider: Zero-argument callable returning the source entries
            to analyse. Called once per run, in a worker thread.
        semantic_analyzer: Object with an ``async analyze(graph)`` method.
        hub_threshold: Minimum import count for a module to be a hub.
    """

    def __init__(
        self,
        source_provider: Callable[[], List[SourceEntry]],
        semantic_analyzer: Any,
        hub_threshold: int = DEFAULT_HUB_THRESHOLD,
    ):
        if hub_threshold < 1:
            raise ValueError(f"Hub threshold must be >= 1, got {hub_threshold}")
        self._source_provider = source_provider
        self._semantic_analyzer = semantic_analyzer
        self.hub_threshold = hub_threshold
        self._cached: Optional[AnalysisReport] = None
        self._inflight: Optional["asyncio.Task[AnalysisReport]"] = None
        self.build_count = 0

    @property
    def cached(self) -> Optional[AnalysisReport]:
        return self._cached

    @property
    def is_running(self) -> bool:
        return self._inflight is not None and not self._inflight.done()

    @property
    def state(self) -> OrchestratorState:
        if self.is_running:
            return OrchestratorState.RUNNING
        if self._cached is not None:
            return OrchestratorState.IDLE_CACHED
        return OrchestratorState.IDLE_EMPTY

    async def get_or_compute(self) -> AnalysisReport:
        """Return the cached report, computing it if there is none.

        While a run is in flight the caller waits for it rather than
        receiving the older cached report.
        """
        if not self.is_running and self._cached is not None:
            return self._cached
        return await self._join_or_start()

    async def force_refresh(self) -> AnalysisReport:
        """Run a fresh analysis, or join the one already in flight."""
        return await self._join_or_start()

    async def _join_or_start(self) -> AnalysisReport:
        if not self.is_running:
            self._inflight = asyncio.create_task(self._run())
            self._inflight.add_done_callback(_retrieve_exception)
        # A waiter giving up must not cancel the shared run.
        return await asyncio.shield(self._inflight)

    def _build_graph(self) -> GraphBuild:
        return build_dependency_graph(self._source_provider())

    async def _run(self) -> AnalysisReport:
        self.build_count += 1
        logger.info("Starting analysis run #%d...", self.build_count)
        try:
            build = await asyncio.to_thread(self._build_graph)
            if build.is_empty:
                raise EmptyGraphError()

            heuristic_result, semantic_result = await asyncio.gather(
                asyncio.to_thread(analyze_heuristically, build.graph, self.hub_threshold),
                self._semantic_analyzer.analyze(graph_to_dict(build.graph)),
            )
        except DepGraphError as e:
            logger.error("Analysis failed: %s", e)
            raise
        except Exception as e:
            logger.exception("Analysis failed unexpectedly")
            raise AnalysisRunError(str(e) or e.__class__.__name__) from e

        report = AnalysisReport(
            timestamp=datetime.now(timezone.utc).isoformat(),
            heuristic_analysis=heuristic_result,
            llm_analysis=semantic_result,
            graph=freeze_graph(build.graph),
            warnings=build.warnings,
        )
        self._cached = report
        logger.info("Analysis complete and cached.")
        return report


def _retrieve_exception(task: "asyncio.Task[AnalysisReport]") -> None:
    # Waiters re-raise the failure; this only silences the unretrieved warning
    # when every waiter has stopped waiting.
    if not task.cancelled():
        task.exception()


def create_orchestrator(settings: Settings, root: Optional[str] = None) -> AnalysisOrchestrator:
    """Wire an orchestrator to the file system and the OpenAI analyzer."""
    return AnalysisOrchestrator(
        source_provider=make_source_provider(settings, root),
        semantic_analyzer=SemanticAnalyzer.from_settings(settings),
        hub_threshold=settings.hub_threshold,
    )

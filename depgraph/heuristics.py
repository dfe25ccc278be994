from __future__ import annotations

import logging

from .cycles import find_cycles
from .hubs import DEFAULT_HUB_THRESHOLD, find_hubs
from .model import DependencyGraph, HeuristicResult


logger = logging.getLogger(__name__)


def analyze_heuristically(graph: DependencyGraph, hub_threshold: int = DEFAULT_HUB_THRESHOLD) -> HeuristicResult:
	logger.info("Running heuristic analysis...")
	result = HeuristicResult(
		circular_dependencies=find_cycles(graph),
		tightly_coupled_modules=find_hubs(graph, hub_threshold),
	)
	logger.info(
		"Heuristic analysis complete: %d cycles, %d hubs",
		len(result.circular_dependencies),
		len(result.tightly_coupled_modules),
	)
	return result

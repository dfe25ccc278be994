from __future__ import annotations

import logging
from typing import Dict, Iterable, List

from .imports import extract_imports, resolve_import
from .model import BuildWarning, DependencyGraph, GraphBuild, SourceEntry


logger = logging.getLogger(__name__)


def module_dependencies(module: str, text: str) -> List[str]:
	deps: List[str] = []
	for target in extract_imports(text):
		resolved = resolve_import(module, target)
		if resolved is None:
			continue
		deps.append(resolved)
	return deps


def build_dependency_graph(entries: Iterable[SourceEntry]) -> GraphBuild:
	"""Build ``module -> imported modules`` from loaded sources.

	Unreadable entries contribute no edges and are reported as warnings.
	"""
	graph: DependencyGraph = {}
	warnings: List[BuildWarning] = []
	for entry in entries:
		if entry.error is not None or entry.content is None:
			message = entry.error or "no content"
			logger.warning("Could not read file %s: %s", entry.module, message)
			warnings.append(BuildWarning(module=entry.module, message=message))
			continue
		graph[entry.module] = module_dependencies(entry.module, entry.content)

	logger.info(
		"Dependency graph built: %d modules, %d edges, %d unreadable",
		len(graph),
		sum(len(deps) for deps in graph.values()),
		len(warnings),
	)
	return GraphBuild(graph=graph, warnings=warnings)


def all_nodes(graph: DependencyGraph) -> List[str]:
	"""Keys and edge targets, in first-seen order."""
	nodes: Dict[str, None] = dict.fromkeys(graph)
	for deps in graph.values():
		for dep in deps:
			nodes.setdefault(dep, None)
	return list(nodes)


def graph_to_dict(graph: DependencyGraph) -> Dict[str, List[str]]:
	return {module: list(deps) for module, deps in graph.items()}

from __future__ import annotations

from typing import Dict, List

from .model import DependencyGraph, HubRecord


DEFAULT_HUB_THRESHOLD = 3


def importers_of(graph: DependencyGraph) -> Dict[str, List[str]]:
	"""Reverse adjacency: module -> modules importing it, one entry per edge."""
	incoming: Dict[str, List[str]] = {}
	for importer, deps in graph.items():
		for dep in deps:
			incoming.setdefault(dep, []).append(importer)
	return incoming


def find_hubs(graph: DependencyGraph, threshold: int = DEFAULT_HUB_THRESHOLD) -> List[HubRecord]:
	"""Modules imported at least ``threshold`` times.

	Sorted by import count, highest first; equal counts by module identifier.
	"""
	if isinstance(threshold, bool) or not isinstance(threshold, int) or threshold < 1:
		raise ValueError(f"Hub threshold must be an integer >= 1, got {threshold!r}")

	hubs = [
		HubRecord(module=module, imported_by=importers)
		for module, importers in importers_of(graph).items()
		if len(importers) >= threshold
	]
	return sorted(hubs, key=lambda h: (-h.import_count, h.module))

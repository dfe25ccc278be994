from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict


DependencyGraph = Dict[str, List[str]]


class SourceEntry(BaseModel):
	module: str
	path: str
	content: Optional[str] = None
	error: Optional[str] = None


class BuildWarning(BaseModel):
	model_config = ConfigDict(frozen=True)

	module: str
	message: str


class GraphBuild(BaseModel):
	graph: DependencyGraph = {}
	warnings: List[BuildWarning] = []

	@property
	def is_empty(self) -> bool:
		return not self.graph


# Findings and reports are frozen snapshots: sequences are tuples.
class CycleRecord(BaseModel):
	model_config = ConfigDict(frozen=True)

	path: Tuple[str, ...]


class HubRecord(BaseModel):
	model_config = ConfigDict(frozen=True)

	module: str
	imported_by: Tuple[str, ...] = ()

	@property
	def import_count(self) -> int:
		return len(self.imported_by)


class HeuristicResult(BaseModel):
	model_config = ConfigDict(frozen=True)

	circular_dependencies: Tuple[CycleRecord, ...] = ()
	tightly_coupled_modules: Tuple[HubRecord, ...] = ()


class SemanticCycle(BaseModel):
	model_config = ConfigDict(frozen=True)

	path: Tuple[str, ...]
	reason: str


class SemanticHub(BaseModel):
	model_config = ConfigDict(frozen=True)

	module: str
	imported_by: Tuple[str, ...] = ()
	recommendation: str


class SemanticResult(BaseModel):
	model_config = ConfigDict(frozen=True)

	circular_dependencies: Tuple[SemanticCycle, ...] = ()
	tightly_coupled_modules: Tuple[SemanticHub, ...] = ()
	refactoring_recommendations: Tuple[str, ...] = ()


class ModuleImports(BaseModel):
	model_config = ConfigDict(frozen=True)

	module: str
	imports: Tuple[str, ...] = ()


class AnalysisReport(BaseModel):
	model_config = ConfigDict(frozen=True)

	timestamp: str
	heuristic_analysis: HeuristicResult
	llm_analysis: SemanticResult
	graph: Tuple[ModuleImports, ...] = ()
	warnings: Tuple[BuildWarning, ...] = ()

	def dependency_map(self) -> DependencyGraph:
		"""A fresh, mutable copy of the graph the findings were computed from."""
		return {m.module: list(m.imports) for m in self.graph}


def freeze_graph(graph: DependencyGraph) -> Tuple[ModuleImports, ...]:
	return tuple(ModuleImports(module=module, imports=deps) for module, deps in graph.items())

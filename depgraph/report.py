from __future__ import annotations

import json
from typing import List

from .model import AnalysisReport, DependencyGraph


RULE = "=" * 39


def _json_block(items) -> str:
	return json.dumps([i.model_dump() for i in items], indent=2)


def format_graph(graph: DependencyGraph) -> str:
	parts: List[str] = ["Discovered Dependency Map:"]
	for module, deps in graph.items():
		parts.append(f"  {module}")
		for dep in deps:
			parts.append(f"    -> {dep}")
	return "\n".join(parts)


def format_report(report: AnalysisReport, hub_threshold: int = 3) -> str:
	"""Side-by-side text report of the heuristic and LLM findings."""
	heuristic = report.heuristic_analysis
	llm = report.llm_analysis
	parts: List[str] = [RULE, "  Comparative Analysis Report", f"  {report.timestamp}", RULE]

	parts.append("\n--- Circular Dependencies ---")
	parts.append("\n[ Heuristic Analysis ]")
	if heuristic.circular_dependencies:
		parts.append(_json_block(heuristic.circular_dependencies))
	else:
		parts.append("No circular dependencies found.")
	parts.append("\n[ LLM Analysis ]")
	if llm.circular_dependencies:
		parts.append(_json_block(llm.circular_dependencies))
	else:
		parts.append("No circular dependencies found.")

	parts.append("\n--- Tightly Coupled Modules ---")
	parts.append("\n[ Heuristic Analysis ]")
	if heuristic.tightly_coupled_modules:
		parts.append(_json_block(heuristic.tightly_coupled_modules))
	else:
		parts.append(f"No modules found imported by {hub_threshold} or more files.")
	parts.append("\n[ LLM Analysis ]")
	if llm.tightly_coupled_modules:
		parts.append(_json_block(llm.tightly_coupled_modules))
	else:
		parts.append("No tightly coupled modules identified.")

	parts.append("\n--- Refactoring Recommendations (LLM Only) ---")
	if llm.refactoring_recommendations:
		parts.extend(f"- {rec}" for rec in llm.refactoring_recommendations)
	else:
		parts.append("No specific recommendations given.")

	if report.warnings:
		parts.append("\n--- Skipped Files ---")
		parts.extend(f"- {w.module}: {w.message}" for w in report.warnings)

	parts.extend(["", RULE, "  Analysis Complete", RULE])
	return "\n".join(parts)


def report_to_json(report: AnalysisReport) -> str:
	return json.dumps(report.model_dump(), indent=2)

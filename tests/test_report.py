import pytest
from pydantic import ValidationError

from depgraph.model import (
	AnalysisReport,
	BuildWarning,
	CycleRecord,
	HeuristicResult,
	HubRecord,
	SemanticResult,
	freeze_graph,
)
from depgraph.report import format_graph, format_report, report_to_json


def _report(**kwargs):
	return AnalysisReport(
		timestamp="2026-01-01T00:00:00+00:00",
		heuristic_analysis=kwargs.get("heuristic", HeuristicResult()),
		llm_analysis=kwargs.get("llm", SemanticResult()),
		warnings=kwargs.get("warnings", []),
	)


def test_empty_report_sections():
	text = format_report(_report(), hub_threshold=4)
	assert text.count("No circular dependencies found.") == 2
	assert "No modules found imported by 4 or more files." in text
	assert "No tightly coupled modules identified." in text
	assert "No specific recommendations given." in text
	assert "Skipped Files" not in text


def test_findings_are_listed():
	heuristic = HeuristicResult(
		circular_dependencies=[CycleRecord(path=["a.ts", "b.ts", "a.ts"])],
		tightly_coupled_modules=[HubRecord(module="types.ts", imported_by=["a.ts", "b.ts", "c.ts"])],
	)
	llm = SemanticResult(refactoring_recommendations=["Split types.ts"])
	text = format_report(_report(heuristic=heuristic, llm=llm, warnings=[BuildWarning(module="x.ts", message="denied")]))
	assert '"types.ts"' in text
	assert "- Split types.ts" in text
	assert "- x.ts: denied" in text


def test_format_graph():
	text = format_graph({"a.ts": ["b.ts"], "b.ts": []})
	assert text.splitlines() == ["Discovered Dependency Map:", "  a.ts", "    -> b.ts", "  b.ts"]


def test_report_is_frozen_and_serializable():
	report = _report()
	with pytest.raises(ValidationError):
		report.timestamp = "later"
	assert report.timestamp == "2026-01-01T00:00:00+00:00"
	assert '"heuristic_analysis"' in report_to_json(report)


def test_report_contents_cannot_change_in_place():
	report = AnalysisReport(
		timestamp="2026-01-01T00:00:00+00:00",
		heuristic_analysis=HeuristicResult(circular_dependencies=[CycleRecord(path=["a.ts", "b.ts", "a.ts"])]),
		llm_analysis=SemanticResult(),
		graph=freeze_graph({"a.ts": ["b.ts"], "b.ts": ["a.ts"]}),
	)
	cycle = report.heuristic_analysis.circular_dependencies[0]
	assert isinstance(cycle.path, tuple)
	assert isinstance(report.graph[0].imports, tuple)
	with pytest.raises(ValidationError):
		cycle.path = ("x.ts",)

	deps = report.dependency_map()
	deps["a.ts"].append("c.ts")
	assert report.dependency_map() == {"a.ts": ["b.ts"], "b.ts": ["a.ts"]}

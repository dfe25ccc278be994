"""Dependency graph analysis for relative-import source trees.

Modules:
- fs_scan.py: Filesystem scanning and source loading.
- imports.py: Relative import extraction and path resolution.
- graph.py: Dependency graph construction.
- cycles.py: Circular dependency detection.
- hubs.py: Hub (over-imported module) detection.
- heuristics.py: Combined graph-algorithmic analysis.
- semantic.py: LLM-backed semantic analysis of the graph.
- orchestrator.py: Single-flight analysis runs and report caching.
- report.py: Console and JSON rendering of reports.
- model.py: Data structures for graphs, findings and reports.
- config.py, log.py, exceptions.py: Settings, logging setup and errors.
"""

__all__ = [
	"fs_scan",
	"imports",
	"graph",
	"cycles",
	"hubs",
	"heuristics",
	"semantic",
	"orchestrator",
	"report",
	"model",
]

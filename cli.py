from __future__ import annotations

import argparse
import asyncio
import logging
import sys

import uvicorn

from depgraph.config import get_settings
from depgraph.exceptions import DepGraphError
from depgraph.log import setup_logging
from depgraph.orchestrator import create_orchestrator
from depgraph.report import format_graph, format_report, report_to_json


logger = logging.getLogger("depgraph.cli")


def _threshold(value: str) -> int:
	n = int(value)
	if n < 1:
		raise argparse.ArgumentTypeError("threshold must be >= 1")
	return n


def cmd_analyze(args: argparse.Namespace) -> int:
	settings = get_settings()
	if args.threshold is not None:
		settings = settings.model_copy(update={"hub_threshold": args.threshold})
	orchestrator = create_orchestrator(settings, root=args.root)

	try:
		report = asyncio.run(orchestrator.get_or_compute())
	except DepGraphError as e:
		logger.error("Analysis failed: %s", e.message)
		return 1

	if args.json:
		print(report_to_json(report))
		return 0
	if args.show_graph:
		print(format_graph(report.dependency_map()))
		print()
	print(format_report(report, hub_threshold=settings.hub_threshold))
	return 0


def cmd_serve(args: argparse.Namespace) -> int:
	settings = get_settings()
	uvicorn.run(
		"api:app",
		host=args.host or settings.host,
		port=args.port or settings.port,
		reload=args.reload,
	)
	return 0


def main() -> None:
	parser = argparse.ArgumentParser(prog="depgraph")
	sub = parser.add_subparsers(dest="cmd", required=True)

	pa = sub.add_parser("analyze", help="Analyze the project and print the report")
	pa.add_argument("--root", default=None, help="Project root (default: PROJECT_ROOT or cwd)")
	pa.add_argument("--threshold", type=_threshold, default=None, help="Hub threshold (default: HUB_THRESHOLD or 3)")
	pa.add_argument("--json", action="store_true", help="Print the report as JSON")
	pa.add_argument("--show-graph", action="store_true", help="Print the dependency map before the report")
	pa.set_defaults(func=cmd_analyze)

	ps = sub.add_parser("serve", help="Run the analysis API server")
	ps.add_argument("--host", default=None)
	ps.add_argument("--port", type=int, default=None)
	ps.add_argument("--reload", action="store_true")
	ps.set_defaults(func=cmd_serve)

	args = parser.parse_args()
	setup_logging("depgraph", get_settings().log_level)
	sys.exit(args.func(args))


if __name__ == "__main__":
	main()

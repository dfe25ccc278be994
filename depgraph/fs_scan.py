from __future__ import annotations

import logging
import os
from typing import Callable, Iterable, List, Optional, Sequence

from .config import Settings
from .imports import SOURCE_EXTENSIONS, to_identifier
from .model import SourceEntry


logger = logging.getLogger(__name__)

IGNORED_DIRS = {".git", "node_modules", "dist", "build", "coverage", "__pycache__"}
DECLARATION_SUFFIX = ".d.ts"

SourceProvider = Callable[[], List[SourceEntry]]


def to_module_id(root: str, file_path: str) -> str:
	return to_identifier(os.path.relpath(file_path, root))


def is_source_file(filename: str, extensions: Sequence[str] = SOURCE_EXTENSIONS) -> bool:
	if filename.endswith(DECLARATION_SUFFIX):
		return False
	_, ext = os.path.splitext(filename)
	return ext in extensions


def scan_sources(
	root: str,
	source_dirs: Sequence[str] = ("src",),
	extensions: Sequence[str] = SOURCE_EXTENSIONS,
	exclude: Iterable[str] = (),
) -> List[str]:
	"""Return module identifiers of the source files under ``root``."""
	excluded = {to_identifier(e) for e in exclude}
	modules: List[str] = []
	for source_dir in source_dirs:
		top = os.path.join(root, source_dir)
		if not os.path.isdir(top):
			logger.warning("Source directory not found: %s", top)
			continue
		for dirpath, dirnames, filenames in os.walk(top):
			dirnames[:] = sorted(d for d in dirnames if d not in IGNORED_DIRS)
			for filename in sorted(filenames):
				if not is_source_file(filename, extensions):
					continue
				module = to_module_id(root, os.path.join(dirpath, filename))
				if module in excluded:
					continue
				modules.append(module)
	return modules


def read_source(root: str, module: str) -> SourceEntry:
	path = os.path.join(root, *module.split("/"))
	try:
		with open(path, "r", encoding="utf-8") as fh:
			return SourceEntry(module=module, path=path, content=fh.read())
	except (OSError, UnicodeDecodeError) as e:
		return SourceEntry(module=module, path=path, error=str(e))


def load_sources(root: str, modules: Iterable[str]) -> List[SourceEntry]:
	return [read_source(root, m) for m in modules]


def make_source_provider(settings: Settings, root: Optional[str] = None) -> SourceProvider:
	"""Return the discovery callable consumed by the orchestrator."""
	root = os.path.abspath(root or settings.project_root)

	def provide() -> List[SourceEntry]:
		modules = scan_sources(
			root,
			source_dirs=settings.source_dirs,
			extensions=settings.source_extensions,
			exclude=settings.exclude,
		)
		logger.info("Found %d files to analyze under %s", len(modules), root)
		return load_sources(root, modules)

	return provide

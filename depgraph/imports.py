from __future__ import annotations

import posixpath
import re
from typing import List, Optional


SOURCE_EXTENSIONS = (".ts", ".tsx", ".js", ".jsx")
DEFAULT_EXTENSION = ".ts"

# `import './x'` or `import ... from './x'`; the binding clause may span lines.
# Outside a `{...}` list it never crosses a quote or a semicolon, so a
# side-effect import cannot swallow the statement after it. Inside the braces
# anything goes (comments with apostrophes or semicolons).
IMPORT_RE = re.compile(
	r"""\bimport\s*(?:(?:\{[^}]*\}|[^'";{])*?\bfrom\s*)?['"](\./[^'"\n]*)['"]"""
)


def extract_imports(text: str) -> List[str]:
	"""Return the relative import targets of a file, in source order."""
	return [m.group(1) for m in IMPORT_RE.finditer(text)]


def to_identifier(path: str) -> str:
	return path.replace("\\", "/")


def resolve_import(importer: str, target: str) -> Optional[str]:
	"""Resolve ``target`` against the directory of ``importer``.

	Returns None for non-source assets (``./styles.css``, ``./data.json``),
	which are not structural code dependencies.
	"""
	_, ext = posixpath.splitext(target)
	if ext:
		if ext not in SOURCE_EXTENSIONS:
			return None
	else:
		target = target + DEFAULT_EXTENSION
	base = posixpath.dirname(to_identifier(importer))
	return posixpath.normpath(posixpath.join(base, to_identifier(target)))

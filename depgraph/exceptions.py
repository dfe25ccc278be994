"""
Exception hierarchy for analysis runs.

Every fatal condition of a run inherits from DepGraphError so the
HTTP layer and the CLI can report it uniformly. Unreadable files are
not exceptions: they become BuildWarning entries on the graph build.
"""


class DepGraphError(Exception):
    """Base exception for all analysis errors."""

    def __init__(self, message: str, component: str = "unknown"):
        self.component = component
        self.message = message
        super().__init__(f"[{component}] {message}")


class EmptyGraphError(DepGraphError):
    """No source files were found or none of them could be read."""

    def __init__(self, message: str = "Parser found no files or dependencies."):
        super().__init__(message, component="graph")


class SemanticAnalysisError(DepGraphError):
    """The semantic analyzer failed or returned an unusable response."""

    def __init__(self, message: str):
        super().__init__(message, component="semantic")


class SemanticAnalyzerUnavailable(SemanticAnalysisError):
    """The semantic analyzer cannot run, e.g. missing credentials."""
    pass


class AnalysisRunError(DepGraphError):
    """Unexpected failure while running an analysis."""

    def __init__(self, message: str):
        super().__init__(message, component="orchestrator")

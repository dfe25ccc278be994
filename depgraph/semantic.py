"""
LLM-backed semantic analysis of a dependency graph.

Only the graph itself (module identifiers and their imports) is sent to
the model, never file contents. The model answers with the same shape as
the heuristic result plus free-text reasons, recommendations and general
refactoring advice.
"""

import json
import logging
import re
from typing import Any, Dict, List, Optional

from openai import AsyncOpenAI, OpenAIError
from pydantic import ValidationError

from .config import Settings
from .exceptions import SemanticAnalysisError, SemanticAnalyzerUnavailable
from .model import SemanticResult


logger = logging.getLogger(__name__)

SYSTEM_PROMPT = """You are a senior software architect reviewing a TypeScript project's dependency graph.
The user will provide a JSON object where each key is a file and its value is an array of the local files it imports.

Analyze the graph and answer with a single JSON object with three properties:
1. "circular_dependencies": an array of objects, each with
   - "path": the array of files forming the cycle, starting and ending with the same file
   - "reason": a short explanation of why this cycle is a problem
   Use [] if there are none.
2. "tightly_coupled_modules": an array of objects for "hub" modules imported by many other modules, each with
   - "module": the hub file
   - "imported_by": the files importing it
   - "recommendation": how to reduce the coupling
   Use [] if there are none.
3. "refactoring_recommendations": an array of 1-3 high-level recommendations for improving the dependency structure.
"""

_FENCED_JSON_RE = re.compile(r"```json([\s\S]*)```")
_OBJECT_RE = re.compile(r"\{[\s\S]*\}")


def parse_semantic_response(text: str) -> SemanticResult:
    """Extract and validate the JSON object in a model reply.

    Tolerates replies wrapped in a ```json fence or surrounded by prose.
    """
    fenced = _FENCED_JSON_RE.search(text)
    if fenced:
        text = fenced.group(1)
    obj = _OBJECT_RE.search(text)
    if obj:
        text = obj.group(0)

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise SemanticAnalysisError(f"Malformed LLM response: {e}") from e
    if not isinstance(data, dict):
        raise SemanticAnalysisError("Malformed LLM response: expected a JSON object")
    try:
        return SemanticResult.model_validate(data)
    except ValidationError as e:
        raise SemanticAnalysisError(f"LLM response does not match the expected shape: {e}") from e


class SemanticAnalyzer:
    """Sends the dependency graph to an OpenAI-compatible chat model."""

    def __init__(
        self,
        api_key: str = "",
        model: str = "gpt-4o-mini",
        base_url: Optional[str] = None,
        timeout: float = 60.0,
        temperature: float = 0.2,
        max_tokens: int = 8192,
        client: Any = None,
    ):
        self.api_key = api_key
        self.model = model
        self.base_url = base_url
        self.timeout = timeout
        self.temperature = temperature
        self.max_tokens = max_tokens
        self._client = client

    @classmethod
    def from_settings(cls, settings: Settings) -> "SemanticAnalyzer":
        return cls(
            api_key=settings.openai_api_key,
            model=settings.openai_model,
            base_url=settings.openai_base_url,
            timeout=settings.llm_timeout_sec,
            temperature=settings.llm_temperature,
            max_tokens=settings.llm_max_tokens,
        )

    def _get_client(self) -> Any:
        if self._client is None:
            if not self.api_key:
                raise SemanticAnalyzerUnavailable(
                    "OPENAI_API_KEY is not set. Add it to .env or export it."
                )
            logger.info("OpenAI API key found. Initializing client...")
            self._client = AsyncOpenAI(api_key=self.api_key, base_url=self.base_url)
        return self._client

    async def analyze(self, graph: Dict[str, List[str]]) -> SemanticResult:
        client = self._get_client()
        payload = json.dumps(graph, indent=2)

        logger.info("Sending dependency graph to LLM for analysis...")
        try:
            response = await client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": payload},
                ],
                temperature=self.temperature,
                max_tokens=self.max_tokens,
                response_format={"type": "json_object"},
                timeout=self.timeout,
            )
        except OpenAIError as e:
            raise SemanticAnalysisError(f"LLM request failed: {e}") from e

        if not response.choices:
            raise SemanticAnalysisError("Empty LLM response")
        choice = response.choices[0]
        if choice.finish_reason == "content_filter":
            raise SemanticAnalysisError("LLM response was blocked by the content filter")
        if choice.finish_reason == "length":
            logger.warning("LLM response may have been truncated (max tokens reached).")

        text = choice.message.content or ""
        if not text.strip():
            raise SemanticAnalysisError("Empty LLM response")
        try:
            return parse_semantic_response(text)
        except SemanticAnalysisError:
            logger.debug("LLM response text on failure:\n%s", text)
            raise

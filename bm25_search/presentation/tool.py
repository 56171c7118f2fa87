"""bm25_search tool surface for agent hosts."""

import logging
import os
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from pydantic import ValidationError

from bm25_search.core.exceptions import (
    BM25SearchError,
    InvalidParameters,
    SearchCancelled,
)
from bm25_search.core.models.cancellation import CancellationToken
from bm25_search.core.models.chunk import SearchRequest
from bm25_search.core.models.params import BM25SearchParams
from bm25_search.core.services.search_service import SearchService
from bm25_search.core.services.workspace_guard import WorkspaceGuard
from bm25_search.utils.paths import make_relative, shorten_path

logger = logging.getLogger(__name__)

_TYPE_NAMES = {
    "int_type": "integer",
    "string_type": "string",
}


def format_validation_error(error: ValidationError) -> str:
    """Render pydantic errors as short ``params/<field> ...`` messages."""
    messages = []
    for err in error.errors():
        loc = "/".join(str(part) for part in err["loc"])
        kind = err["type"]
        if kind == "missing":
            messages.append(f"params must have required property '{loc}'")
        elif kind in _TYPE_NAMES:
            messages.append(f"params/{loc} must be {_TYPE_NAMES[kind]}")
        elif kind == "greater_than_equal":
            messages.append(f"params/{loc} must be >= {err['ctx']['ge']}")
        elif kind == "value_error":
            messages.append(str(err["ctx"]["error"]))
        else:
            messages.append(f"params/{loc} {err['msg']}" if loc else err["msg"])
    return "; ".join(messages)


@dataclass
class ToolResult:
    """Tool output: payload for the model and a short status line."""
    llm_content: str
    return_display: str


class BM25SearchTool:
    """Relevance search over line chunks of workspace files."""

    name = "bm25_search"
    display_name = "BM25Search"
    description = (
        "Performs a relevance search for keywords on code chunks within files, "
        "returning the most relevant snippets as ranked results. Ideal for "
        "locating code blocks containing a set of keywords, even when those "
        "keywords are not adjacent or on the same line."
    )

    def __init__(
        self,
        search_service: SearchService,
        guard: WorkspaceGuard,
        default_chunk_size: int = 100,
        default_overlap: int = 20,
    ):
        """Initialize tool.

        Args:
            search_service: Search pipeline.
            guard: Workspace path validation.
            default_chunk_size: chunk_size when the caller omits it.
            default_overlap: overlap when the caller omits it.
        """
        self._search_service = search_service
        self._guard = guard
        self._defaults = {"chunk_size": default_chunk_size, "overlap": default_overlap}

    @classmethod
    def schema(cls) -> dict[str, Any]:
        """JSON schema of the tool parameters."""
        return BM25SearchParams.model_json_schema()

    def parse_params(self, raw: Mapping[str, Any]) -> BM25SearchParams:
        """Validate raw parameters.

        Raises:
            InvalidParameters: Shape, type or range error.
        """
        data = dict(self._defaults)
        data.update({k: v for k, v in raw.items() if v is not None})
        try:
            return BM25SearchParams.model_validate(data)
        except ValidationError as e:
            raise InvalidParameters(format_validation_error(e)) from e

    def validate_params(self, raw: Mapping[str, Any]) -> Optional[str]:
        """Return an error message for invalid parameters, else None."""
        try:
            params = self.parse_params(raw)
            self._guard.resolve_search_dir(params.path)
        except BM25SearchError as e:
            return str(e)
        return None

    def execute(
        self,
        raw: Mapping[str, Any],
        cancel_token: Optional[CancellationToken] = None,
    ) -> ToolResult:
        """Run the search.

        Args:
            raw: Tool parameters.
            cancel_token: Request cancellation.

        Returns:
            Report or error message.
        """
        validation_error = self.validate_params(raw)
        if validation_error:
            return ToolResult(
                llm_content=(
                    f"Error: Invalid parameters provided. Reason: {validation_error}"
                ),
                return_display=(
                    f"Model provided invalid parameters. Error: {validation_error}"
                ),
            )

        params = self.parse_params(raw)
        request = SearchRequest(
            query=params.query,
            path=params.path,
            include=params.include,
            chunk_size=params.chunk_size,
            overlap=params.overlap,
            cancel_token=cancel_token or CancellationToken(),
        )

        try:
            result = self._search_service.search(request)
        except SearchCancelled:
            logger.info(f"BM25Search cancelled for '{params.query[:50]}'")
            return ToolResult(
                llm_content="Error: BM25 search was cancelled.",
                return_display="Error: Search cancelled",
            )
        except BM25SearchError as e:
            logger.error(f"Error during BM25Search execution: {e}")
            return ToolResult(
                llm_content=f"Error during BM25 search operation: {e}",
                return_display=f"Error: {e}",
            )

        return ToolResult(llm_content=result.llm_content, return_display=result.summary)

    def get_description(self, raw: Mapping[str, Any]) -> str:
        """One-line rendering of the request for display."""
        description = f"'{raw.get('query')}'"

        include = raw.get("include")
        if include:
            description += f" in {include}"

        path = raw.get("path")
        target_dir = self._guard.target_dir
        if path:
            resolved = os.path.abspath(os.path.join(target_dir, path))
            if resolved == target_dir or path == ".":
                description += " within ./"
            else:
                relative = make_relative(resolved, target_dir)
                description += f" within {shorten_path(relative)}"
        elif len(self._guard.directories) > 1:
            description += " across all workspace directories"

        return description

"""Fit rendered reports into a token budget."""

import logging
from collections.abc import Callable, Iterable
from functools import lru_cache
from typing import Any

import tiktoken

from .exceptions import ValidationError
from .models import RouteSearchResult

logger = logging.getLogger(__name__)

TokenCounter = Callable[[str], int]

DEFAULT_ENCODING = "cl100k_base"


@lru_cache(maxsize=None)
def _get_encoding(name: str) -> Any:
    return tiktoken.get_encoding(name)


def tiktoken_counter(encoding_name: str = DEFAULT_ENCODING) -> TokenCounter:
    """Build a token counter backed by a tiktoken encoding.

    The encoding is loaded on first use and shared afterwards; tiktoken
    encodings are read-only and safe to share between calls.
    """

    def count_tokens(text: str) -> int:
        return len(_get_encoding(encoding_name).encode(text))

    return count_tokens


class BudgetTruncator:
    """Shrinks reports to a maximum token count."""

    def __init__(self, count_tokens: TokenCounter):
        """Initialize the truncator.

        Args:
            count_tokens: Function returning the token count of a text
        """
        self.count_tokens = count_tokens

    @staticmethod
    def _check_budget(max_tokens: int) -> None:
        if max_tokens < 1:
            raise ValidationError(f"maxTokens must be positive, got {max_tokens}")

    def truncate(
        self,
        result: RouteSearchResult,
        render: Callable[[RouteSearchResult], str],
        max_tokens: int | None,
    ) -> str:
        """Render a result, dropping trailing routes when over budget.

        The number of routes kept is estimated once from the full render,
        in proportion to the budget, and the report is re-rendered a single
        time. A report with dense final routes can therefore still exceed
        the budget; at least one route is always kept.

        Args:
            result: Search result to render
            render: Renders a search result to text
            max_tokens: Token budget, or None for no limit

        Returns:
            Rendered text
        """
        text = render(result)
        if max_tokens is None:
            return text
        self._check_budget(max_tokens)

        tokens = self.count_tokens(text)
        if tokens <= max_tokens or not result.routes:
            return text

        keep = max(1, int(len(result.routes) * max_tokens // tokens))
        logger.info(
            f"Report has {tokens} tokens (limit {max_tokens}), "
            f"keeping {keep} of {len(result.routes)} routes"
        )
        limited = result.model_copy(update={"routes": result.routes[:keep]})
        return render(limited)

    def join_within_budget(
        self, items: Iterable[str], max_tokens: int | None, separator: str = ","
    ) -> str:
        """Join items in order, stopping before the joined text exceeds the budget."""
        if max_tokens is not None:
            self._check_budget(max_tokens)

        joined = ""
        for item in items:
            candidate = f"{joined}{separator}{item}" if joined else item
            if max_tokens is not None and self.count_tokens(candidate) > max_tokens:
                break
            joined = candidate
        return joined

"""Tool implementations and the dispatch table behind ``call_tool``.

Each handler reads the shared knowledge base (or the GitHub fetcher) and
returns a ``ToolResult``. ``invoke`` is the single place where handler
exceptions are turned into error results.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass
from typing import Any

from autofixture_mcp import catalog, formatters, github_client, matchers
from autofixture_mcp.knowledge import KNOWLEDGE_BASE, KnowledgeBase

log = logging.getLogger("autofixture-mcp")


@dataclass(frozen=True, slots=True)
class ToolResult:
    """Text body of a tool response plus the explicit error flag."""

    text: str
    is_error: bool = False


Handler = Callable[[KnowledgeBase, Mapping[str, Any]], Awaitable[ToolResult]]


def _arg(args: Mapping[str, Any], key: str) -> str | None:
    value = args.get(key)
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)


# ---------------------------------------------------------------------------
# Static lookups
# ---------------------------------------------------------------------------


async def quick_start(kb: KnowledgeBase, args: Mapping[str, Any]) -> ToolResult:
    """Return the AutoFixture quick start guide.

    Args:
        kb: Knowledge base to read from.
        args: Ignored; the tool takes no arguments.

    Returns:
        The guide title as a heading followed by its content verbatim.
    """
    return ToolResult(formatters.render_quick_start(kb.quick_start))


async def search_methods(kb: KnowledgeBase, args: Mapping[str, Any]) -> ToolResult:
    """Substring search over method names and descriptions.

    Args:
        kb: Knowledge base to read from.
        args: ``query``, matched case-insensitively.

    Returns:
        Matching methods grouped by class, a prompt when the query is
        empty, or a "no methods found" hint.
    """
    query = _arg(args, "query")
    if not query:
        return ToolResult(formatters.render_method_prompt())

    results = matchers.search_methods(kb, query)
    if not results:
        return ToolResult(formatters.render_no_methods(query))
    return ToolResult(formatters.render_method_results(query, results))


async def class_info(kb: KnowledgeBase, args: Mapping[str, Any]) -> ToolResult:
    """Describe one class by exact name.

    Args:
        kb: Knowledge base to read from.
        args: ``className``, matched case-sensitively.

    Returns:
        The class description with its Methods and/or Usage sections, a
        prompt listing the classes when no name is given, or a
        "not found" message.
    """
    class_name = _arg(args, "className")
    if not class_name:
        return ToolResult(formatters.render_class_prompt(kb.class_names()))

    entry = kb.classes.get(class_name)
    if entry is None:
        return ToolResult(formatters.render_class_not_found(class_name, kb.class_names()))
    return ToolResult(formatters.render_class_info(class_name, entry))


async def packages(kb: KnowledgeBase, args: Mapping[str, Any]) -> ToolResult:
    """List packages for one category, or all of them.

    Args:
        kb: Knowledge base to read from.
        args: Optional ``category``; missing or empty means ``all``.

    Returns:
        One section per category. An unknown category renders the top
        heading with no sections.
    """
    category = _arg(args, "category") or "all"
    categories = kb.category_names() if category == "all" else [category]
    return ToolResult(formatters.render_packages(kb, categories))


async def usage_pattern(kb: KnowledgeBase, args: Mapping[str, Any]) -> ToolResult:
    """Show usage patterns matching a keyword.

    Args:
        kb: Knowledge base to read from.
        args: Optional ``pattern``, matched against names and code.

    Returns:
        Matching patterns with code blocks, the list of pattern names
        when no keyword is given, or a "no patterns found" message.
    """
    pattern = _arg(args, "pattern")
    if not pattern:
        return ToolResult(formatters.render_pattern_list(kb.patterns))

    matches = matchers.search_patterns(kb, pattern)
    if not matches:
        return ToolResult(formatters.render_no_patterns(pattern))
    return ToolResult(formatters.render_patterns(pattern, matches))


async def best_practices(kb: KnowledgeBase, args: Mapping[str, Any]) -> ToolResult:
    """Return the best practices as a numbered list."""
    return ToolResult(formatters.render_best_practices(kb))


# ---------------------------------------------------------------------------
# Remote documents
# ---------------------------------------------------------------------------


async def fetch_remote_docs(kb: KnowledgeBase, args: Mapping[str, Any]) -> ToolResult:
    """Fetch README, CHEATSHEET or FAQ from the AutoFixture repository."""
    topic = _arg(args, "topic")
    result = await github_client.fetch_document(topic)
    if not result.ok:
        return ToolResult(formatters.render_remote_failure(result.error or ""), is_error=True)
    return ToolResult(formatters.render_remote_doc(topic, result.text or ""))


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------

HANDLERS: dict[str, Handler] = {
    catalog.QUICK_START: quick_start,
    catalog.SEARCH_METHODS: search_methods,
    catalog.CLASS_INFO: class_info,
    catalog.PACKAGES: packages,
    catalog.USAGE_PATTERN: usage_pattern,
    catalog.BEST_PRACTICES: best_practices,
    catalog.FETCH_REMOTE_DOCS: fetch_remote_docs,
}


def check_registry(handlers: Mapping[str, Handler] = HANDLERS) -> None:
    """Raise RuntimeError unless *handlers* covers exactly the catalog names."""
    declared = set(catalog.names())
    registered = set(handlers)
    if declared != registered:
        raise RuntimeError(
            "Tool registry mismatch: "
            f"missing handlers {sorted(declared - registered)}, "
            f"undeclared handlers {sorted(registered - declared)}"
        )


check_registry()


async def invoke(
    name: str,
    args: Mapping[str, Any] | None = None,
    kb: KnowledgeBase = KNOWLEDGE_BASE,
) -> ToolResult:
    """Dispatch a tool call by exact name.

    Unknown names get a plain (non-error) message. Any exception raised by
    a handler is logged and returned as an error result.
    """
    handler = HANDLERS.get(name)
    if handler is None:
        log.info("Unknown tool requested: %s", name)
        return ToolResult(f"Unknown operation: {name}")

    log.debug("Dispatching %s with %s", name, dict(args or {}))
    try:
        return await handler(kb, args or {})
    except Exception as exc:
        log.exception("Tool %s failed", name)
        return ToolResult(f"Error: {exc}", is_error=True)

"""Tool catalog: name, description and argument schema of every tool."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Any

from autofixture_mcp.knowledge import CATEGORIES


@dataclass(frozen=True, slots=True)
class ToolDescriptor:
    name: str
    description: str
    input_schema: dict[str, Any]

    def schema(self) -> dict[str, Any]:
        """Return a private copy of the input schema."""
        return copy.deepcopy(self.input_schema)


def _object_schema(
    properties: dict[str, Any] | None = None,
    required: list[str] | None = None,
) -> dict[str, Any]:
    schema: dict[str, Any] = {"type": "object", "properties": properties or {}}
    if required:
        schema["required"] = required
    return schema


def _string(description: str, **extra: Any) -> dict[str, Any]:
    return {"type": "string", "description": description, **extra}


QUICK_START = "quick-start"
SEARCH_METHODS = "search-methods"
CLASS_INFO = "class-info"
PACKAGES = "packages"
USAGE_PATTERN = "usage-pattern"
BEST_PRACTICES = "best-practices"
FETCH_REMOTE_DOCS = "fetch-remote-docs"

TOOLS: tuple[ToolDescriptor, ...] = (
    ToolDescriptor(
        name=QUICK_START,
        description="Get AutoFixture quick start guide and basic usage examples",
        input_schema=_object_schema(),
    ),
    ToolDescriptor(
        name=SEARCH_METHODS,
        description="Search for AutoFixture methods and their usage",
        input_schema=_object_schema(
            {"query": _string("Search query for method names (e.g., 'Create', 'Build', 'Freeze')")},
            required=["query"],
        ),
    ),
    ToolDescriptor(
        name=CLASS_INFO,
        description="Get detailed information about a specific AutoFixture class",
        input_schema=_object_schema(
            {"className": _string("Name of the class (e.g., 'Fixture', 'IFixture')")},
            required=["className"],
        ),
    ),
    ToolDescriptor(
        name=PACKAGES,
        description="Get list of AutoFixture NuGet packages and their purposes",
        input_schema=_object_schema(
            {
                "category": _string(
                    "Package category: 'core', 'mocking', 'testing', or 'all'",
                    enum=[*CATEGORIES, "all"],
                )
            }
        ),
    ),
    ToolDescriptor(
        name=USAGE_PATTERN,
        description="Get common usage patterns and code examples",
        input_schema=_object_schema(
            {
                "pattern": _string(
                    "Pattern name or keyword (e.g., 'customizing', 'lists', 'automoq', 'xunit')"
                )
            }
        ),
    ),
    ToolDescriptor(
        name=BEST_PRACTICES,
        description="Get AutoFixture best practices and recommendations",
        input_schema=_object_schema(),
    ),
    ToolDescriptor(
        name=FETCH_REMOTE_DOCS,
        description="Fetch latest documentation from AutoFixture GitHub repository",
        input_schema=_object_schema(
            {"topic": _string("Documentation topic to fetch (e.g., 'README', 'cheatsheet', 'faq')")}
        ),
    ),
)


def list_operations() -> list[ToolDescriptor]:
    """Return every tool descriptor in catalog order."""
    return list(TOOLS)


def names() -> list[str]:
    return [t.name for t in TOOLS]

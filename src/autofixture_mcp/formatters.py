"""Markdown rendering for tool responses.

Every function here is pure: it takes records from the knowledge base and
returns the text body sent back to the client.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from autofixture_mcp.knowledge import (
    ClassEntry,
    KnowledgeBase,
    MethodEntry,
    PackageEntry,
    PatternEntry,
    QuickStart,
)

_METHOD_HINTS = "Create, Build, Freeze, Inject, or Customize"


def _fence(code: str, lang: str = "") -> str:
    return f"```{lang}\n{code}\n```"


def _method_section(method: MethodEntry) -> str:
    return (
        f"### {method.name}\n"
        f"{method.description}\n\n"
        f"**Example:**\n{_fence(method.example, 'csharp')}\n\n"
    )


# ---------------------------------------------------------------------------
# quick-start / best-practices
# ---------------------------------------------------------------------------


def render_quick_start(qs: QuickStart) -> str:
    return f"# {qs.title}\n\n{qs.content}"


def render_best_practices(kb: KnowledgeBase) -> str:
    lines = [f"# {kb.name} Best Practices", ""]
    lines.extend(f"{i}. {item}" for i, item in enumerate(kb.best_practices, start=1))
    return "\n".join(lines) + "\n"


# ---------------------------------------------------------------------------
# search-methods
# ---------------------------------------------------------------------------


def render_method_prompt() -> str:
    return "Please provide a search query for method names."


def render_no_methods(query: str) -> str:
    return f'No methods found matching "{query}". Try searching for: {_METHOD_HINTS}.'


def render_method_results(query: str, results: Sequence[tuple[str, Sequence[MethodEntry]]]) -> str:
    output = f'# Search Results for "{query}"\n\n'
    for class_name, methods in results:
        output += f"## {class_name}\n\n"
        for method in methods:
            output += _method_section(method)
    return output


# ---------------------------------------------------------------------------
# class-info
# ---------------------------------------------------------------------------


def render_class_prompt(available: Iterable[str]) -> str:
    return f"Please specify a class name. Available classes: {', '.join(available)}"


def render_class_not_found(class_name: str, available: Iterable[str]) -> str:
    return f'Class "{class_name}" not found. Available classes: {", ".join(available)}'


def render_class_info(class_name: str, entry: ClassEntry) -> str:
    """Render a class heading, its description and whichever of the
    Methods / Usage sections the entry carries."""
    output = f"# {class_name}\n\n{entry.description}\n\n"
    if entry.has_methods:
        output += "## Methods\n\n"
        for method in entry.methods:
            output += _method_section(method)
    if entry.has_usage:
        output += f"## Usage\n{entry.usage}\n\n"
    return output


# ---------------------------------------------------------------------------
# packages
# ---------------------------------------------------------------------------


def _package_section(pkg: PackageEntry) -> str:
    section = (
        f"### {pkg.name}\n"
        f"{pkg.description}\n\n"
        f"**Installation:**\n{_fence(pkg.install)}\n\n"
    )
    if pkg.usage:
        section += f"**Usage:**\n{_fence(pkg.usage, 'csharp')}\n\n"
    return section


def render_packages(kb: KnowledgeBase, categories: Iterable[str]) -> str:
    """Render the packages of each category in *categories*.

    Categories missing from the knowledge base are skipped silently.
    """
    output = f"# {kb.name} Packages\n\n"
    for category in categories:
        packages = kb.packages.get(category)
        if packages is None:
            continue
        output += f"## {category[:1].upper() + category[1:]} Packages\n\n"
        for pkg in packages:
            output += _package_section(pkg)
    return output


# ---------------------------------------------------------------------------
# usage-pattern
# ---------------------------------------------------------------------------


def render_pattern_list(patterns: Iterable[PatternEntry]) -> str:
    names = "\n".join(f"- {p.name}" for p in patterns)
    return f"# Common Usage Patterns\n\nAvailable patterns:\n{names}"


def render_no_patterns(pattern: str) -> str:
    return f'No patterns found matching "{pattern}".'


def render_patterns(pattern: str, matches: Iterable[PatternEntry]) -> str:
    output = f'# Usage Patterns for "{pattern}"\n\n'
    for p in matches:
        output += f"## {p.name}\n\n{_fence(p.code, 'csharp')}\n\n"
    return output


# ---------------------------------------------------------------------------
# fetch-remote-docs
# ---------------------------------------------------------------------------


def render_remote_doc(topic: str | None, body: str) -> str:
    return f"# GitHub Documentation: {topic or 'README'}\n\n{body}"


def render_remote_failure(message: str) -> str:
    return f"Failed to fetch GitHub documentation: {message}"

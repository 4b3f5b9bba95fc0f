"""Case-insensitive substring matching over knowledge base records."""

from __future__ import annotations

from autofixture_mcp.knowledge import KnowledgeBase, MethodEntry, PatternEntry


def contains(query: str, *fields: str) -> bool:
    """Return True if any field contains *query*, ignoring case."""
    needle = query.lower()
    return any(needle in f.lower() for f in fields)


def search_methods(kb: KnowledgeBase, query: str) -> list[tuple[str, list[MethodEntry]]]:
    """Find methods whose name or description contains *query*.

    Results are grouped per class, both levels in dataset order. Classes
    without a match are left out.
    """
    results: list[tuple[str, list[MethodEntry]]] = []
    for class_name, entry in kb.classes.items():
        if not entry.has_methods:
            continue
        hits = [m for m in entry.methods if contains(query, m.name, m.description)]
        if hits:
            results.append((class_name, hits))
    return results


def search_patterns(kb: KnowledgeBase, pattern: str) -> list[PatternEntry]:
    """Find usage patterns whose name or code contains *pattern*."""
    return [p for p in kb.patterns if contains(pattern, p.name, p.code)]

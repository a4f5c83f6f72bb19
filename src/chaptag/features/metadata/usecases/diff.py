"""Summary: Line diff between two canonical metadata documents.
Why: Users confirm an apply after seeing exactly which keys change."""

from __future__ import annotations

from difflib import unified_diff


def diff_documents(current: str, new: str, *, label: str = "metadata") -> str:
    """Return a unified diff from ``current`` to ``new``; empty when equal."""
    lines = unified_diff(
        current.splitlines(keepends=True),
        new.splitlines(keepends=True),
        fromfile=f"{label} (current)",
        tofile=f"{label} (new)",
    )
    return "".join(line if line.endswith("\n") else f"{line}\n" for line in lines)


__all__ = ["diff_documents"]

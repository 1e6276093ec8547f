"""Presentation shapes for categorized extension views.

The functions in this module are pure: they turn a
:class:`~rvisa.model.CategorizedView` into labelled
:class:`~rvisa.model.Section` blocks that a renderer can print, style or
serialize.  Three shapes exist:

* compact   -- ``("Z-Bit Manipulation", "Zba Zbb")``
* explained -- ``("Z-Extensions (Bit Manipulation)", (("Zba", "Address Generation"), ...))``
* flagged   -- ``("Z-Extensions (Bit Manipulation)", (("✓", "Zba", "Address Generation"), ...))``
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Tuple

from .extensions import ExtensionKind
from .model import CategorizedView, CategoryGroup, Section, VectorInfo

SUPPORTED_MARK = "✓"
UNSUPPORTED_MARK = "✗"

# Minimum width of the name column in explained output
NAME_COLUMN = 10


def compact_label(kind: ExtensionKind, group: CategoryGroup) -> str:
    if kind is ExtensionKind.STANDARD:
        return "Ext"
    return f"{kind.name}-{group.label}"


def explained_label(kind: ExtensionKind, group: CategoryGroup) -> str:
    if kind is ExtensionKind.STANDARD:
        return "Extensions"
    return f"{kind.name}-Extensions ({group.label})"


def compact_sections(view: CategorizedView) -> List[Section]:
    """Return one ``(label, space-joined names)`` section per group."""
    sections: List[Section] = []
    for group in view:
        names = [e.descriptor.display_name for e in group.entries if e.supported]
        if names:
            sections.append(Section(compact_label(view.kind, group), (" ".join(names),)))
    return sections


def explained_sections(view: CategorizedView) -> List[Section]:
    """Return ``(label, ((name, description), ...))`` sections per group."""
    sections: List[Section] = []
    for group in view:
        pairs = tuple(
            (e.descriptor.display_name, e.descriptor.description)
            for e in group.entries
            if e.supported
        )
        if pairs:
            sections.append(Section(explained_label(view.kind, group), pairs))
    return sections


def flagged_sections(view: CategorizedView, with_description: bool = True) -> List[Section]:
    """Return sections listing every entry with a supported marker.

    Each item is ``(marker, name, description)``; the description is
    ``None`` when ``with_description`` is false.
    """
    sections: List[Section] = []
    for group in view:
        items = tuple(
            (
                SUPPORTED_MARK if e.supported else UNSUPPORTED_MARK,
                e.descriptor.display_name,
                e.descriptor.description if with_description else None,
            )
            for e in group.entries
        )
        sections.append(Section(explained_label(view.kind, group), items))
    return sections


def align_pairs(pairs: Iterable[Tuple[str, str]], minimum: int = NAME_COLUMN) -> List[str]:
    """Format ``(name, description)`` pairs with the names in one column."""
    pairs = list(pairs)
    width = max([minimum] + [len(name) for name, _ in pairs])
    return [f"{name:<{width}} {desc}" for name, desc in pairs]


def names_line(names: Sequence[str]) -> str:
    return " ".join(names)


def format_vector(info: Optional[VectorInfo]) -> Optional[str]:
    """Return ``"Enabled"`` / ``"Enabled, VLEN>=N"``, or ``None`` without vectors."""
    if info is None or not info.enabled:
        return None
    if info.min_vlen is None:
        return "Enabled"
    return f"Enabled, VLEN>={info.min_vlen}"

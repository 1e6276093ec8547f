"""String-in, string-out helpers over the parsing pipeline.

These are the operations the command line and scripts use most::

    >>> parse_compact("rv64gc")
    'I M A F D C'
    >>> parse_z("rv64gc")
    'zicsr zifencei'
    >>> parse_vector("rv64imafdcv_zvl256b")
    'Enabled, VLEN>=256'

Every function accepts any string, including an empty one, and never
raises.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from .extensions import CATALOG, ExtensionCatalog, ExtensionKind
from .formatter import format_vector, names_line
from .grouping import group
from .model import CategorizedView, GroupMode
from .parser import parse_isa


def parse_compact(isa: str, catalog: ExtensionCatalog = CATALOG) -> str:
    """Standard extension letters in canonical order, space separated."""
    return names_line(parse_isa(isa, catalog).names(ExtensionKind.STANDARD))


def parse_z(isa: str, catalog: ExtensionCatalog = CATALOG) -> str:
    """Lowercase Z-extension names in input order, space separated."""
    return names_line([d.key for d in parse_isa(isa, catalog).z_extensions])


def parse_s(isa: str, catalog: ExtensionCatalog = CATALOG) -> str:
    """Lowercase S-extension names in input order, space separated."""
    return names_line([d.key for d in parse_isa(isa, catalog).s_extensions])


def parse_vector(isa: str, catalog: ExtensionCatalog = CATALOG) -> Optional[str]:
    """``"Enabled"``, ``"Enabled, VLEN>=N"``, or ``None`` without vectors."""
    return format_vector(parse_isa(isa, catalog).vector)


def explain(
    isa: str,
    kind: ExtensionKind = ExtensionKind.STANDARD,
    catalog: ExtensionCatalog = CATALOG,
) -> List[Tuple[str, str]]:
    """``(name, description)`` pairs for the extensions of ``kind`` in ``isa``.

    Standard extensions come out in canonical order, Z and S extensions
    in the order they were written.
    """
    parsed = parse_isa(isa, catalog)
    return [(d.display_name, d.description) for d in parsed.of_kind(kind)]


def categorized(
    isa: str,
    kind: ExtensionKind,
    mode: GroupMode = GroupMode.PRESENT,
    catalog: ExtensionCatalog = CATALOG,
) -> CategorizedView:
    """Group the extensions of ``kind`` in ``isa`` by category."""
    return group(parse_isa(isa, catalog), kind, mode, catalog)

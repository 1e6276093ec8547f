"""Group extensions by display category.

Two modes are supported:

* ``GroupMode.PRESENT`` lists only the extensions found in a
  :class:`ParsedIsa`.  Categories without any entry are left out.
* ``GroupMode.ALL`` lists every extension of the catalog and marks each
  one with whether the parsed ISA supports it.  Every category is
  always present, even when none of its entries is supported.

In both modes categories follow their declared display order and
entries follow catalog order, not input order, so the output is stable
for a given ISA string.
"""

from __future__ import annotations

from typing import List

from .extensions import CATALOG, ExtensionCatalog, ExtensionKind
from .model import CategorizedView, CategoryGroup, GroupEntry, GroupMode, ParsedIsa


def group(
    parsed: ParsedIsa,
    kind: ExtensionKind,
    mode: GroupMode = GroupMode.PRESENT,
    catalog: ExtensionCatalog = CATALOG,
) -> CategorizedView:
    """Bucket the extensions of ``kind`` by category.

    Standard extensions have no categories; they are returned as a
    single group whose ``category`` is ``None``.

    Args:
        parsed: Result of :func:`rvisa.parser.parse_isa`.
        kind: Which extension family to group.
        mode: Present-only or all-with-support-flag.
        catalog: Catalog providing declaration and category order.

    Returns:
        A :class:`CategorizedView`.
    """
    all_entries = [
        GroupEntry(descriptor=d, supported=parsed.supports(d))
        for d in catalog.all_of_kind(kind)
    ]
    if mode is GroupMode.PRESENT:
        all_entries = [e for e in all_entries if e.supported]

    categories = catalog.categories_of_kind(kind)
    groups: List[CategoryGroup] = []
    if not categories:
        if all_entries or mode is GroupMode.ALL:
            groups.append(CategoryGroup(category=None, entries=tuple(all_entries)))
    else:
        for category in categories:
            entries = tuple(e for e in all_entries if e.descriptor.category is category)
            if entries or mode is GroupMode.ALL:
                groups.append(CategoryGroup(category=category, entries=entries))

    return CategorizedView(kind=kind, mode=mode, groups=tuple(groups))

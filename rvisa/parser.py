"""ISA string parser.

Turns a kernel supplied ISA string such as
``rv64imafdcv_zicsr_zifencei_zvl256b_sstc`` into a :class:`ParsedIsa`.
Parsing happens in two steps:

1. :func:`tokenize` splits the string into an optional ``rv32``/``rv64``
   prefix, the run of single-letter standard extensions and the
   underscore separated multi-letter names.
2. :func:`resolve` looks every piece up in an
   :class:`~rvisa.extensions.ExtensionCatalog` and builds the normalized
   extension sets, then :func:`infer_vector` derives the vector
   capability from them.

The parser is best-effort and never raises: the input comes from the
kernel and an unknown or malformed piece is simply skipped, so one new
extension name never hides the rest of the string.  It performs no I/O
and keeps no state between calls.

Example usage::

    from rvisa.parser import parse_isa

    parsed = parse_isa("rv64gc_zba_zbb")
    [d.name for d in parsed.standard]      # ['I', 'M', 'A', 'F', 'D', 'C']
    [d.name for d in parsed.z_extensions]  # ['Zicsr', 'Zifencei', 'Zba', 'Zbb']
"""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from .extensions import CATALOG, ExtensionCatalog, ExtensionDescriptor, ExtensionKind
from .model import IsaTokens, ParsedIsa, VectorInfo

# Only these widths are recognised.  Any other prefix such as "rv128" stays
# in the letter run, so its "v" reads as the vector extension.
BASE_PREFIXES = ("rv32", "rv64")

# G is shorthand for IMAFD plus Zicsr and Zifencei.
G_LETTERS = "imafd"
G_IMPLIED_Z = ("zicsr", "zifencei")


def tokenize(raw: str) -> IsaTokens:
    """Split a raw ISA string into prefix, letters and suffix names.

    The whole input is lowercased first.  A leading ``rv32``/``rv64`` is
    consumed as the prefix before any letter is looked at, which is why
    the ``v`` of ``rv64`` can never be read as the vector extension.

    Example::

        'rv64imac_zicsr_zba' -> IsaTokens('rv64', 'imac', ('zicsr', 'zba'))
        'imac'               -> IsaTokens(None, 'imac', ())

    Args:
        raw: ISA string, possibly empty.

    Returns:
        The :class:`IsaTokens` for ``raw``.
    """
    text = (raw or "").strip().lower()
    prefix: Optional[str] = None
    for candidate in BASE_PREFIXES:
        if text.startswith(candidate):
            prefix = candidate
            text = text[len(candidate):]
            break
    pieces = text.split("_")
    letters = pieces[0]
    # Doubled underscores leave empty pieces behind
    suffixes = tuple(p for p in pieces[1:] if p)
    return IsaTokens(prefix=prefix, letters=letters, suffixes=suffixes)


def resolve(tokens: IsaTokens, catalog: ExtensionCatalog = CATALOG) -> ParsedIsa:
    """Resolve tokenizer output against the extension catalog.

    Standard letters are emitted in canonical order regardless of how
    they were written.  ``g`` expands to I, M, A, F, D and implies
    Zicsr and Zifencei.  When both ``e`` and ``i`` are present, E is
    kept and I dropped.  Z and S names keep their input order; the
    names implied by ``g`` come first, and a name that is repeated is
    only reported once.

    Args:
        tokens: Output of :func:`tokenize`.
        catalog: Catalog used for every lookup.

    Returns:
        A :class:`ParsedIsa` without vector information; see
        :func:`parse_isa` for the complete pipeline.
    """
    standard = _resolve_letters(tokens.letters, catalog)

    z_found: List[ExtensionDescriptor] = []
    s_found: List[ExtensionDescriptor] = []
    if "g" in tokens.letters:
        for key in G_IMPLIED_Z:
            descriptor = catalog.lookup(key)
            if descriptor is not None:
                z_found.append(descriptor)

    for token in tokens.suffixes:
        descriptor = catalog.lookup(token)
        if descriptor is None:
            continue
        if descriptor.kind is ExtensionKind.Z:
            bucket = z_found
        elif descriptor.kind is ExtensionKind.S:
            bucket = s_found
        else:
            # Single letters after an underscore are not part of the base run
            continue
        if descriptor not in bucket:
            bucket.append(descriptor)

    return ParsedIsa(
        base_width=tokens.base_width,
        standard=tuple(standard),
        z_extensions=tuple(z_found),
        s_extensions=tuple(s_found),
    )


def _resolve_letters(letters: str, catalog: ExtensionCatalog) -> List[ExtensionDescriptor]:
    present = set()
    for ch in letters:
        if ch == "g":
            present.update(G_LETTERS)
            continue
        descriptor = catalog.lookup(ch)
        if descriptor is not None and descriptor.kind is ExtensionKind.STANDARD:
            present.add(descriptor.key)
    # E and I are mutually exclusive; E wins.
    if "e" in present:
        present.discard("i")
    return [d for d in catalog.all_of_kind(ExtensionKind.STANDARD) if d.key in present]


def infer_vector(
    z_extensions: Sequence[ExtensionDescriptor],
    standard: Sequence[ExtensionDescriptor],
    catalog: ExtensionCatalog = CATALOG,
) -> Optional[VectorInfo]:
    """Infer vector capability from resolved extensions.

    Vectors are enabled when ``V`` is present or any ``Zve*`` extension
    is.  The minimum VLEN is the largest ``Zvl<N>b`` marker found; only
    the lengths registered in the catalog count.  ELEN is 64 with ``V``
    or a ``Zve64*`` extension and 32 with only ``Zve32*``.

    Returns:
        ``None`` when nothing signals vector support, otherwise a
        :class:`VectorInfo` whose ``min_vlen`` may be ``None``.
    """
    markers: Dict[str, int] = catalog.vector_length_markers()
    has_v = any(d.key == "v" for d in standard)
    zve = [d.key for d in z_extensions if d.key.startswith("zve")]
    if not has_v and not zve:
        return None

    lengths = [markers[d.key] for d in z_extensions if d.key in markers]
    min_vlen = max(lengths) if lengths else None

    if has_v or any(key.startswith("zve64") for key in zve):
        elen: Optional[int] = 64
    else:
        elen = 32
    return VectorInfo(enabled=True, min_vlen=min_vlen, elen=elen)


def parse_isa(raw: str, catalog: ExtensionCatalog = CATALOG) -> ParsedIsa:
    """Run the full pipeline on ``raw``: tokenize, resolve, infer vectors."""
    tokens = tokenize(raw)
    resolved = resolve(tokens, catalog)
    vector = infer_vector(resolved.z_extensions, resolved.standard, catalog)
    return ParsedIsa(
        raw=raw or "",
        base_width=resolved.base_width,
        standard=resolved.standard,
        z_extensions=resolved.z_extensions,
        s_extensions=resolved.s_extensions,
        vector=vector,
    )

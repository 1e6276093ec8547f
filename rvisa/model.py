"""Data model for parsed ISA strings and host reports.

The classes here are plain value objects.  Parsing produces a
:class:`ParsedIsa`; grouping produces a :class:`CategorizedView`; the
host reader wraps both together with the hardware facts it collected in
a :class:`HostReport`, which is what the renderers consume.

All ISA-related objects are frozen: a parse result is built once per
call and never modified, so results can be cached, compared and shared
freely.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, List, NamedTuple, Optional, Tuple

from .extensions import Category, ExtensionDescriptor, ExtensionKind


@dataclass(frozen=True)
class IsaTokens:
    """Raw pieces of an ISA string after tokenization.

    ``prefix`` is ``"rv32"`` or ``"rv64"`` when the string started with
    one, ``letters`` is the run of single-letter extensions and
    ``suffixes`` the underscore-separated multi-letter names, in input
    order.  Everything is lowercase.
    """

    prefix: Optional[str] = None
    letters: str = ""
    suffixes: Tuple[str, ...] = ()

    @property
    def base_width(self) -> Optional[int]:
        if self.prefix is None:
            return None
        return int(self.prefix[2:])


@dataclass(frozen=True)
class VectorInfo:
    """Vector capability inferred from the ISA string.

    ``min_vlen`` is the guaranteed minimum vector register length in
    bits, taken from the largest ``zvl<N>b`` marker.  It is ``None``
    when vectors are enabled but no marker is present; in that case the
    length is implementation defined and must not be shown as a number.
    ``elen`` is the maximum element width when it can be deduced.
    """

    enabled: bool = True
    min_vlen: Optional[int] = None
    elen: Optional[int] = None


@dataclass(frozen=True)
class ParsedIsa:
    """Normalized view of an ISA string."""

    raw: str = ""
    base_width: Optional[int] = None
    standard: Tuple[ExtensionDescriptor, ...] = ()
    z_extensions: Tuple[ExtensionDescriptor, ...] = ()
    s_extensions: Tuple[ExtensionDescriptor, ...] = ()
    vector: Optional[VectorInfo] = None

    def of_kind(self, kind: ExtensionKind) -> Tuple[ExtensionDescriptor, ...]:
        """Return the resolved extensions of ``kind``."""
        if kind is ExtensionKind.STANDARD:
            return self.standard
        if kind is ExtensionKind.Z:
            return self.z_extensions
        return self.s_extensions

    def supports(self, descriptor: ExtensionDescriptor) -> bool:
        """True when ``descriptor`` was resolved from the ISA string."""
        return descriptor in self.of_kind(descriptor.kind)

    def names(self, kind: ExtensionKind) -> List[str]:
        return [d.display_name for d in self.of_kind(kind)]


class GroupMode(Enum):
    """How :func:`rvisa.grouping.group` selects extensions."""

    PRESENT = "present"
    ALL = "all"


@dataclass(frozen=True)
class GroupEntry:
    descriptor: ExtensionDescriptor
    supported: bool = True


@dataclass(frozen=True)
class CategoryGroup:
    """Extensions of one category.  ``category`` is ``None`` for standard."""

    category: Optional[Category]
    entries: Tuple[GroupEntry, ...] = ()

    @property
    def label(self) -> str:
        return self.category.label if self.category is not None else "Standard"


@dataclass(frozen=True)
class CategorizedView:
    """Ordered category groups for one extension kind."""

    kind: ExtensionKind
    mode: GroupMode
    groups: Tuple[CategoryGroup, ...] = ()

    def __iter__(self):
        return iter(self.groups)

    def __len__(self) -> int:
        return len(self.groups)

    def entries(self) -> Iterable[GroupEntry]:
        for group in self.groups:
            yield from group.entries


class Section(NamedTuple):
    """A labelled block of presentation items, unpackable as ``(label, items)``."""

    label: str
    items: Tuple[Any, ...] = ()


# ----------------------------------------------------------------------
# Host facts


@dataclass
class HardwareIds:
    """Machine identification CSRs as reported by the kernel."""

    mvendorid: str = ""
    marchid: str = ""
    mimpid: str = ""

    def any(self) -> bool:
        return bool(self.mvendorid or self.marchid or self.mimpid)

    def summary(self) -> str:
        parts = []
        if self.mvendorid:
            parts.append(f"vendor:{self.mvendorid}")
        if self.marchid:
            parts.append(f"arch:{self.marchid}")
        if self.mimpid:
            parts.append(f"impl:{self.mimpid}")
        return " ".join(parts)


@dataclass
class CacheInfo:
    """Cache sizes of the first hart, as the kernel prints them (``32K``)."""

    l1d: Optional[str] = None
    l1i: Optional[str] = None
    l2: Optional[str] = None
    l3: Optional[str] = None

    def summary(self) -> str:
        parts = []
        for label, size in (("L1D", self.l1d), ("L1I", self.l1i), ("L2", self.l2), ("L3", self.l3)):
            if size:
                parts.append(f"{label}:{size}")
        return " ".join(parts)


@dataclass
class SystemInfo:
    """Generic, non RISC-V specific host information."""

    board: str = ""
    os: str = "Linux"
    kernel: str = "Unknown"
    memory_used_bytes: int = 0
    memory_total_bytes: int = 0
    uptime_seconds: int = 0
    user: str = "unknown"
    hostname: str = "unknown"


@dataclass
class HostReport:
    """Everything the renderers need to describe one host."""

    isa: str
    parsed: ParsedIsa
    hart_count: int = 0
    hardware_ids: HardwareIds = field(default_factory=HardwareIds)
    cache: CacheInfo = field(default_factory=CacheInfo)
    sysfs_vlen: Optional[int] = None
    system: Optional[SystemInfo] = None

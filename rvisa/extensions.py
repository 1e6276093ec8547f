"""Catalog of known RISC-V ISA extensions.

Every extension the tool can recognise is declared here exactly once:
the single-letter standard extensions, the unprivileged ``Z*``
extensions and the privileged ``S*`` extensions.  Each entry records
its canonical spelling, a one-line description and, for Z/S entries, a
display category.

The tables are turned into an :class:`ExtensionCatalog` when the module
is imported.  The catalog is frozen after construction; it is the only
state shared between parsing calls and is passed explicitly (usually as
the default argument :data:`CATALOG`) to every function that needs it.

Declaration order matters.  Standard extensions are listed in canonical
order (I, E, M, A, F, D, Q, C, B, V, H), categories are listed in their
display order and entries inside a category keep the order in which
they appear in the tables below.

Descriptions follow the RISC-V ISA manual (2025-11 ratified set) and the
extension names accepted by LLVM 22.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Sequence, Tuple, Union

from .registry import Registry


class ExtensionKind(Enum):
    """The three families of ISA extensions."""

    STANDARD = "standard"
    Z = "z"
    S = "s"


class _Category(Enum):
    """Base for category enums: each member is ``(id, label)``."""

    def __init__(self, ident: str, label: str) -> None:
        self.ident = ident
        self.label = label

    def __str__(self) -> str:
        return self.label


class ZCategory(_Category):
    """Display categories for unprivileged Z-extensions, in display order."""

    BASE = ("base", "Base")
    HINT = ("hint", "Hints")
    CACHE = ("cache", "Cache")
    COND = ("cond", "Conditional")
    BIT = ("bit", "Bit Manipulation")
    CRYPTO = ("crypto", "Cryptography")
    FP = ("fp", "Floating Point")
    COMP = ("comp", "Compressed")
    ATOMIC = ("atomic", "Atomics")
    MEM = ("mem", "Memory Model")
    MUL = ("mul", "Multiply")
    VEC = ("vec", "Vector")
    VCRYPTO = ("vcrypto", "Vector Crypto")
    OTHER = ("other", "Other")


class SCategory(_Category):
    """Display categories for privileged S-extensions, in display order."""

    VM = ("vm", "Virtual Memory")
    SUP = ("sup", "Supervisor")
    MACH = ("mach", "Machine")
    HYP = ("hyp", "Hypervisor")
    DEBUG = ("debug", "Debug")
    USER = ("user", "User")


Category = Union[ZCategory, SCategory]


@dataclass(frozen=True)
class ExtensionDescriptor:
    """A single known extension.

    ``order`` is the position of the entry within its kind, which is the
    declaration order of the tables in this module.
    """

    name: str
    kind: ExtensionKind
    description: str
    category: Optional[Category] = None
    order: int = 0

    @property
    def key(self) -> str:
        """Lowercased lookup key (``"zicsr"``, ``"i"``)."""
        return self.name.lower()

    @property
    def display_name(self) -> str:
        """Bare upper-case letter for standard entries, ``Zicsr`` style otherwise."""
        if self.kind is ExtensionKind.STANDARD:
            return self.name.upper()
        return self.name

    def __str__(self) -> str:
        return self.display_name


# ----------------------------------------------------------------------
# Extension tables

# (name, description)
STANDARD_EXTENSIONS: Tuple[Tuple[str, str], ...] = (
    ("I", "Base Integer Instructions"),
    ("E", "Embedded (16 registers)"),
    ("M", "Integer Multiply/Divide"),
    ("A", "Atomic Instructions"),
    ("F", "Single-Precision Float"),
    ("D", "Double-Precision Float"),
    ("Q", "Quad-Precision Float"),
    ("C", "Compressed (16-bit)"),
    ("B", "Bit Manipulation"),
    ("V", "Vector (SIMD)"),
    ("H", "Hypervisor"),
)

# (name, description, category)
Z_EXTENSIONS: Tuple[Tuple[str, str, ZCategory], ...] = (
    # Base/CSR
    ("Zicsr", "CSR Instructions", ZCategory.BASE),
    ("Zifencei", "Instruction-Fetch Fence", ZCategory.BASE),
    ("Zicntr", "Base Counters/Timers", ZCategory.BASE),
    ("Zihpm", "Hardware Perf Counters", ZCategory.BASE),
    # Hints
    ("Zihintpause", "Pause Hint", ZCategory.HINT),
    ("Zihintntl", "Non-Temporal Hints", ZCategory.HINT),
    # Cache
    ("Zicbom", "Cache-Block Management", ZCategory.CACHE),
    ("Zicboz", "Cache-Block Zero", ZCategory.CACHE),
    ("Zicbop", "Cache-Block Prefetch", ZCategory.CACHE),
    # Conditional
    ("Zicond", "Conditional Operations", ZCategory.COND),
    # Bit manipulation
    ("Zba", "Address Generation", ZCategory.BIT),
    ("Zbb", "Basic Bit Manipulation", ZCategory.BIT),
    ("Zbc", "Carry-less Multiply", ZCategory.BIT),
    ("Zbs", "Single-bit Operations", ZCategory.BIT),
    # Scalar cryptography
    ("Zbkb", "Bit Manip for Crypto", ZCategory.CRYPTO),
    ("Zbkc", "Carry-less for Crypto", ZCategory.CRYPTO),
    ("Zbkx", "Crossbar for Crypto", ZCategory.CRYPTO),
    ("Zk", "Scalar Crypto (All)", ZCategory.CRYPTO),
    ("Zkn", "NIST Algorithm Suite", ZCategory.CRYPTO),
    ("Zknd", "AES Decryption", ZCategory.CRYPTO),
    ("Zkne", "AES Encryption", ZCategory.CRYPTO),
    ("Zknh", "SHA-2 Hash", ZCategory.CRYPTO),
    ("Zks", "ShangMi Suite", ZCategory.CRYPTO),
    ("Zksed", "SM4 Block Cipher", ZCategory.CRYPTO),
    ("Zksh", "SM3 Hash", ZCategory.CRYPTO),
    ("Zkr", "Entropy Source", ZCategory.CRYPTO),
    ("Zkt", "Data-Indep Timing", ZCategory.CRYPTO),
    # Floating point
    ("Zfh", "Half-Precision Float", ZCategory.FP),
    ("Zfhmin", "Minimal Half-Precision", ZCategory.FP),
    ("Zfa", "Additional FP Instrs", ZCategory.FP),
    ("Zfinx", "Float in Int Regs", ZCategory.FP),
    ("Zdinx", "Double in Int Regs", ZCategory.FP),
    ("Zhinx", "Half in Int Regs", ZCategory.FP),
    ("Zhinxmin", "Min Half in Int Regs", ZCategory.FP),
    ("Zfbfmin", "Scalar BFloat16", ZCategory.FP),
    # Compressed
    ("Zca", "Compressed Base", ZCategory.COMP),
    ("Zcb", "Compressed Basic Ops", ZCategory.COMP),
    ("Zcd", "Compressed Double FP", ZCategory.COMP),
    ("Zcf", "Compressed Single FP", ZCategory.COMP),
    ("Zcmp", "Compressed Push/Pop", ZCategory.COMP),
    ("Zcmt", "Compressed Table Jump", ZCategory.COMP),
    ("Zcmop", "Compressed May-Be-Ops", ZCategory.COMP),
    ("Zclsd", "Compressed LD/SD Pair", ZCategory.COMP),
    # Atomics
    ("Zacas", "Atomic Compare-and-Swap", ZCategory.ATOMIC),
    ("Zabha", "Atomic Byte/Halfword", ZCategory.ATOMIC),
    ("Zaamo", "Atomic AMO Subset", ZCategory.ATOMIC),
    ("Zalrsc", "Atomic LR/SC Subset", ZCategory.ATOMIC),
    ("Zawrs", "Wait-on-Reservation-Set", ZCategory.ATOMIC),
    # Memory model
    ("Za64rs", "Reservation Set 64B", ZCategory.MEM),
    ("Za128rs", "Reservation Set 128B", ZCategory.MEM),
    ("Zama16b", "Misaligned Atomics 16B", ZCategory.MEM),
    ("Zic64b", "64-byte Cache Block", ZCategory.MEM),
    ("Ziccamoa", "Main Mem Atomics AMO", ZCategory.MEM),
    ("Ziccamoc", "Main Mem Atomics CAS", ZCategory.MEM),
    ("Ziccif", "Inst Fetch Coherence", ZCategory.MEM),
    ("Zicclsm", "Load/Store Misaligned", ZCategory.MEM),
    ("Ziccrse", "Reservation Set Size", ZCategory.MEM),
    ("Ztso", "Total Store Ordering", ZCategory.MEM),
    # Multiply
    ("Zmmul", "Multiply Only (no Div)", ZCategory.MUL),
    # Other
    ("Zimop", "May-Be-Operations", ZCategory.OTHER),
    ("Zilsd", "Load/Store Pair", ZCategory.OTHER),
    # Vector
    ("Zve32f", "Vector 32-bit Float", ZCategory.VEC),
    ("Zve32x", "Vector 32-bit Int", ZCategory.VEC),
    ("Zve64d", "Vector 64-bit Double", ZCategory.VEC),
    ("Zve64f", "Vector 64-bit Float", ZCategory.VEC),
    ("Zve64x", "Vector 64-bit Int", ZCategory.VEC),
    ("Zvfh", "Vector Half-Precision", ZCategory.VEC),
    ("Zvfhmin", "Min Vector Half-Prec", ZCategory.VEC),
    ("Zvfbfmin", "Vector BFloat16 Conv", ZCategory.VEC),
    ("Zvfbfwma", "Vector BF16 Widen MA", ZCategory.VEC),
    ("Zvl32b", "VLEN >= 32 bits", ZCategory.VEC),
    ("Zvl64b", "VLEN >= 64 bits", ZCategory.VEC),
    ("Zvl128b", "VLEN >= 128 bits", ZCategory.VEC),
    ("Zvl256b", "VLEN >= 256 bits", ZCategory.VEC),
    ("Zvl512b", "VLEN >= 512 bits", ZCategory.VEC),
    ("Zvl1024b", "VLEN >= 1024 bits", ZCategory.VEC),
    ("Zvl2048b", "VLEN >= 2048 bits", ZCategory.VEC),
    ("Zvl4096b", "VLEN >= 4096 bits", ZCategory.VEC),
    ("Zvl8192b", "VLEN >= 8192 bits", ZCategory.VEC),
    ("Zvl16384b", "VLEN >= 16384 bits", ZCategory.VEC),
    ("Zvl32768b", "VLEN >= 32768 bits", ZCategory.VEC),
    ("Zvl65536b", "VLEN >= 65536 bits", ZCategory.VEC),
    # Vector cryptography
    ("Zvbb", "Vector Bit Manipulation", ZCategory.VCRYPTO),
    ("Zvbc", "Vector Carry-less Mul", ZCategory.VCRYPTO),
    ("Zvkb", "Vector Crypto Bit Manip", ZCategory.VCRYPTO),
    ("Zvkg", "Vector GCM/GMAC", ZCategory.VCRYPTO),
    ("Zvkn", "Vector NIST (All)", ZCategory.VCRYPTO),
    ("Zvknc", "Vector NIST+Carryless", ZCategory.VCRYPTO),
    ("Zvkned", "Vector AES", ZCategory.VCRYPTO),
    ("Zvkng", "Vector NIST+GCM", ZCategory.VCRYPTO),
    ("Zvknha", "Vector SHA-2 (256)", ZCategory.VCRYPTO),
    ("Zvknhb", "Vector SHA-2 (512)", ZCategory.VCRYPTO),
    ("Zvks", "Vector ShangMi (All)", ZCategory.VCRYPTO),
    ("Zvksc", "Vector SM+Carryless", ZCategory.VCRYPTO),
    ("Zvksed", "Vector SM4", ZCategory.VCRYPTO),
    ("Zvksg", "Vector SM+GCM", ZCategory.VCRYPTO),
    ("Zvksh", "Vector SM3", ZCategory.VCRYPTO),
    ("Zvkt", "Vector Data-Indep Time", ZCategory.VCRYPTO),
)

# (name, description, category)
S_EXTENSIONS: Tuple[Tuple[str, str, SCategory], ...] = (
    # Virtual memory (Sv*)
    ("Svinval", "Fine-Grained TLB Inv", SCategory.VM),
    ("Svnapot", "NAPOT Translation", SCategory.VM),
    ("Svpbmt", "Page-Based Mem Types", SCategory.VM),
    ("Svade", "A/D Update on Fault", SCategory.VM),
    ("Svadu", "A/D Hardware Update", SCategory.VM),
    ("Svbare", "Bare Translation Mode", SCategory.VM),
    ("Svvptc", "VPTC Invalidation", SCategory.VM),
    # Supervisor (Ss*)
    ("Ssaia", "Adv Interrupt Arch", SCategory.SUP),
    ("Ssccfg", "Counter Config", SCategory.SUP),
    ("Ssccptr", "Common Ptr Convention", SCategory.SUP),
    ("Sscofpmf", "Count Overflow/Filter", SCategory.SUP),
    ("Sscounterenw", "Counter Enables", SCategory.SUP),
    ("Sscsrind", "Indirect CSR Access", SCategory.SUP),
    ("Ssctr", "Control Transfer Rec", SCategory.SUP),
    ("Ssdbltrp", "Double Trap", SCategory.SUP),
    ("Ssnpm", "Pointer Masking", SCategory.SUP),
    ("Sspm", "Pointer Masking", SCategory.SUP),
    ("Ssqosid", "QoS Identifiers", SCategory.SUP),
    ("Ssstateen", "State Enable", SCategory.SUP),
    ("Ssstrict", "No Non-Conforming Ext", SCategory.SUP),
    ("Sstc", "Supervisor Timer", SCategory.SUP),
    ("Sstvala", "Trap Value Address", SCategory.SUP),
    ("Sstvecd", "Trap Vector Mode", SCategory.SUP),
    ("Ssu64xl", "U-mode 64-bit", SCategory.SUP),
    # Machine (Sm*)
    ("Smaia", "Adv Interrupt Arch", SCategory.MACH),
    ("Smcdeleg", "Counter Delegation", SCategory.MACH),
    ("Smcntrpmf", "Counter PMF", SCategory.MACH),
    ("Smcsrind", "Indirect CSR Access", SCategory.MACH),
    ("Smctr", "Control Transfer Rec", SCategory.MACH),
    ("Smdbltrp", "Double Trap", SCategory.MACH),
    ("Smepmp", "Enhanced PMP", SCategory.MACH),
    ("Smmpm", "M-mode Ptr Masking", SCategory.MACH),
    ("Smnpm", "Nesting Ptr Masking", SCategory.MACH),
    ("Smrnmi", "Resumable NMI", SCategory.MACH),
    ("Smstateen", "State Enable", SCategory.MACH),
    # Hypervisor (Sh*)
    ("Sha", "H-mode Ext Subset", SCategory.HYP),
    ("Shcounterenw", "Counter Enables", SCategory.HYP),
    ("Shgatpa", "Guest Addr Translation", SCategory.HYP),
    ("Shlcofideleg", "Lcof Interrupt Deleg", SCategory.HYP),
    ("Shtvala", "H-mode Trap Value", SCategory.HYP),
    ("Shvsatpa", "VS-mode Saturation", SCategory.HYP),
    ("Shvstvala", "VS-mode Trap Value", SCategory.HYP),
    ("Shvstvecd", "VS-mode Trap Vector", SCategory.HYP),
    # Debug (Sd*)
    ("Sdext", "External Debug", SCategory.DEBUG),
    ("Sdtrig", "Debug Triggers", SCategory.DEBUG),
    # User (Su*)
    ("Supm", "U-mode Ptr Masking", SCategory.USER),
)

_VLEN_MARKER_RE = re.compile(r"^zvl(\d+)b$")


# ----------------------------------------------------------------------
# Catalog


class ExtensionCatalog:
    """Read-only index of :class:`ExtensionDescriptor` objects.

    Lookups are case-insensitive.  Keys are unique across all three
    kinds; registering the same name twice raises :class:`ValueError`
    while the catalog is being built.  Once built the catalog is frozen
    and never changes, so any number of callers may share one instance.
    """

    def __init__(
        self,
        standard: Sequence[Tuple[str, str]] = STANDARD_EXTENSIONS,
        z: Sequence[Tuple[str, str, ZCategory]] = Z_EXTENSIONS,
        s: Sequence[Tuple[str, str, SCategory]] = S_EXTENSIONS,
    ) -> None:
        self._table = Registry("extension", casefold=True)
        self._by_kind: Dict[ExtensionKind, Tuple[ExtensionDescriptor, ...]] = {}

        rows = {
            ExtensionKind.STANDARD: [(name, desc, None) for name, desc in standard],
            ExtensionKind.Z: list(z),
            ExtensionKind.S: list(s),
        }
        for kind, entries in rows.items():
            descriptors: List[ExtensionDescriptor] = []
            for order, (name, desc, category) in enumerate(entries):
                descriptor = ExtensionDescriptor(
                    name=name,
                    kind=kind,
                    description=desc,
                    category=category,
                    order=order,
                )
                self._table.add(descriptor.key, descriptor)
                descriptors.append(descriptor)
            self._by_kind[kind] = tuple(descriptors)
        self._table.freeze()

        self._vlen_markers: Dict[str, int] = {}
        for descriptor in self._by_kind[ExtensionKind.Z]:
            m = _VLEN_MARKER_RE.match(descriptor.key)
            if m:
                self._vlen_markers[descriptor.key] = int(m.group(1))

    def lookup(self, name: str) -> Optional[ExtensionDescriptor]:
        """Return the descriptor for ``name`` (any case), or ``None``."""
        return self._table.get(name)

    def all_of_kind(self, kind: ExtensionKind) -> Tuple[ExtensionDescriptor, ...]:
        """Return every descriptor of ``kind`` in declaration order."""
        return self._by_kind.get(kind, ())

    def categories_of_kind(self, kind: ExtensionKind) -> Tuple[Category, ...]:
        """Return the display categories of ``kind`` in display order.

        Standard extensions have no categories and yield an empty tuple.
        """
        if kind is ExtensionKind.Z:
            return tuple(ZCategory)
        if kind is ExtensionKind.S:
            return tuple(SCategory)
        return ()

    def vector_length_markers(self) -> Dict[str, int]:
        """Map each registered ``zvl<N>b`` key to its length ``N`` in bits."""
        return dict(self._vlen_markers)

    def __contains__(self, name: str) -> bool:
        return name in self._table

    def __len__(self) -> int:
        return len(self._table)


CATALOG = ExtensionCatalog()

"""Vendor banners shown above the host report.

Each entry is ``(aliases, display_name, subtitle)``.  Aliases are the
lowercase spellings accepted by ``--logo``; the first entry is the
default banner.
"""

from __future__ import annotations

from typing import Optional, Tuple

VENDORS: Tuple[Tuple[Tuple[str, ...], str, str], ...] = (
    # Default
    (("default", "riscv", "risc-v"), "RISC-V", "Architecture Info"),
    # IP/SoC providers
    (("sifive",), "SiFive", "RISC-V by SiFive"),
    (("starfive",), "StarFive", "RISC-V by StarFive"),
    (("thead", "t-head", "alibaba"), "T-Head", "RISC-V by T-Head"),
    # Board manufacturers
    (("milkv", "milk-v"), "Milk-V", "RISC-V by Milk-V"),
    (("sipeed",), "Sipeed", "RISC-V by Sipeed"),
    (("pine64", "pine"), "Pine64", "RISC-V by Pine64"),
    # SoC vendors
    (("kendryte", "canaan"), "Kendryte", "RISC-V by Kendryte"),
    (("allwinner",), "Allwinner", "RISC-V by Allwinner"),
    (("espressif", "esp"), "Espressif", "RISC-V by Espressif"),
    (("spacemit",), "SpacemiT", "RISC-V by SpacemiT"),
    (("sophgo",), "Sophgo", "RISC-V by Sophgo"),
    # MCU vendors
    (("wch", "winchiphead"), "WCH", "RISC-V by WCH"),
)


def get_vendor_info(alias: str) -> Optional[Tuple[str, str]]:
    """Return ``(display_name, subtitle)`` for ``alias`` (any case), or ``None``."""
    wanted = alias.lower()
    for aliases, display_name, subtitle in VENDORS:
        if wanted in aliases:
            return (display_name, subtitle)
    return None


def get_default_vendor() -> Tuple[str, str]:
    _, display_name, subtitle = VENDORS[0]
    return (display_name, subtitle)


def vendor_aliases() -> Tuple[str, ...]:
    """Primary alias of every vendor, for help text."""
    return tuple(aliases[0] for aliases, _, _ in VENDORS)

"""ASCII-art vendor logos for the terminal banner.

Every logo comes in two sizes: the full art used by ``--style normal``
and a one-line version used by ``--style small``.  Logos are keyed by
the primary alias of a :data:`rvisa.vendors.VENDORS` entry; vendors
without their own art use the default RISC-V logo.
"""

from __future__ import annotations

from typing import Dict, Tuple

from .vendors import VENDORS

# Accepted spellings -> canonical style
STYLE_ALIASES = {
    "normal": "normal",
    "small": "small",
    "compact": "small",
    "none": "none",
    "off": "none",
}

DEFAULT_LOGO = r"""
      ____  ____  ____   ____      __  __
     / __ \/_  _\/ ___\ / ___|    / / / /
    / /_/ / / /  \___ \/ /   ____/ / / /
   / _, _/ / /  /___/ / /___/___/ /_/ /
  /_/ |_| /_/  /_____/\____/    \____/

        RISC-V Architecture Info
"""

SIFIVE_LOGO = r"""
   _____ _ ______ _
  / ____(_)  ____(_)
 | (___  _| |__   ___   _____
  \___ \| |  __| | \ \ / / _ \
  ____) | | |    | |\ V /  __/
 |_____/|_|_|    |_| \_/ \___|

      RISC-V by SiFive
"""

STARFIVE_LOGO = r"""
  ____  _              _____ _
 / ___|| |_ __ _ _ __ |  ___(_)_   _____
 \___ \| __/ _` | '__|| |_  | \ \ / / _ \
  ___) | || (_| | |   |  _| | |\ V /  __/
 |____/ \__\__,_|_|   |_|   |_| \_/ \___|

      RISC-V by StarFive
"""

KENDRYTE_LOGO = r"""
  _  __              _            _
 | |/ /___ _ __   __| |_ __ _   _| |_ ___
 | ' // _ \ '_ \ / _` | '__| | | | __/ _ \
 | . \  __/ | | | (_| | |  | |_| | ||  __/
 |_|\_\___|_| |_|\__,_|_|   \__, |\__\___|
                            |___/
      RISC-V by Kendryte
"""

ALLWINNER_LOGO = r"""
     _    _ _         _
    / \  | | |_      _(_)_ __  _ __   ___ _ __
   / _ \ | | \ \ /\ / / | '_ \| '_ \ / _ \ '__|
  / ___ \| | |\ V  V /| | | | | | | |  __/ |
 /_/   \_\_|_| \_/\_/ |_|_| |_|_| |_|\___|_|

      RISC-V by Allwinner
"""

ESPRESSIF_LOGO = r"""
  _____                         _  __
 | ____|___ _ __  _ __ ___  ___(_)/ _|
 |  _| / __| '_ \| '__/ _ \/ __| | |_
 | |___\__ \ |_) | | |  __/\__ \ |  _|
 |_____|___/ .__/|_|  \___||___/_|_|
           |_|
      RISC-V by Espressif
"""

SPACEMIT_LOGO = r"""
  ____                           _ _____
 / ___| _ __   __ _  ___ ___ _ __ (_)_   _|
 \___ \| '_ \ / _` |/ __/ _ \ '_ \| | | |
  ___) | |_) | (_| | (_|  __/ | | | | | |
 |____/| .__/ \__,_|\___\___|_| |_|_| |_|
       |_|
      RISC-V by SpacemiT
"""

THEAD_LOGO = r"""
  _____ _   _                _
 |_   _| | | | ___  __ _  __| |
   | | | |_| |/ _ \/ _` |/ _` |
   | | |  _  |  __/ (_| | (_| |
   |_| |_| |_|\___|\__,_|\__,_|

      RISC-V by T-Head
"""

MILKV_LOGO = r"""
  __  __ _ _ _     __     __
 |  \/  (_) | | __ \ \   / /
 | |\/| | | | |/ /  \ \ / /
 | |  | | | |   <    \ V /
 |_|  |_|_|_|_|\_\    \_/

      RISC-V by Milk-V
"""

SIPEED_LOGO = r"""
  ____  _                     _
 / ___|(_)_ __   ___  ___  __| |
 \___ \| | '_ \ / _ \/ _ \/ _` |
  ___) | | |_) |  __/  __/ (_| |
 |____/|_| .__/ \___|\___|\__,_|
         |_|
      RISC-V by Sipeed
"""

SOPHGO_LOGO = r"""
  ____              _
 / ___|  ___  _ __ | |__   __ _  ___
 \___ \ / _ \| '_ \| '_ \ / _` |/ _ \
  ___) | (_) | |_) | | | | (_| | (_) |
 |____/ \___/| .__/|_| |_|\__, |\___/
             |_|          |___/
      RISC-V by Sophgo
"""

# primary vendor alias -> (normal, small)
LOGOS: Dict[str, Tuple[str, str]] = {
    "default": (DEFAULT_LOGO, "  RISC-V"),
    "sifive": (SIFIVE_LOGO, "  SiFive RISC-V"),
    "starfive": (STARFIVE_LOGO, "  StarFive RISC-V"),
    "kendryte": (KENDRYTE_LOGO, "  Kendryte RISC-V"),
    "allwinner": (ALLWINNER_LOGO, "  Allwinner RISC-V"),
    "espressif": (ESPRESSIF_LOGO, "  Espressif RISC-V"),
    "spacemit": (SPACEMIT_LOGO, "  SpacemiT RISC-V"),
    "thead": (THEAD_LOGO, "  T-Head RISC-V"),
    "milkv": (MILKV_LOGO, "  Milk-V RISC-V"),
    "sipeed": (SIPEED_LOGO, "  Sipeed RISC-V"),
    "sophgo": (SOPHGO_LOGO, "  Sophgo RISC-V"),
}


def normalize_style(style: str) -> str:
    """Map a style spelling (``compact``, ``off``...) to normal/small/none.

    Unknown spellings fall back to ``"normal"``.
    """
    return STYLE_ALIASES.get(style.lower(), "normal")


def _primary_alias(vendor: str) -> str:
    wanted = vendor.lower()
    for aliases, _, _ in VENDORS:
        if wanted in aliases:
            return aliases[0]
    return "default"


def get_logo(vendor: str, style: str = "normal") -> str:
    """Return the logo text for ``vendor`` in ``style``.

    Leading and trailing blank lines are removed; ``"none"`` yields an
    empty string.
    """
    style = normalize_style(style)
    if style == "none":
        return ""
    normal, small = LOGOS.get(_primary_alias(vendor), LOGOS["default"])
    art = small if style == "small" else normal
    return art.strip("\n")

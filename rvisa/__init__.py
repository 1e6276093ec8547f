"""Top level package for the RISC-V ISA inspection library.

This package turns the ISA string a RISC-V Linux kernel reports (for
example ``rv64imafdcv_zicsr_zifencei_zba_zbb_zvl256b_sstc``) into a
structured description of the extensions a core supports, and collects
the surrounding host facts shown by the ``riscfetch`` command.

Key concepts:

* **Extension catalog** lists every known standard, Z and S extension
  with its description and display category.  See
  :mod:`rvisa.extensions`.
* **Parser** tokenizes and resolves ISA strings into
  :class:`ParsedIsa` objects and infers vector capability.  See
  :mod:`rvisa.parser`.
* **Grouping** and **formatter** organise parsed extensions by category
  for display.  See :mod:`rvisa.grouping` and :mod:`rvisa.formatter`.
* **Host reader** gathers hart count, ID registers, caches and system
  information.  See :mod:`rvisa.hardware`.
* **Renderers** provide pluggable output formats (text, JSON, HTML).
  See :mod:`rvisa.renderers`.
* **Logos** and **benchmarks** are the terminal extras: vendor ASCII
  art and simple timing loops.  See :mod:`rvisa.logos` and
  :mod:`rvisa.benchmark`.
* **Registry** backs both the catalog and renderer registration.  See
  :mod:`rvisa.registry`.
"""

from .extensions import (
    CATALOG,
    ExtensionCatalog,
    ExtensionDescriptor,
    ExtensionKind,
    SCategory,
    ZCategory,
)
from .model import (
    CacheInfo,
    CategorizedView,
    CategoryGroup,
    GroupEntry,
    GroupMode,
    HardwareIds,
    HostReport,
    IsaTokens,
    ParsedIsa,
    SystemInfo,
    VectorInfo,
)
from .registry import Registry
from .parser import infer_vector, parse_isa, resolve, tokenize
from .grouping import group
from .isa import categorized, explain, parse_compact, parse_s, parse_vector, parse_z
from .hardware import HostReader
from .renderers import InfoRenderer, RenderOptions, renderer_registry

__version__ = "0.1.0"

__all__ = [
    "CATALOG",
    "ExtensionCatalog",
    "ExtensionDescriptor",
    "ExtensionKind",
    "SCategory",
    "ZCategory",
    "CacheInfo",
    "CategorizedView",
    "CategoryGroup",
    "GroupEntry",
    "GroupMode",
    "HardwareIds",
    "HostReport",
    "IsaTokens",
    "ParsedIsa",
    "SystemInfo",
    "VectorInfo",
    "Registry",
    "infer_vector",
    "parse_isa",
    "resolve",
    "tokenize",
    "group",
    "categorized",
    "explain",
    "parse_compact",
    "parse_s",
    "parse_vector",
    "parse_z",
    "HostReader",
    "InfoRenderer",
    "RenderOptions",
    "renderer_registry",
]

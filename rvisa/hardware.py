"""Host information reader.

:class:`HostReader` collects the facts the report shows besides the
ISA breakdown: hart count, machine ID registers, cache sizes, the board
name and generic system information.  It reads ``/proc/cpuinfo``,
sysfs and the device tree, and uses :mod:`psutil` for memory, uptime
and as a fallback CPU count.

All file locations are constructor arguments so that tests, or users
inspecting a saved ``cpuinfo`` from another machine, can point the
reader somewhere else.  A missing or unreadable file is never an error:
the corresponding value is simply absent.

The ISA string itself is handed to :func:`rvisa.parser.parse_isa`
unchanged; the parser never touches the file system.
"""

from __future__ import annotations

import getpass
import logging
import os
import platform
import socket
import time
from typing import Dict, List, Optional

import psutil

from .extensions import CATALOG, ExtensionCatalog
from .model import CacheInfo, HardwareIds, HostReport, SystemInfo
from .parser import parse_isa

logger = logging.getLogger(__name__)

DEFAULT_CPUINFO = "/proc/cpuinfo"
DEFAULT_SYSFS_CPU = "/sys/devices/system/cpu"
DEFAULT_DEVICE_TREE = "/proc/device-tree"
DEFAULT_OS_RELEASE = "/etc/os-release"

UNKNOWN_ISA = "unknown"

# sysfs cache index -> CacheInfo field
_CACHE_INDEXES = (("index0", "l1d"), ("index1", "l1i"), ("index2", "l2"), ("index3", "l3"))

_GIB = 1024 ** 3


def _read_text(path: str) -> Optional[str]:
    """Read a text file, returning ``None`` when it cannot be read."""
    try:
        with open(path, "r", encoding="utf-8", errors="replace") as fh:
            return fh.read()
    except FileNotFoundError:
        logger.debug("Not present: %s", path)
    except OSError as e:
        logger.debug("Error reading %s: %s", path, e)
    return None


def _cpuinfo_value(line: str) -> str:
    _, _, value = line.partition(":")
    return value.strip()


class HostReader:
    """Read RISC-V and system facts from the running host."""

    def __init__(
        self,
        cpuinfo: str = DEFAULT_CPUINFO,
        sysfs_cpu: str = DEFAULT_SYSFS_CPU,
        device_tree: str = DEFAULT_DEVICE_TREE,
        os_release: str = DEFAULT_OS_RELEASE,
        catalog: ExtensionCatalog = CATALOG,
    ) -> None:
        self.cpuinfo_path = cpuinfo
        self.sysfs_cpu = sysfs_cpu
        self.device_tree = device_tree
        self.os_release = os_release
        self.catalog = catalog
        self._cpuinfo: Optional[List[str]] = None

    # ------------------------------------------------------------------
    # /proc/cpuinfo

    def cpuinfo_lines(self) -> List[str]:
        """Lines of the cpuinfo file, read once and cached."""
        if self._cpuinfo is None:
            text = _read_text(self.cpuinfo_path)
            self._cpuinfo = text.splitlines() if text else []
        return self._cpuinfo

    def isa_string(self) -> str:
        """Raw ISA string of the first hart, or ``"unknown"``."""
        for line in self.cpuinfo_lines():
            if line.startswith("isa"):
                value = _cpuinfo_value(line)
                if value:
                    return value
        return UNKNOWN_ISA

    def hardware_ids(self) -> HardwareIds:
        """``mvendorid``/``marchid``/``mimpid`` of the first hart.

        A value of ``0x0`` means the register is not implemented and is
        reported as absent.
        """
        ids = HardwareIds()
        for line in self.cpuinfo_lines():
            for name in ("mvendorid", "marchid", "mimpid"):
                if line.startswith(name) and not getattr(ids, name):
                    value = _cpuinfo_value(line)
                    if value and value != "0x0":
                        setattr(ids, name, value)
        return ids

    def hart_count(self) -> int:
        count = sum(1 for line in self.cpuinfo_lines() if line.startswith("processor"))
        if count > 0:
            return count
        return psutil.cpu_count() or 0

    def is_riscv(self) -> bool:
        if "riscv" in platform.machine().lower():
            return True
        for line in self.cpuinfo_lines():
            if "riscv" in line or "RISC-V" in line:
                return True
        return False

    # ------------------------------------------------------------------
    # sysfs and device tree

    def cache_info(self) -> CacheInfo:
        cache = CacheInfo()
        for index, field_name in _CACHE_INDEXES:
            text = _read_text(os.path.join(self.sysfs_cpu, "cpu0", "cache", index, "size"))
            if text and text.strip():
                setattr(cache, field_name, text.strip())
        return cache

    def sysfs_vlen(self) -> Optional[int]:
        """Vector register length reported by the kernel, if it exports one."""
        text = _read_text(os.path.join(self.sysfs_cpu, "cpu0", "riscv", "vlen"))
        if text is None:
            return None
        try:
            return int(text.strip(), 0)
        except ValueError:
            logger.debug("Unexpected vlen value: %r", text)
            return None

    def board(self) -> str:
        """Board model from the device tree, else its first compatible string."""
        model = _read_text(os.path.join(self.device_tree, "model"))
        if model:
            model = model.strip("\0").strip()
            if model:
                return model
        compatible = _read_text(os.path.join(self.device_tree, "compatible"))
        if compatible:
            first = compatible.split("\0")[0].strip()
            if first:
                return first
        return ""

    # ------------------------------------------------------------------
    # Generic system information

    def os_name(self) -> str:
        text = _read_text(self.os_release)
        if text:
            fields: Dict[str, str] = {}
            for line in text.splitlines():
                key, sep, value = line.partition("=")
                if sep:
                    fields[key.strip()] = value.strip().strip('"')
            if fields.get("PRETTY_NAME"):
                return fields["PRETTY_NAME"]
        return "Linux"

    def system_info(self) -> SystemInfo:
        vmem = psutil.virtual_memory()
        try:
            user = getpass.getuser()
        except (KeyError, OSError):
            user = os.environ.get("USER", "unknown")
        return SystemInfo(
            board=self.board(),
            os=self.os_name(),
            kernel=platform.release() or "Unknown",
            memory_used_bytes=int(vmem.used),
            memory_total_bytes=int(vmem.total),
            uptime_seconds=max(0, int(time.time() - psutil.boot_time())),
            user=user,
            hostname=socket.gethostname() or "unknown",
        )

    # ------------------------------------------------------------------
    # Report

    def collect(self, isa: Optional[str] = None, riscv_only: bool = False) -> HostReport:
        """Gather a complete :class:`HostReport`.

        Args:
            isa: ISA string to report instead of the one in cpuinfo.
            riscv_only: Skip the generic system information.
        """
        isa_string = isa if isa is not None else self.isa_string()
        logger.debug("Parsing ISA string %r", isa_string)
        return HostReport(
            isa=isa_string,
            parsed=parse_isa(isa_string, self.catalog),
            hart_count=self.hart_count(),
            hardware_ids=self.hardware_ids(),
            cache=self.cache_info(),
            sysfs_vlen=self.sysfs_vlen(),
            system=None if riscv_only else self.system_info(),
        )


# ----------------------------------------------------------------------
# Display helpers


def format_harts(count: int) -> str:
    return f"{count} hart{'s' if count != 1 else ''}"


def format_memory(used: int, total: int) -> str:
    return f"{used / _GIB:.2f} GiB / {total / _GIB:.2f} GiB"


def format_uptime(seconds: int) -> str:
    hours = seconds // 3600
    minutes = (seconds % 3600) // 60
    if hours > 0:
        return f"{hours}h {minutes}m"
    return f"{minutes}m"

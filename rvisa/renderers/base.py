"""Base renderer class and registry.

This module defines the abstract :class:`InfoRenderer` interface, the
:class:`RenderOptions` shared by every output format and the
``renderer_registry`` that concrete formats register themselves in.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Tuple

from ..extensions import ExtensionKind
from ..grouping import group
from ..model import CategorizedView, GroupMode, HostReport
from ..registry import Registry

# Registry for renderer implementations
renderer_registry = Registry("renderer")

KINDS = (ExtensionKind.STANDARD, ExtensionKind.Z, ExtensionKind.S)


@dataclass
class RenderOptions:
    """What to show and how.

    ``explain`` adds descriptions, ``show_all`` lists every known
    extension with a supported flag, ``riscv_only`` drops generic system
    information.  ``vendor`` and ``style`` select the banner.
    """

    explain: bool = False
    show_all: bool = False
    riscv_only: bool = False
    vendor: str = "default"
    style: str = "normal"

    @property
    def mode(self) -> GroupMode:
        return GroupMode.ALL if self.show_all else GroupMode.PRESENT


def kind_views(report: HostReport, mode: GroupMode) -> List[Tuple[ExtensionKind, CategorizedView]]:
    """Group the report's extensions for each kind, standard first."""
    return [(kind, group(report.parsed, kind, mode)) for kind in KINDS]


class InfoRenderer(ABC):
    """Abstract base class for rendering a :class:`HostReport`."""

    @abstractmethod
    def render(self, report: HostReport, options: RenderOptions) -> str:
        """Render a host report.

        Args:
            report: Collected host information.
            options: Display options.

        Returns:
            The formatted report as a string.
        """
        raise NotImplementedError

"""Abstract base class for all space-layout rules.

Every rule in the system implements this interface. Rules are:
- Self-contained: each derives one kind of layout record
- Composable: multiple rules run in sequence via the registry
- Conditional: each rule decides if it applies to the current context
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from collections.abc import Sequence

from pydantic import BaseModel

from barnframe.models.context import LayoutContext


class LayoutRule(ABC):
    """
    Base class for all layout rules.

    Subclasses implement `applies()` and `generate()` and name the
    context list their records go into via `output`.
    The scanner queries the registry, filters by `applies()`,
    sorts by `priority`, and calls `generate()` in order.
    """

    # Lower priority = runs first. Default 100.
    priority: int = 100

    # IDs of rules that must run before this one.
    dependencies: list[str] = []

    # LayoutContext field that receives generated records.
    output: str = ""

    @abstractmethod
    def get_id(self) -> str:
        """Unique identifier for this rule (e.g., 'layout.clearance_zones')."""
        ...

    @abstractmethod
    def get_name(self) -> str:
        """Human-readable name (e.g., 'Clearance Zones')."""
        ...

    def applies(self, context: LayoutContext) -> bool:
        """Return True if this rule should run for the given context."""
        return len(context.detected_openings) > 0

    @abstractmethod
    def generate(self, context: LayoutContext) -> Sequence[BaseModel]:
        """
        Derive records for the given context.

        The context provides openings, dimensions, policy, the analyzer's
        detected openings, and the output of every rule that ran earlier.
        """
        ...

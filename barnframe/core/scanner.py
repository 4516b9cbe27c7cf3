"""Space-layout scanner — orchestrates analysis and rule execution."""

from __future__ import annotations
import logging
from datetime import datetime, timezone

from barnframe.models import (
    BuildingDimensions, GenerationConfig, LayoutContext, LayoutPolicy,
    Opening, SpaceLayoutSnapshot,
)
from barnframe.core.registry import RuleRegistry
from barnframe.core.analyzer import OpeningAnalyzer

logger = logging.getLogger(__name__)


class SpaceLayoutScanner:
    """
    Stateless scanner.

    Takes openings + dimensions, runs opening analysis, executes applicable
    rules, and returns a complete SpaceLayoutSnapshot. Every call starts
    from a fresh context.
    """

    def __init__(self, registry: RuleRegistry, policy: LayoutPolicy | None = None) -> None:
        self.registry = registry
        self.policy = policy or LayoutPolicy()
        self.analyzer = OpeningAnalyzer()

    def scan(
        self,
        openings: list[Opening],
        dimensions: BuildingDimensions,
        config: GenerationConfig | None = None,
        computed_at: datetime | None = None,
    ) -> SpaceLayoutSnapshot:
        if config is None:
            config = GenerationConfig()

        context = LayoutContext(
            openings=openings,
            dimensions=dimensions,
            policy=self.policy,
            config=config,
        )

        # Analysis phase: per-opening requirements
        self.analyzer.analyze(context)

        # Generation phase: run applicable rules
        for rule in self.registry.run_plan(context):
            records = rule.generate(context)
            getattr(context, rule.output).extend(records)
            logger.debug("Rule %s produced %d record(s)", rule.get_id(), len(records))

        snapshot = SpaceLayoutSnapshot(
            detected_openings=context.detected_openings,
            clearance_zones=context.clearance_zones,
            access_paths=context.access_paths,
            ventilation_areas=context.ventilation_areas,
            structural_elements=context.structural_elements,
            layout_constraints=context.layout_constraints,
            computed_at=computed_at or datetime.now(timezone.utc),
        )
        logger.info(
            "Scanned %.1fx%.1fx%.1f building: %d opening(s), %d zone(s), "
            "%d path(s), %d constraint(s)",
            dimensions.width, dimensions.length, dimensions.height,
            len(snapshot.detected_openings), len(snapshot.clearance_zones),
            len(snapshot.access_paths), len(snapshot.layout_constraints),
        )
        return snapshot

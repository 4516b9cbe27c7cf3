"""High-level layout service — facade for the application's state store."""

from __future__ import annotations
from collections.abc import Mapping
from datetime import datetime

from barnframe.config import Settings, configure_logging, get_settings
from barnframe.models import (
    BeamLayout, BuildingDimensions, DimensionChange, GenerationConfig, LayoutPolicy,
    ModificationResult, Opening, PlacementCheck, SpaceLayoutSnapshot,
    WallPosition, WallProtection,
)
from barnframe.core.bounds import wall_span
from barnframe.core.placement import validate_opening_placement
from barnframe.core.planner import BeamPlanner
from barnframe.core.protection import compute_protection
from barnframe.core.registry import RuleRegistry, create_default_registry
from barnframe.core.scanner import SpaceLayoutScanner
from barnframe.core.validator import validate_space_modification


class LayoutService:
    """Wires settings, policy and rules together and delegates to the core."""

    def __init__(
        self,
        registry: RuleRegistry | None = None,
        policy: LayoutPolicy | None = None,
        settings: Settings | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        configure_logging(self.settings)
        self.registry = registry or create_default_registry()
        self.policy = policy or LayoutPolicy()
        self.scanner = SpaceLayoutScanner(self.registry, self.policy)
        self.planner = BeamPlanner(
            self.settings.vertical_params(),
            self.settings.horizontal_params(),
        )

    def scan(
        self,
        openings: list[Opening],
        dimensions: BuildingDimensions,
        config: GenerationConfig | None = None,
        computed_at: datetime | None = None,
    ) -> SpaceLayoutSnapshot:
        return self.scanner.scan(openings, dimensions, config, computed_at)

    def validate(
        self,
        snapshot: SpaceLayoutSnapshot,
        proposed: DimensionChange | Mapping[str, float],
        current: BuildingDimensions,
    ) -> ModificationResult:
        return validate_space_modification(snapshot, proposed, current, self.policy)

    def plan_beams(
        self, openings: list[Opening], dimensions: BuildingDimensions,
    ) -> BeamLayout:
        return self.planner.plan_building(dimensions, openings)

    def protection(
        self, openings: list[Opening], dimensions: BuildingDimensions,
    ) -> dict[WallPosition, WallProtection]:
        return compute_protection(openings, dimensions, self.policy)

    def check_placement(
        self, opening: Opening, dimensions: BuildingDimensions,
    ) -> PlacementCheck:
        width, height = wall_span(dimensions, opening.wall)
        return validate_opening_placement(opening, width, height)

    def list_rules(self) -> list[dict[str, str]]:
        return [
            {"id": r.get_id(), "name": r.get_name()}
            for r in self.registry.list_rules()
        ]

"""Headers over wide openings and corner columns."""

from __future__ import annotations

from barnframe.rules.base import LayoutRule
from barnframe.models import (
    ElementKind, LayoutContext, Point3D, Size3D, StructuralElement,
)

HEADER_RESTRICTIONS = [
    "Load-bearing header - cannot be modified",
    "Required for structural integrity",
    "Professional engineering required for changes",
]

COLUMN_RESTRICTIONS = [
    "Corner structural element",
    "Critical for building stability",
    "Cannot be removed or modified",
]


class StructuralElementRule(LayoutRule):
    """Headers above openings wider than the policy limit, plus four corner columns."""

    priority = 40
    output = "structural_elements"

    def get_id(self) -> str:
        return "layout.structural_elements"

    def get_name(self) -> str:
        return "Structural Elements"

    def applies(self, context: LayoutContext) -> bool:
        # Corner columns exist with or without openings
        return True

    def generate(self, context: LayoutContext) -> list[StructuralElement]:
        policy = context.policy
        dims = context.dimensions
        elements: list[StructuralElement] = []

        for detected in context.detected_openings:
            opening = detected.opening
            if opening.width <= policy.header_min_opening_width:
                continue
            elements.append(StructuralElement(
                id=f"header-{detected.id}",
                kind=ElementKind.HEADER,
                position=Point3D(
                    x=detected.functional_zone.bounds.left + opening.width / 2,
                    y=opening.y_offset + opening.height + policy.header_height / 2,
                    z=0.0,
                ),
                dimensions=Size3D(
                    width=opening.width + policy.header_overhang,
                    height=policy.header_height,
                    depth=policy.header_depth,
                ),
                is_load_bearing=True,
                can_modify=False,
                restrictions=list(HEADER_RESTRICTIONS),
            ))

        corners = [
            (0.0, 0.0),
            (dims.width, 0.0),
            (0.0, dims.length),
            (dims.width, dims.length),
        ]
        for i, (x, y) in enumerate(corners):
            elements.append(StructuralElement(
                id=f"corner-{i}",
                kind=ElementKind.COLUMN,
                position=Point3D(x=x, y=y, z=0.0),
                dimensions=Size3D(
                    width=policy.column_size,
                    height=dims.height,
                    depth=policy.column_size,
                ),
                is_load_bearing=True,
                can_modify=False,
                restrictions=list(COLUMN_RESTRICTIONS),
            ))

        return elements

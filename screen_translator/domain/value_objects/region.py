"""Screen region value object."""

from __future__ import annotations

from dataclasses import dataclass

from ...config import MIN_REGION_HEIGHT, MIN_REGION_WIDTH
from ...exceptions import ValidationError


@dataclass(frozen=True, slots=True)
class Region:
    """Rectangular screen area in pixel coordinates.

    Width and height must be positive. Regions are passed by value through
    the pipeline and never mutated.
    """
    x: int
    y: int
    width: int
    height: int

    def __post_init__(self) -> None:
        validate_region(self)

    @property
    def is_selectable(self) -> bool:
        """Check if the region is large enough to be worth recognizing."""
        return self.width >= MIN_REGION_WIDTH and self.height >= MIN_REGION_HEIGHT

    @classmethod
    def from_selection(cls, x1: int, y1: int, x2: int, y2: int) -> Region:
        """Create a region from two drag corners in any order.

        Raises:
            ValidationError: If the selection is below the minimum size
        """
        left, right = sorted((int(x1), int(x2)))
        top, bottom = sorted((int(y1), int(y2)))
        width, height = right - left, bottom - top

        if width < MIN_REGION_WIDTH or height < MIN_REGION_HEIGHT:
            raise ValidationError(
                f"Selection {width}x{height} is too small "
                f"(minimum {MIN_REGION_WIDTH}x{MIN_REGION_HEIGHT})",
                field="region"
            )
        return cls(left, top, width, height)

    def __str__(self) -> str:
        return f"{self.x}, {self.y}, {self.width}x{self.height}"


def validate_region(region: object) -> None:
    """Check that a region-like object has positive dimensions.

    Raises:
        ValidationError: If width or height is not positive
    """
    width = getattr(region, "width", 0)
    height = getattr(region, "height", 0)
    if width <= 0 or height <= 0:
        raise ValidationError(
            f"Region must have positive size, got {width}x{height}",
            field="region"
        )

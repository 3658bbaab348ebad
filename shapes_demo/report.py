"""Sort shapes by area and summarise them."""

from dataclasses import dataclass
import logging
import math

from . import Shape

logger = logging.getLogger(__name__)


@dataclass
class Summary:
    total_shapes: int = 0
    total_perimeter: float = 0.0
    total_polygons: int = 0
    total_polygon_sides: int = 0

    @property
    def average_polygon_sides(self) -> float:
        # No polygons: report nan, the same as 0.0 / 0 in IEEE arithmetic.
        if self.total_polygons == 0:
            return math.nan
        return self.total_polygon_sides / self.total_polygons


def _area_key(shape: Shape) -> tuple[bool, float]:
    area = shape.area()
    return (math.isnan(area), area)


def sort_by_area(shapes: list[Shape]) -> None:
    """Sort in place, smallest area first. Shapes with a nan area go last."""
    shapes.sort(key=_area_key)


def summarize(shapes: list[Shape]) -> Summary:
    summary = Summary(total_shapes=len(shapes))
    for shape in shapes:
        summary.total_perimeter += shape.perimeter()
        if shape.is_polygon:
            summary.total_polygons += 1
            summary.total_polygon_sides += shape.side_count
    return summary


def format_number(value: float) -> str:
    """Format like a default C++ output stream: six significant digits."""
    return f"{value:g}"


def render(shapes: list[Shape], summary: Summary) -> list[str]:
    lines = [str(shape) for shape in shapes]
    lines.append("")
    lines.append(f"Total Shapes: {summary.total_shapes}")
    lines.append(f"Total Perimeter of all shapes: {format_number(summary.total_perimeter)}")
    lines.append(f"Total Polygons: {summary.total_polygons}")
    lines.append(f"Average Polygon Sides: {format_number(summary.average_polygon_sides)}")
    return lines


def build_report(shapes: list[Shape]) -> list[str]:
    """Sort ``shapes`` in place and return the report lines."""
    sort_by_area(shapes)
    summary = summarize(shapes)
    if summary.total_polygons == 0:
        logger.debug("No polygons found, average polygon sides is nan")
    return render(shapes, summary)

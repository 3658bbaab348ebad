import pytest

from .. import Circle, Rectangle, Square, Triangle


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "group_shape: marks tests related to shape functionality")
    config.addinivalue_line("markers", "group_polygon: marks tests related to polygon functionality")
    config.addinivalue_line("markers", "group_circle: marks tests related to circle functionality")
    config.addinivalue_line("markers", "group_rectangle: marks tests related to rectangle functionality")
    config.addinivalue_line("markers", "group_square: marks tests related to square functionality")
    config.addinivalue_line("markers", "group_triangle: marks tests related to triangle functionality")
    config.addinivalue_line("markers", "group_parser: marks tests related to reading shape files")
    config.addinivalue_line("markers", "group_report: marks tests related to sorting and totals")
    config.addinivalue_line("markers", "group_cli: marks tests related to the command line entry point")


SAMPLE_LINES = ["C 2", "R 3 4", "T 3 4 5", "S 5"]


@pytest.fixture
def sample_shapes():
    return [Circle(2), Rectangle(3, 4), Triangle(3, 4, 5), Square(5)]


@pytest.fixture
def shapes_file(tmp_path):
    path = tmp_path / "shapes.txt"
    path.write_text("\n".join(SAMPLE_LINES) + "\n")
    return path

"""
Lapstrake Test Configuration and Fixtures

Provides a small five-station hull, both as CSV sheets on disk and as the
lofted Hull built from them.
"""

import math
from pathlib import Path
from typing import List

import pytest

from lapstrake.geometry import Point3D
from lapstrake.hull import Hull
from lapstrake.spec import HullSpec, load_spec


# Five stations two feet apart. Each gets its sheer, two buttock heights
# and two waterline half-breadths: five points per station.
DATA_CSV = """\
,1,2,3,4,5
Fore-Aft Position,,,,,
Sheer,2-0-0,4-0-0,6-0-0,8-0-0,10-0-0

Height,,,,,
Sheer,3-0-0,2-9-0,2-8-0,2-9-0,3-0-0
Wale,2-10-0,2-7-0,2-6-0,2-7-0,2-10-0
0-6-0,1-0-0,0-6-0,0-4-0,0-6-0,1-0-0
0-0-0,0-9-0,0-3-0,0-1-0,0-3-0,0-9-0

Breadth,,,,,
Sheer,1-6-0,2-3-0,2-6-0,2-3-0,1-6-0
2-0-0,1-4-0,2-1-0,2-4-0,2-1-0,1-4-0
1-6-0,1-1-0,1-10-0,2-1-0,1-10-0,1-1-0
"""

# Two planks; the second skips the interpolated column at 5 ft.
PLANKS_CSV = """\
,1,2,5-0-0,3,4,5
garboard bottom,0,0,0,0,0,0
garboard top,0.5,0.5,0.5,0.5,0.5,0.5
sheer bottom,0.5,0.5,x,0.5,0.5,0.5
sheer top,1,1,x,1,1,1
"""

CONFIG_CSV = """\
resolution,layout_gap
10,0.05
"""


def write_spec(directory: Path, data: str = DATA_CSV, planks: str = PLANKS_CSV,
               config: str = CONFIG_CSV) -> Path:
    """Write the three spec sheets into `directory`."""
    directory.mkdir(parents=True, exist_ok=True)
    (directory / "data.csv").write_text(data, encoding="utf-8")
    (directory / "planks.csv").write_text(planks, encoding="utf-8")
    (directory / "config.csv").write_text(config, encoding="utf-8")
    return directory


def arc_points(count: int = 6, radius: float = 2.0, x: float = 0.0) -> List[Point3D]:
    """Points on a quarter circle in the y-z plane, bottom to top."""
    return [
        Point3D(
            x,
            radius * math.sin(0.5 * math.pi * i / (count - 1)),
            radius * (1.0 - math.cos(0.5 * math.pi * i / (count - 1))),
        )
        for i in range(count)
    ]


@pytest.fixture
def make_spec_dir(tmp_path):
    """Factory writing spec sheets, with any of them replaced, to a new directory."""
    def make(name: str = "hull", **sheets) -> Path:
        return write_spec(tmp_path / name, **sheets)
    return make


@pytest.fixture
def spec_dir(make_spec_dir) -> Path:
    """A directory holding data.csv, planks.csv and config.csv."""
    return make_spec_dir()


@pytest.fixture
def spec(spec_dir) -> HullSpec:
    """The sample spec, loaded from disk."""
    return load_spec(spec_dir)


@pytest.fixture
def hull(spec) -> Hull:
    """The sample hull, lofted."""
    return Hull.from_spec(spec)


@pytest.fixture
def arc() -> List[Point3D]:
    """Six points on a quarter circle of radius 2."""
    return arc_points()


@pytest.fixture
def sheets():
    """Text of the sample data, planks and config sheets."""
    return {"data": DATA_CSV, "planks": PLANKS_CSV, "config": CONFIG_CSV}


@pytest.fixture
def make_arc():
    """Factory for quarter-circle points of any size and position."""
    return arc_points

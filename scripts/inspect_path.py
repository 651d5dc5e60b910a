"""Print the path-group segments of an authored path file.

Usage:
  uv run python scripts/inspect_path.py \\
      --deploy-dir src/main/deploy \\
      --name FourBallAuto \\
      --constraint 4.0 3.0 \\
      --constraint 2.0 1.5

  uv run python scripts/inspect_path.py --file FourBallAuto.path --constraint 3 3

Reads AUTOPATH_DEPLOY_DIR from the environment (or .env) when --deploy-dir
is omitted.
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace

from dotenv import load_dotenv

from autopath.config import PlannerSettings
from autopath.grouping.builder import PathGroupBuilder
from autopath.loader.errors import PathLoadError
from autopath.loader.parser import PathFileParser
from autopath.loader.reader import load_path_file
from autopath.path.models import PathConstraints, PathSegment
from autopath.planner import PathPlanner


def _load_file(path: str, constraints: list[PathConstraints], reversed: bool) -> list[PathSegment]:
    waypoints, markers = PathFileParser().parse(load_path_file(path))
    return PathGroupBuilder().build_group(waypoints, markers, constraints, reversed)


def _print_segment(i: int, seg: PathSegment) -> None:
    first = seg.waypoints[0].anchor_point
    last = seg.waypoints[-1].anchor_point
    print(
        f"  [{i}] {len(seg.waypoints)} waypoints "
        f"({first.x:.2f}, {first.y:.2f}) -> ({last.x:.2f}, {last.y:.2f})  "
        f"vel={seg.constraints.max_velocity:.2f} accel={seg.constraints.max_acceleration:.2f}"
        f"{'  reversed' if seg.reversed else ''}"
    )
    for marker in seg.markers:
        print(f"        marker {marker.name!r} @ {marker.waypoint_relative_pos:.3f}")


def main() -> None:
    load_dotenv()

    ap = argparse.ArgumentParser(description="Show how a path splits at its stop points")
    source = ap.add_mutually_exclusive_group(required=True)
    source.add_argument("--name", help="Path name inside <deploy-dir>/pathplanner/")
    source.add_argument("--file", help="Explicit .path file to read")
    ap.add_argument("--deploy-dir", default=None, help="Deploy directory (overrides env)")
    ap.add_argument(
        "--constraint",
        nargs=2,
        type=float,
        action="append",
        metavar=("MAX_VEL", "MAX_ACCEL"),
        required=True,
        help="Constraint for the next segment; repeat for later segments",
    )
    ap.add_argument("--reversed", action="store_true", help="Drive every segment reversed")
    ap.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = ap.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        constraints = [PathConstraints(v, a) for v, a in args.constraint]
        if args.file:
            segments = _load_file(args.file, constraints, args.reversed)
            label = args.file
        else:
            settings = PlannerSettings.from_env()
            if args.deploy_dir:
                settings = replace(settings, deploy_dir=args.deploy_dir)
            segments = PathPlanner(settings).load_path_group(
                args.name, constraints, args.reversed
            )
            label = args.name
    except (PathLoadError, ValueError) as exc:
        print(f"  [!] {exc}", file=sys.stderr)
        sys.exit(1)

    print(f"{label}: {len(segments)} segment(s)")
    for i, seg in enumerate(segments):
        _print_segment(i, seg)


if __name__ == "__main__":
    main()

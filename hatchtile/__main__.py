import argparse
import logging
import math
import sys
from typing import Optional, Sequence

from hatchtile import Domain, Grid, Line, Point, ZeroDomainError

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _line_at(angle_deg: float, length: float) -> Line:
    angle = math.radians(angle_deg)
    return Line(Point(0.0, 0.0), Point(math.cos(angle) * length, math.sin(angle) * length))


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Resolve safe hatch angles for a tiling domain")
    parser.add_argument(
        "--bounds",
        nargs=2,
        type=float,
        required=True,
        metavar=("U", "V"),
        help="Domain size along the U and V axes",
    )
    parser.add_argument(
        "--angle",
        type=float,
        action="append",
        required=True,
        help="Requested line angle in degrees (repeatable)",
    )
    parser.add_argument(
        "--detail",
        action="store_true",
        help="Use the detail-scale maximum extent instead of the model-scale one",
    )
    parser.add_argument(
        "--expandable",
        action="store_true",
        help="Allow the domain to grow until the angle correction is small enough",
    )
    parser.add_argument(
        "--dash-length",
        type=float,
        default=1.0,
        help="Drawn length of each line (default: 1.0)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    bound_u, bound_v = args.bounds
    try:
        domain = Domain(
            0.0,
            0.0,
            bound_u,
            bound_v,
            model_pattern=not args.detail,
            expandable=args.expandable,
        )
    except ZeroDomainError as exc:
        logger.error("Invalid domain %s x %s: %s", bound_u, bound_v, exc)
        raise SystemExit(1) from exc

    logger.info("Built %r", domain)

    for angle_deg in args.angle:
        line = _line_at(angle_deg, args.dash_length)
        requested = line.angle
        grid = Grid(domain, line)

        params = grid.as_dict()
        pen_down, pen_up = params["segments"]
        origin_u, origin_v = params["origin"]
        print(f"Requested angle: {angle_deg:.6f} deg")
        print(f"  grid angle: {math.degrees(grid.angle):.6f} deg")
        print(f"  correction: {math.degrees(abs(requested - grid.angle)):.6f} deg")
        print(f"  span: {grid.span:.6f}")
        print(f"  offset: {grid.offset:.6f}")
        print(f"  shift: {grid.shift:.6f}")
        print(f"  origin: ({origin_u:.6f}, {origin_v:.6f})")
        print(f"  segments: {pen_down:.6f}, {pen_up:.6f}")

    print(f"Domain: {domain!r}")


if __name__ == "__main__":
    main(sys.argv[1:])

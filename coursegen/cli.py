"""Command line entry point that generates a course and writes its points."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence, TextIO

from .fusion import FusionPathCreator
from .geometry import Path
from .mix_quarter import MixQuarterPathCreator
from .quarter import QuarterPathCreator
from .simple import SimplePathCreator


def _add_common(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--init-x", type=float, default=0.0, help="start x [m]")
    parser.add_argument("--init-y", type=float, default=0.0, help="start y [m]")
    parser.add_argument(
        "--init-theta", type=float, default=0.0, help="course heading [rad]"
    )
    parser.add_argument(
        "--resolution", type=float, default=0.1, help="step along x [m]"
    )
    parser.add_argument("--hz", type=int, default=10, help="loop frequency [Hz]")
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="file to write the points to (standard output by default)",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one sub-command per course shape."""
    parser = argparse.ArgumentParser(
        prog="coursegen",
        description="Generate a target course and write its points as x,y lines.",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    for name, help_text in (
        ("simple", "half circles of one radius"),
        ("quarter", "quarter circles of one radius"),
    ):
        sub = commands.add_parser(name, help=help_text)
        sub.add_argument("--radius", type=float, default=5.0, help="turn radius [m]")
        sub.add_argument(
            "--course-length", type=float, default=30.0, help="course length [m]"
        )
        _add_common(sub)

    for name, help_text in (
        ("fusion", "half circles with one radius each"),
        ("mix-quarter", "arcs with one radius each"),
    ):
        sub = commands.add_parser(name, help=help_text)
        sub.add_argument(
            "--all-radius",
            type=float,
            nargs="+",
            required=True,
            help="turn radius of every segment [m]",
        )
        sub.add_argument(
            "--max-course-length",
            type=float,
            default=50.0,
            help="longest course allowed [m]",
        )
        _add_common(sub)

    return parser


def _build(args: argparse.Namespace):
    common = dict(
        init_x=args.init_x,
        init_y=args.init_y,
        init_theta=args.init_theta,
        resolution=args.resolution,
        hz=args.hz,
    )
    if args.command == "simple":
        return SimplePathCreator(
            radius=args.radius, course_length=args.course_length, **common
        )
    if args.command == "quarter":
        return QuarterPathCreator(
            radius=args.radius, course_length=args.course_length, **common
        )
    if args.command == "fusion":
        return FusionPathCreator(
            all_radius=args.all_radius,
            max_course_length=args.max_course_length,
            **common,
        )
    return MixQuarterPathCreator(
        all_radius=args.all_radius,
        max_course_length=args.max_course_length,
        **common,
    )


def _write_points(path: Path, stream: TextIO) -> None:
    for x, y in path.points():
        stream.write(f"{x!r},{y!r}\n")


def main(argv: Sequence[str] | None = None) -> int:
    """Generate the requested course, write its points and report its length."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        creator = _build(args)
    except ValueError as error:
        parser.error(str(error))

    path = creator.create_course()

    if args.output is None:
        _write_points(path, sys.stdout)
    else:
        with open(args.output, "w", encoding="utf-8") as stream:
            _write_points(path, stream)

    if args.command in ("fusion", "mix-quarter"):
        print("----- Create path finish! -----", file=sys.stderr)
        print(f"Path length is {creator.course_length:g} [m]", file=sys.stderr)
    else:
        print("Create path finish!", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
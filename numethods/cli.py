"""Command-line entry point for a few of the numerical routines."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from numethods.interpolation import lagrange
from numethods.magic import format_magic_square, generate_magic_square
from numethods.marksheet import (
    format_marksheet,
    grading_scale,
    make_student,
    rank_students,
)
from numethods.roots import bisection
from numethods.series import cosine_series, sine_series


def _g(value: float) -> str:
    return format(value, "g")


def _run_bisection(args: argparse.Namespace) -> int:
    try:
        root = bisection(args.a, args.b, args.tolerance)
    except ValueError:
        print("You have not assumed right a and b", file=sys.stderr)
        return 1
    print(f"The root is: {_g(root)}")
    return 0


def _run_lagrange(args: argparse.Namespace) -> int:
    try:
        result = lagrange(args.x, args.y, args.at)
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1
    print(f"The value of f({_g(args.at)}) is {_g(result)}")
    return 0


def _run_magic(args: argparse.Namespace) -> int:
    try:
        square = generate_magic_square(args.n)
    except ValueError as error:
        print(error)
        return 1
    print(f"The Magic Square of size {args.n} x {args.n} is:")
    print(format_magic_square(square), end="")
    return 0


def _parse_student(spec: str) -> tuple[str, list[int]]:
    name, sep, marks = spec.partition(":")
    if not sep or not name:
        raise argparse.ArgumentTypeError(f"expected NAME:MARK,MARK,... but got {spec!r}")
    try:
        return name, [int(mark) for mark in marks.split(",")]
    except ValueError:
        raise argparse.ArgumentTypeError(f"marks must be integers in {spec!r}") from None


def _run_marksheet(args: argparse.Namespace) -> int:
    subjects = {len(marks) for _, marks in args.students}
    if len(subjects) != 1:
        print("every student must have the same number of subjects", file=sys.stderr)
        return 1
    students = rank_students(make_student(name, marks) for name, marks in args.students)
    print(grading_scale(), end="")
    print()
    print(format_marksheet(students), end="")
    return 0


def _run_series(args: argparse.Namespace) -> int:
    print(f"Sum of sine series up to {args.terms} terms: {_g(sine_series(args.x, args.terms))}")
    print(
        f"Sum of cosine series up to {args.terms} terms: "
        f"{_g(cosine_series(args.x, args.terms))}"
    )
    return 0


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="numethods", description="Numerical methods.")
    commands = parser.add_subparsers(dest="command", required=True)

    p = commands.add_parser("bisection", help="root of x^3 - x^2 + 2 by bisection")
    p.add_argument("a", type=float)
    p.add_argument("b", type=float)
    p.add_argument("tolerance", type=float)
    p.set_defaults(run=_run_bisection)

    p = commands.add_parser("lagrange", help="Lagrange interpolation")
    p.add_argument("--x", type=float, nargs="+", required=True)
    p.add_argument("--y", type=float, nargs="+", required=True)
    p.add_argument("--at", type=float, required=True)
    p.set_defaults(run=_run_lagrange)

    p = commands.add_parser("magic", help="magic square of size N")
    p.add_argument("n", type=int)
    p.set_defaults(run=_run_magic)

    p = commands.add_parser("marksheet", help="ranked marksheet")
    p.add_argument("students", type=_parse_student, nargs="+", metavar="NAME:MARKS")
    p.set_defaults(run=_run_marksheet)

    p = commands.add_parser("series", help="sine and cosine series")
    p.add_argument("x", type=float)
    p.add_argument("terms", type=int)
    p.set_defaults(run=_run_series)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command named in ``argv`` and return its exit status."""
    args = _parser().parse_args(argv)
    return args.run(args)


if __name__ == "__main__":
    sys.exit(main())
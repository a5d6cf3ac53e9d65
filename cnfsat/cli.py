# Copyright (C) 2025, The cnfsat developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

"""
Command line interface: one subcommand per operation, and the numbered
interactive menu.
"""

import argparse
import logging
import sys
from typing import Iterator, List, Optional, Sequence, TextIO

import numpy

from . import config
from .cnf import Formula
from .errors import FormulaFormatError, UnsatisfiableError
from .reader import read_formula
from .solver import ALGORITHMS, solve
from .utils import check_assignment, is_horn_sat, is_two_sat

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FALSE = 1
EXIT_ERROR = 2

KINDS = {"two_sat": "2-SAT", "horn_sat": "Horn-SAT"}


def format_assignment(assignment: Sequence[bool]) -> str:
    return "[" + ", ".join("true" if value else "false" for value in assignment) + "]"


def parse_value(token: str) -> bool:
    return token.strip().lower() in config.TRUE_WORDS


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cnfsat", description="Satisfiability of formulas in conjunctive normal form.")
    parser.add_argument("--log-level", default=config.LOG_LEVEL,
                        help="logging level (default: %(default)s)")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="shorthand for --log-level DEBUG")

    sub = parser.add_subparsers(dest="command")

    check = sub.add_parser("check", help="Check whether an assignment satisfies a formula")
    check.add_argument("file")
    check.add_argument("values", nargs="*", metavar="VALUE",
                       help="value of each variable, 1 or true for true")

    is2sat = sub.add_parser("is-2sat", help="Check whether every clause has two literals")
    is2sat.add_argument("file")

    ishorn = sub.add_parser("is-horn", help="Check whether every clause is a Horn clause")
    ishorn.add_argument("file")

    solve_cmd = sub.add_parser("solve", help="Find a satisfying assignment")
    solve_cmd.add_argument("file")
    solve_cmd.add_argument("-a", "--algorithm", choices=ALGORITHMS,
                           default=config.default_algorithm(),
                           help="solver to use (default: %(default)s)")

    sub.add_parser("menu", help="Run the interactive menu")

    return parser


def _load(path: str, out: TextIO) -> Optional[Formula]:
    try:
        return read_formula(path)
    except (OSError, FormulaFormatError) as exc:
        logger.debug("cannot read formula from %s: %s", path, exc)
        print(f"Cannot read formula from {path}: {exc}", file=out)
        return None


def cmd_check(path: str, values: List[str], out: TextIO) -> int:
    formula = _load(path, out)
    if formula is None:
        return EXIT_ERROR
    if len(values) != formula.num_variables:
        print(f"The formula contains {formula.num_variables} variables, "
              f"{len(values)} values were given.", file=out)
        return EXIT_ERROR

    assignment = [parse_value(v) for v in values]
    if check_assignment(formula, assignment):
        print("The assignment satisfies the formula.", file=out)
        return EXIT_OK
    print("The assignment does not satisfy the formula.", file=out)
    return EXIT_FALSE


def cmd_classify(path: str, kind: str, out: TextIO) -> int:
    formula = _load(path, out)
    if formula is None:
        return EXIT_ERROR

    if kind == "2-SAT":
        result = is_two_sat(formula)
    else:
        result = is_horn_sat(formula)
    print(f"The formula entered is {'' if result else 'not '}{kind}.", file=out)
    return EXIT_OK if result else EXIT_FALSE


def cmd_solve(path: str, algorithm: str, out: TextIO) -> int:
    formula = _load(path, out)
    if formula is None:
        return EXIT_ERROR

    try:
        solution = solve(formula, algorithm)
    except UnsatisfiableError as exc:
        print(exc.message, file=out)
        return EXIT_FALSE
    except ValueError:
        print(f"The formula entered is not {KINDS[algorithm]}.", file=out)
        return EXIT_ERROR

    print("The solution of the SAT problem is:", file=out)
    print(format_assignment(solution), file=out)
    return EXIT_OK


MENU = """
Press a button from 1 to 7:
\t1. Check Assignment.
\t2. Is 2-SAT.
\t3. Is Horn-SAT.
\t4. Solve General SAT.
\t5. Solve 2-SAT.
\t6. Solve Horn-SAT.
\t7. Close"""

MENU_ALGORITHMS = {"4": "general", "5": "two_sat", "6": "horn_sat"}


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def run_menu(stdin: TextIO, out: TextIO) -> int:
    """
    The interactive loop: reads a selection, then the path of a formula
    file and any further input the selected operation needs.
    """
    tokens = _tokens(stdin)

    def prompt(text: str) -> Optional[str]:
        print(text, end="", file=out)
        return next(tokens, None)

    def ask_formula() -> Optional[Formula]:
        path = prompt("Please enter the path of the file containing the SAT formula:\n")
        if path is None:
            return None
        return _load(path, out)

    print("Welcome to the CNF SAT solver.", file=out)
    while True:
        print(MENU, file=out)
        selection = prompt("Enter your selection: ")
        if selection is None or selection == "7":
            print("Exiting command line interface.", file=out)
            return EXIT_OK

        if selection not in ("1", "2", "3", "4", "5", "6"):
            print("Incorrect input.", file=out)
            continue

        formula = ask_formula()
        if formula is None:
            continue

        if selection == "1":
            print(f"The formula contains {formula.num_variables} variables.", file=out)
            print("Enter the assignments one by one (enter 1 for true, anything else for false):",
                  file=out)
            assignment = numpy.zeros(formula.num_variables, dtype=bool)
            for i in range(formula.num_variables):
                token = prompt(f"\tAssignment for variable {i + 1}: ")
                assignment[i] = token is not None and parse_value(token)
            if check_assignment(formula, assignment):
                print("The assignment satisfies the formula.", file=out)
            else:
                print("The assignment does not satisfy the formula.", file=out)
        elif selection == "2":
            verdict = "" if is_two_sat(formula) else "not "
            print(f"The formula entered is {verdict}2-SAT.", file=out)
        elif selection == "3":
            verdict = "" if is_horn_sat(formula) else "not "
            print(f"The formula entered is {verdict}Horn-SAT.", file=out)
        else:
            algorithm = MENU_ALGORITHMS[selection]
            try:
                solution = solve(formula, algorithm)
            except UnsatisfiableError as exc:
                print(exc.message, file=out)
            except ValueError:
                print(f"The formula entered is not {KINDS[algorithm]}.", file=out)
            else:
                print("The solution of the SAT problem is:", file=out)
                print(format_assignment(solution), file=out)


def main(argv: Optional[Sequence[str]] = None,
         stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    stdin = stdin or sys.stdin
    out = stdout or sys.stdout

    parser = build_parser()
    args = parser.parse_args(list(argv))

    level = logging.DEBUG if args.verbose else config.log_level(args.log_level)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    if args.command == "check":
        return cmd_check(args.file, args.values, out)
    elif args.command == "is-2sat":
        return cmd_classify(args.file, "2-SAT", out)
    elif args.command == "is-horn":
        return cmd_classify(args.file, "Horn-SAT", out)
    elif args.command == "solve":
        return cmd_solve(args.file, args.algorithm, out)
    elif args.command == "menu":
        return run_menu(stdin, out)

    parser.print_help(out)
    return EXIT_OK

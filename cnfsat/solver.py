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

import logging

import numpy
from typeguard import typechecked

from .cnf import Formula
from .dpll import solve_general_sat
from .hornsat import solve_horn_sat
from .twosat import solve_two_sat
from .utils import is_horn_sat, is_two_sat

logger = logging.getLogger(__name__)

ALGORITHMS = ("auto", "general", "two_sat", "horn_sat")


@typechecked
def solve(formula: Formula, algorithm: str = "auto") -> numpy.ndarray:
    """
    Solves the formula with the named algorithm and returns the
    assignment, or raises UnsatisfiableError. The specialized algorithms
    raise ValueError when the formula is not of their kind. With "auto"
    the 2-SAT solver is tried first, then Horn-SAT on a copy of the
    formula, and DPLL for everything else.
    """
    if algorithm not in ALGORITHMS:
        raise ValueError(f"unknown algorithm {algorithm!r}")

    if algorithm == "auto":
        if is_two_sat(formula):
            algorithm = "two_sat"
        elif is_horn_sat(formula):
            algorithm = "horn_sat"
            formula = formula.copy()
        else:
            algorithm = "general"
        logger.info("selected the %s solver", algorithm)

    if algorithm == "two_sat":
        if not is_two_sat(formula):
            raise ValueError("the formula is not 2-SAT")
        return solve_two_sat(formula)
    elif algorithm == "horn_sat":
        if not is_horn_sat(formula):
            raise ValueError("the formula is not Horn-SAT")
        return solve_horn_sat(formula)
    else:
        return solve_general_sat(formula)

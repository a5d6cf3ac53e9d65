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
CNFSAT library for deciding the satisfiability of formulas in
conjunctive normal form, with specialized solvers for 2-SAT and
Horn formulas and a DPLL solver for everything else.
"""

__version__ = "0.1.0"

from .cnf import Variable, Literal, Clause, Formula
from .model import Model, VariableAssignment
from .graph import Graph
from .errors import CNFSatError, UnsatisfiableError, FormulaFormatError
from .twosat import solve_two_sat
from .hornsat import solve_horn_sat
from .dpll import solve_general_sat
from .utils import check_assignment, is_two_sat, is_horn_sat
from .solver import solve
from .reader import parse_formula, read_formula, format_formula

__all__ = [
    "Variable",
    "Literal",
    "Clause",
    "Formula",
    "Model",
    "VariableAssignment",
    "Graph",
    "CNFSatError",
    "UnsatisfiableError",
    "FormulaFormatError",
    "solve_two_sat",
    "solve_horn_sat",
    "solve_general_sat",
    "check_assignment",
    "is_two_sat",
    "is_horn_sat",
    "solve",
    "parse_formula",
    "read_formula",
    "format_formula",
]

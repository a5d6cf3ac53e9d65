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
Read only predicates over formulas and assignments.
"""

from typing import Sequence, Union

import numpy
from typeguard import typechecked

from .cnf import Formula


@typechecked
def check_assignment(formula: Formula, assignment: Union[numpy.ndarray, Sequence[bool]]) -> bool:
    """
    Returns True if the assignment, indexed by variable number minus one,
    satisfies every clause of the formula.
    """
    assert len(assignment) >= formula.num_variables
    for clause in formula.clauses:
        for literal in clause:
            if bool(assignment[literal.variable.index - 1]) != literal.negated:
                break
        else:
            return False
    return True


@typechecked
def is_two_sat(formula: Formula) -> bool:
    """Every clause has exactly two literals."""
    return all(len(clause) == 2 for clause in formula.clauses)


@typechecked
def is_horn_sat(formula: Formula) -> bool:
    """Every clause has at most one positive literal."""
    return all(clause.positive_count <= 1 for clause in formula.clauses)

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
General SAT solving with the Davis-Putnam-Logemann-Loveland procedure.
The search runs on an explicit stack of pending branches instead of
recursion, visiting them in the same order a recursive implementation
would: forced moves first, then the first unassigned variable set to
true, and only when that whole subtree fails, set to false.
"""

import logging
from typing import List, Optional, Sequence, Tuple

import numpy
from typeguard import typechecked

from .cnf import Clause, Formula, Literal, Variable
from .errors import UnsatisfiableError
from .model import Model, VariableAssignment

logger = logging.getLogger(__name__)


def find_pure_variable(clauses: Sequence[Clause], variables: Sequence[Variable],
                       model: Model) -> Optional[VariableAssignment]:
    """
    Looks for an unassigned variable occurring with only one polarity in
    the clauses not yet satisfied by the model, and returns it with the
    value satisfying those occurrences. Positive occurrences are
    preferred, otherwise the earliest variable in list order wins.
    """
    unassigned = set(variables)
    positive = set()
    negative = set()

    for clause in clauses:
        if model.determine_clause_value(clause) is True:
            continue
        positive.update(clause.positive_variables & unassigned)
        negative.update(clause.negative_variables & unassigned)

    for variable in variables:
        if variable in positive and variable not in negative:
            return VariableAssignment(variable, True)
    for variable in variables:
        if variable in negative and variable not in positive:
            return VariableAssignment(variable, False)
    return None


def find_unit_clause(clauses: Sequence[Clause], model: Model) -> Optional[VariableAssignment]:
    """
    Looks for an undetermined clause with exactly one unassigned literal
    and returns the assignment of that literal's variable that satisfies
    the clause.
    """
    for clause in clauses:
        if model.determine_clause_value(clause) is not None:
            continue

        unit: Optional[Literal] = None
        for literal in clause:
            if model.get(literal.variable) is not None:
                continue
            if unit is not None:
                unit = None
                break
            unit = literal

        if unit is not None:
            return VariableAssignment(unit.variable, not unit.negated)
    return None


def _without(variables: List[Variable], variable: Variable) -> List[Variable]:
    return [v for v in variables if v != variable]


@typechecked
def solve_general_sat(formula: Formula) -> numpy.ndarray:
    """
    Returns a satisfying assignment of an arbitrary formula as a boolean
    array indexed by variable number minus one, or raises
    UnsatisfiableError. Variables that are still unassigned when every
    clause is satisfied are set to false.
    """
    solution = numpy.zeros(formula.num_variables, dtype=bool)
    clauses = formula.clauses

    decisions = 0
    forced = 0
    work: List[Tuple[List[Variable], Model]] = [(formula.variables, Model())]
    while work:
        variables, model = work.pop()

        values = [model.determine_clause_value(clause) for clause in clauses]
        if all(value is True for value in values):
            for variable, value in model.assignments.items():
                solution[variable.index - 1] = value
            logger.debug("dpll found a model after %d decisions and %d forced moves",
                         decisions, forced)
            return solution
        if any(value is False for value in values):
            continue

        move = find_pure_variable(clauses, variables, model)
        if move is None:
            move = find_unit_clause(clauses, model)
        if move is not None:
            forced += 1
            work.append((_without(variables, move.variable),
                         model.extend(move.variable, move.value)))
            continue

        assert variables
        decisions += 1
        first, rest = variables[0], variables[1:]
        work.append((rest, model.extend(first, False)))
        work.append((rest, model.extend(first, True)))

    raise UnsatisfiableError("No satisfying assignment exists for the SAT formula.")

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

from .cnf import Formula, Literal
from .errors import UnsatisfiableError

logger = logging.getLogger(__name__)


@typechecked
def solve_horn_sat(formula: Formula) -> numpy.ndarray:
    """
    Returns the minimal satisfying assignment of a Horn formula, where
    every clause has at most one positive literal, or raises
    UnsatisfiableError.

    Variables on the empty implication queue are set to true one by one,
    and their negations are deleted from the clauses containing them.
    A clause reduced to a single positive literal puts its variable on
    the queue, while a clause that would become empty is a
    contradiction. Variables never forced stay false.

    The clauses of the formula are modified in place, pass a copy of the
    formula if it is needed afterwards.
    """
    solution = numpy.zeros(formula.num_variables, dtype=bool)

    # the empty clause has no negated literal to reach it by propagation
    if any(len(clause) == 0 for clause in formula.clauses):
        raise UnsatisfiableError(
            "No satisfying assignment exists for the Horn-SAT formula.")

    steps = 0
    while formula.empty_implications:
        variable = formula.pop_empty_implication()
        if solution[variable.index - 1]:
            continue
        solution[variable.index - 1] = True

        negation = Literal(variable, True)
        for clause in formula.clauses_with_negation(variable):
            if negation not in clause:
                continue
            if len(clause) == 1:
                raise UnsatisfiableError(
                    "No satisfying assignment exists for the Horn-SAT formula.")

            clause.remove_literal(negation)
            steps += 1
            if clause.is_empty_implication() and clause.first.variable != variable:
                formula.add_empty_implication(clause.first.variable)

    logger.debug("horn propagation removed %d literals, %d variables true",
                 steps, int(solution.sum()))
    return solution

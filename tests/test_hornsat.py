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

import numpy
import pytest
from hypothesis import given, settings

from cnfsat import Formula, UnsatisfiableError, check_assignment, solve_horn_sat

from .strategies import all_models, horn_clauses


def test_scenario_b():
    formula = Formula(3, [[1], [-1, 2], [-2, 3]])
    solution = solve_horn_sat(formula)
    assert list(solution) == [True, True, True]


def test_scenario_c():
    formula = Formula(1, [[1], [-1]])
    with pytest.raises(UnsatisfiableError):
        solve_horn_sat(formula)


def test_all_negative_clause():
    formula = Formula(3, [[1], [2], [-1, -2, 3], [-1, -3]])
    with pytest.raises(UnsatisfiableError):
        solve_horn_sat(formula.copy())
    assert formula.to_ints() == [[1], [2], [-1, -2, 3], [-1, -3]]


def test_no_facts():
    formula = Formula(2, [[-1, 2], [-2]])
    solution = solve_horn_sat(formula)
    assert not solution.any()


def test_tautology_does_not_requeue():
    formula = Formula(2, [[1], [-1, 1], [-1, 2]])
    solution = solve_horn_sat(formula)
    assert list(solution) == [True, True]


def test_rederived_fact():
    # x2 is derived twice, the second derivation must not be taken for a
    # contradiction on the already reduced clause (~x2 | x3)
    formula = Formula(3, [[2], [1], [-2, 3], [-1, 2]])
    solution = solve_horn_sat(formula)
    assert list(solution) == [True, True, True]


def test_empty_clause():
    formula = Formula(1, [[]])
    with pytest.raises(UnsatisfiableError):
        solve_horn_sat(formula.copy())

    formula = Formula(2, [[1], [-1, 2], []])
    with pytest.raises(UnsatisfiableError):
        solve_horn_sat(formula)


def test_mutates_formula():
    formula = Formula(2, [[1], [-1, 2]])
    solve_horn_sat(formula)
    assert formula.clauses[1].to_ints() == [2]
    assert not formula.empty_implications


@given(horn_clauses())
@settings(max_examples=200)
def test_random_horn_sat(data):
    nvars, clauses = data
    formula = Formula(nvars, clauses)
    models = list(all_models(nvars, clauses))

    try:
        solution = solve_horn_sat(formula.copy())
    except UnsatisfiableError:
        assert not models
        return

    assert check_assignment(formula, solution)

    # the least model is the intersection of all models
    least = numpy.logical_and.reduce(numpy.array(models, dtype=bool), axis=0)
    assert list(solution) == list(least)


if __name__ == '__main__':
    test_scenario_b()

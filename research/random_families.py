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

from typing import List

import numpy

from cnfsat import (Formula, UnsatisfiableError, check_assignment, is_horn_sat, is_two_sat,
                    solve_general_sat, solve_horn_sat, solve_two_sat)


def random_two_sat(rng: numpy.random.Generator, size: int, ratio: float) -> Formula:
    formula = Formula(size)
    for _ in range(int(size * ratio)):
        variables = rng.choice(size, 2, replace=False) + 1
        signs = rng.choice([-1, 1], 2)
        formula.add_clause([int(v * s) for v, s in zip(variables, signs)])
    return formula


def random_horn(rng: numpy.random.Generator, size: int, ratio: float) -> Formula:
    formula = Formula(size)
    for _ in range(int(size * ratio)):
        body = rng.choice(size, rng.integers(0, 3), replace=False) + 1
        clause: List[int] = [-int(v) for v in body]
        if not clause or rng.random() < 0.7:
            clause.append(int(rng.integers(1, size + 1)))
        formula.add_clause(clause)
    return formula


def satisfiable(solver, formula: Formula) -> bool:
    try:
        solution = solver(formula)
    except UnsatisfiableError:
        return False
    assert check_assignment(formula, solution)
    return True


def compare(rng: numpy.random.Generator, generator, solver, size: int,
            ratio: float, count: int) -> float:
    """
    Returns the fraction of satisfiable random formulas, checking that the
    specialized solver and the DPLL solver agree on each of them.
    """
    sat = 0
    for _ in range(count):
        formula = generator(rng, size, ratio)
        special = satisfiable(solver, formula.copy())
        general = satisfiable(solve_general_sat, formula)
        assert special == general
        sat += special
    return sat / count


def test():
    rng = numpy.random.default_rng(2025)
    for ratio in (0.5, 1.0, 1.5):
        frac = compare(rng, random_two_sat, solve_two_sat, 8, ratio, 20)
        print(f"2-SAT, 8 variables, ratio {ratio}: {frac:.2f} satisfiable")

    for ratio in (1.0, 2.0, 3.0):
        frac = compare(rng, random_horn, solve_horn_sat, 8, ratio, 20)
        print(f"Horn-SAT, 8 variables, ratio {ratio}: {frac:.2f} satisfiable")

    formula = random_two_sat(rng, 6, 1.0)
    assert is_two_sat(formula)
    formula = random_horn(rng, 6, 1.0)
    assert is_horn_sat(formula)


if __name__ == '__main__':
    test()

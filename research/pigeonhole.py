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

import time

from cnfsat import Formula, UnsatisfiableError, solve_general_sat


def pigeonhole(pigeons: int, holes: int) -> Formula:
    """
    Every pigeon sits in some hole and no two pigeons share a hole. The
    variable of pigeon p sitting in hole h is p * holes + h + 1.
    """
    def var(p: int, h: int) -> int:
        return p * holes + h + 1

    formula = Formula(pigeons * holes)
    for p in range(pigeons):
        formula.add_clause([var(p, h) for h in range(holes)])
    for h in range(holes):
        for p in range(pigeons):
            for q in range(p + 1, pigeons):
                formula.add_clause([-var(p, h), -var(q, h)])
    return formula


def placement(formula: Formula, pigeons: int, holes: int):
    try:
        solution = solve_general_sat(formula)
    except UnsatisfiableError:
        return None
    return [[h for h in range(holes) if solution[p * holes + h]] for p in range(pigeons)]


def test():
    for holes in range(1, 4):
        for pigeons in (holes, holes + 1):
            start = time.perf_counter()
            result = placement(pigeonhole(pigeons, holes), pigeons, holes)
            print(f"{pigeons} pigeons in {holes} holes: {result} "
                  f"({time.perf_counter() - start:.3f}s)")
            assert (result is None) == (pigeons > holes)


if __name__ == '__main__':
    test()

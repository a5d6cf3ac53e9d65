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
Reading and writing formulas in the plain text format: the number of
variables on the first line, a header line that is ignored (usually the
number of clauses), then one clause per line as comma separated signed
integers, for example::

    3
    2
    1,-2
    -1,2,3
"""

import logging
from pathlib import Path
from typing import Union

from typeguard import typechecked

from .cnf import Clause, Formula
from .errors import FormulaFormatError

logger = logging.getLogger(__name__)


@typechecked
def parse_formula(text: str) -> Formula:
    lines = text.splitlines()
    if not lines or not lines[0].strip():
        raise FormulaFormatError("missing number of variables", 1)

    try:
        num_variables = int(lines[0].strip())
    except ValueError:
        raise FormulaFormatError(
            f"invalid number of variables {lines[0].strip()!r}", 1) from None
    if num_variables < 0:
        raise FormulaFormatError("negative number of variables", 1)

    formula = Formula(num_variables)
    for number, line in enumerate(lines[2:], start=3):
        if not line.strip():
            continue

        clause = Clause()
        for token in line.split(","):
            try:
                value = int(token.strip())
            except ValueError:
                raise FormulaFormatError(
                    f"invalid literal {token.strip()!r}", number) from None
            if value == 0 or abs(value) > num_variables:
                raise FormulaFormatError(
                    f"literal {value} outside of variables 1..{num_variables}", number)
            clause.add_literal(value)
        formula.add_clause(clause)

    logger.debug("parsed formula with %d variables and %d clauses",
                 formula.num_variables, len(formula))
    return formula


@typechecked
def read_formula(path: Union[str, Path]) -> Formula:
    return parse_formula(Path(path).read_text(encoding="utf-8"))


@typechecked
def format_formula(formula: Formula) -> str:
    lines = [str(formula.num_variables), str(len(formula))]
    for clause in formula.clauses:
        lines.append(",".join(str(lit) for lit in clause.to_ints()))
    return "\n".join(lines) + "\n"

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

import pytest

from cnfsat import FormulaFormatError, Variable, format_formula, parse_formula, read_formula


def test_parse():
    formula = parse_formula("3\n3\n1, -2\n-1,2,3\n\n2\n")
    assert formula.num_variables == 3
    assert formula.to_ints() == [[1, -2], [-1, 2, 3], [2]]
    assert list(formula.empty_implications) == [Variable(2)]
    assert [c.to_ints() for c in formula.clauses_with_negation(Variable(1))] == [[-1, 2, 3]]


def test_parse_deduplicates_literals():
    formula = parse_formula("2\nheader\n1,1,-2\n")
    assert formula.to_ints() == [[1, -2]]


def test_parse_errors():
    with pytest.raises(FormulaFormatError) as info:
        parse_formula("")
    assert info.value.line == 1

    with pytest.raises(FormulaFormatError):
        parse_formula("three\n1\n1\n")

    with pytest.raises(FormulaFormatError) as info:
        parse_formula("2\n1\n1,x\n")
    assert info.value.line == 3

    with pytest.raises(FormulaFormatError) as info:
        parse_formula("2\n2\n1,2\n1,3\n")
    assert info.value.line == 4
    assert "line 4" in str(info.value)

    with pytest.raises(ValueError):
        parse_formula("2\n1\n0,1\n")


def test_read_and_format(tmp_path):
    path = tmp_path / "formula.txt"
    path.write_text("2\n2\n1,2\n-1,-2\n")
    formula = read_formula(path)
    assert formula.to_ints() == [[1, 2], [-1, -2]]
    assert format_formula(formula) == "2\n2\n1,2\n-1,-2\n"
    assert read_formula(str(path)).to_ints() == formula.to_ints()


if __name__ == '__main__':
    test_parse()

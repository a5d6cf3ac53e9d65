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

from cnfsat import Clause, Model, Variable


def test_extend_copies():
    empty = Model()
    one = empty.extend(Variable(1), True)
    two = one.extend(Variable(2), False)

    assert len(empty) == 0 and Variable(1) not in empty
    assert one.get(Variable(1)) is True and one.get(Variable(2)) is None
    assert two.get(Variable(1)) is True and two.get(Variable(2)) is False

    sibling = one.extend(Variable(2), True)
    assert two.get(Variable(2)) is False
    assert sibling.get(Variable(2)) is True
    assert dict(two.assignments) == {Variable(1): True, Variable(2): False}


def test_clause_value():
    clause = Clause([1, -2, 3])
    model = Model()
    assert model.determine_clause_value(clause) is None

    model = model.extend(Variable(1), False)
    assert model.determine_clause_value(clause) is None

    assert model.extend(Variable(2), False).determine_clause_value(clause) is True
    assert model.extend(Variable(3), True).determine_clause_value(clause) is True

    model = model.extend(Variable(2), True)
    assert model.determine_clause_value(clause) is None
    assert model.extend(Variable(3), False).determine_clause_value(clause) is False


def test_clause_value_special_cases():
    assert Model().determine_clause_value(Clause()) is False
    assert Model().determine_clause_value(Clause([1, -1])) is True

    model = Model({Variable(1): True})
    assert model.determine_clause_value(Clause([-1])) is False
    assert model.determine_clause_value(Clause([-1, 2, 1])) is True


if __name__ == '__main__':
    test_clause_value()

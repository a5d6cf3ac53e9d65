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

from cnfsat import Clause, Formula, Literal, Variable


def test_variable():
    assert Variable(3) == Variable(-3)
    assert Variable(3).index == 3
    assert hash(Variable(3)) == 3
    assert Variable(3) != Variable(4)
    assert len({Variable(1), Variable(1), Variable(2)}) == 2


def test_literal():
    lit = Literal(-2)
    assert lit.variable == Variable(2) and lit.negated
    assert lit.to_int() == -2 and int(lit) == -2
    assert Literal(2) == Literal(Variable(2), False)
    assert Literal(-2) == Literal(Variable(2), True)
    assert Literal(2) != Literal(-2)
    assert ~Literal(2) == Literal(-2)
    assert ~~Literal(2) == Literal(2)
    assert Literal.from_int(-5) == Literal(-5)
    assert str(Literal(-2)) == "~x2"
    assert len({Literal(1), Literal(1), Literal(-1)}) == 2


def test_clause_deduplicates():
    clause = Clause([1, -2, 1, Literal(-2)])
    assert len(clause) == 2
    assert clause.to_ints() == [1, -2]
    assert clause.positive_count == 1
    assert clause.positive_variables == {Variable(1)}
    assert clause.negative_variables == {Variable(2)}
    assert 1 in clause and Literal(-2) in clause and -1 not in clause
    assert clause.first == Literal(1) and clause.second == Literal(-2)


def test_clause_first_second_of_small_clauses():
    assert Clause().first is None and Clause().second is None
    assert Clause([3]).first == Literal(3) and Clause([3]).second is None


def test_tautology_cache_follows_mutation():
    clause = Clause([1, 2])
    assert not clause.is_tautology()
    clause.add_literal(-1)
    assert clause.is_tautology()
    assert clause.remove_literal(1)
    assert not clause.is_tautology()
    assert not clause.remove_literal(1)
    clause.add_literal(1)
    assert clause.is_tautology()


def test_remove_literal_updates_counts():
    clause = Clause([1, 2, -3])
    assert clause.positive_count == 2
    clause.remove_literal(2)
    assert clause.positive_count == 1
    assert clause.positive_variables == {Variable(1)}
    clause.remove_literal(-3)
    assert clause.negative_variables == set()
    assert clause.to_ints() == [1]


def test_empty_implication():
    assert Clause([4]).is_empty_implication()
    assert not Clause([-4]).is_empty_implication()
    assert not Clause([4, 5]).is_empty_implication()
    assert not Clause().is_empty_implication()


def test_formula_queue():
    formula = Formula(3)
    formula.add_clause([1])
    formula.add_clause([-1, 2])
    formula.add_clause(Clause([1]))
    assert list(formula.empty_implications) == [Variable(1)]

    formula.add_empty_implication(Variable(2))
    formula.add_empty_implication(Variable(2))
    assert formula.pop_empty_implication() == Variable(1)
    assert formula.pop_empty_implication() == Variable(2)
    assert not formula.empty_implications

    formula.add_empty_implication(Variable(1))
    assert list(formula.empty_implications) == [Variable(1)]


def test_formula_negation_index():
    formula = Formula(3, [[1, -2], [-2, -3], [3]])
    assert len(formula) == 3
    assert formula.variables == [Variable(1), Variable(2), Variable(3)]
    assert [c.to_ints() for c in formula.clauses_with_negation(Variable(2))] \
        == [[1, -2], [-2, -3]]
    assert formula.clauses_with_negation(Variable(1)) == []


def test_formula_copy_is_independent():
    formula = Formula(2, [[1], [-1, 2]])
    other = formula.copy()
    assert other.to_ints() == formula.to_ints()
    assert list(other.empty_implications) == [Variable(1)]

    other.clauses[1].remove_literal(-1)
    other.pop_empty_implication()
    assert formula.clauses[1].to_ints() == [-1, 2]
    assert list(formula.empty_implications) == [Variable(1)]
    assert other.clauses_with_negation(Variable(1))[0] is other.clauses[1]


def test_formula_str():
    formula = Formula(2, [[1, -2], [2]])
    assert str(formula) == "(x1 | ~x2) & (x2)"
    assert repr(formula) == "Formula(2, [[1, -2], [2]])"


if __name__ == '__main__':
    test_tautology_cache_follows_mutation()

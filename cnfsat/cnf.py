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
The data model of formulas in conjunctive normal form: variables,
literals, clauses and formulas. Literals can be given as signed
integers exactly as in the DIMACS format, so ``-3`` stands for the
negation of variable 3.
"""

from collections import deque
from typing import Deque, Dict, Iterable, Iterator, List, Optional, Set, Union

from typeguard import typechecked


class Variable:
    """
    A propositional variable identified by a positive integer. Two
    variables are equal if their indices match.
    """

    def __init__(self, index: int):
        index = abs(index)
        assert index >= 1
        self.index = index

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Variable) and self.index == other.index

    def __hash__(self) -> int:
        return self.index

    def __repr__(self) -> str:
        return f"Variable({self.index})"

    def __str__(self) -> str:
        return "x" + str(self.index)


class Literal:
    """
    A variable or its negation. When constructed from a single signed
    integer, the sign decides the negation and the absolute value the
    variable.
    """

    def __init__(self, variable: Union[int, Variable], negated: Optional[bool] = None):
        if isinstance(variable, Variable):
            self.variable = variable
            self.negated = bool(negated)
        else:
            assert variable != 0
            self.variable = Variable(variable)
            self.negated = variable < 0 if negated is None else negated

    @staticmethod
    def from_int(value: int) -> 'Literal':
        return Literal(value)

    def to_int(self) -> int:
        return -self.variable.index if self.negated else self.variable.index

    def __int__(self) -> int:
        return self.to_int()

    def __invert__(self) -> 'Literal':
        return Literal(self.variable, not self.negated)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Literal) and self.negated == other.negated \
            and self.variable == other.variable

    def __hash__(self) -> int:
        return hash((self.variable.index, self.negated))

    def __repr__(self) -> str:
        return f"Literal({self.to_int()})"

    def __str__(self) -> str:
        return ("~" if self.negated else "") + str(self.variable)


def _as_literal(literal: Union[int, Literal]) -> Literal:
    if isinstance(literal, Literal):
        return literal
    return Literal(literal)


class Clause:
    """
    A disjunction of literals. A literal occurs at most once, adding it
    again does nothing. The number of positive literals and the sets of
    variables occurring positively and negatively are kept up to date
    on every change, while the tautology flag is computed on demand and
    forgotten whenever the literals change.
    """

    def __init__(self, literals: Iterable[Union[int, Literal]] = ()):
        self._literals: Dict[Literal, None] = {}
        self.positive_variables: Set[Variable] = set()
        self.negative_variables: Set[Variable] = set()
        self._tautology: Optional[bool] = None
        for literal in literals:
            self.add_literal(literal)

    def add_literal(self, literal: Union[int, Literal]) -> None:
        literal = _as_literal(literal)
        if literal in self._literals:
            return

        self._literals[literal] = None
        if literal.negated:
            self.negative_variables.add(literal.variable)
        else:
            self.positive_variables.add(literal.variable)
        self._tautology = None

    def remove_literal(self, literal: Union[int, Literal]) -> bool:
        """
        Removes the literal from the clause and returns True, or returns
        False if the literal was not present.
        """
        literal = _as_literal(literal)
        if literal not in self._literals:
            return False

        del self._literals[literal]
        if literal.negated:
            self.negative_variables.discard(literal.variable)
        else:
            self.positive_variables.discard(literal.variable)
        self._tautology = None
        return True

    @property
    def literals(self) -> List[Literal]:
        return list(self._literals)

    @property
    def positive_count(self) -> int:
        return len(self.positive_variables)

    @property
    def first(self) -> Optional[Literal]:
        for literal in self._literals:
            return literal
        return None

    @property
    def second(self) -> Optional[Literal]:
        if len(self._literals) < 2:
            return None
        return self.literals[1]

    def is_tautology(self) -> bool:
        if self._tautology is None:
            self._tautology = not self.positive_variables.isdisjoint(
                self.negative_variables)
        return self._tautology

    def is_empty_implication(self) -> bool:
        """
        Returns True if the clause is a single positive literal, that is
        an implication with empty premise forcing its variable to true.
        """
        return len(self._literals) == 1 and not self.first.negated

    def to_ints(self) -> List[int]:
        return [literal.to_int() for literal in self._literals]

    def __len__(self) -> int:
        return len(self._literals)

    def __iter__(self) -> Iterator[Literal]:
        return iter(list(self._literals))

    def __contains__(self, literal: Union[int, Literal]) -> bool:
        return _as_literal(literal) in self._literals

    def __repr__(self) -> str:
        return f"Clause({self.to_ints()})"

    def __str__(self) -> str:
        return "(" + " | ".join(str(lit) for lit in self._literals) + ")"


class Formula:
    """
    A conjunction of clauses over the variables 1 to num_variables.

    The formula keeps an index from each variable to the clauses where
    it occurs negated, and a queue of variables forced to be true by a
    clause consisting of a single positive literal. Both are consumed
    by the Horn-SAT solver.
    """

    @typechecked
    def __init__(self, num_variables: int,
                 clauses: Iterable[Union[Clause, Iterable[int]]] = ()):
        assert num_variables >= 0
        self.num_variables = num_variables
        self.clauses: List[Clause] = []
        self.empty_implications: Deque[Variable] = deque()
        self._queued: Set[Variable] = set()
        self._negations: Dict[Variable, List[Clause]] = {}
        for clause in clauses:
            self.add_clause(clause)

    @property
    def variables(self) -> List[Variable]:
        return [Variable(i) for i in range(1, self.num_variables + 1)]

    @typechecked
    def add_clause(self, clause: Union[Clause, Iterable[Union[int, Literal]]]) -> Clause:
        """
        Adds the clause to the formula and returns it. Literals must
        refer to variables between 1 and num_variables. If the clause is
        an empty implication, its variable is put on the queue.
        """
        if not isinstance(clause, Clause):
            clause = Clause(clause)

        for literal in clause:
            assert literal.variable.index <= self.num_variables
            if literal.negated:
                self._negations.setdefault(literal.variable, []).append(clause)

        self.clauses.append(clause)
        if clause.is_empty_implication():
            self.add_empty_implication(clause.first.variable)
        return clause

    def add_empty_implication(self, variable: Variable) -> None:
        if variable not in self._queued:
            self._queued.add(variable)
            self.empty_implications.append(variable)

    def pop_empty_implication(self) -> Variable:
        variable = self.empty_implications.popleft()
        self._queued.discard(variable)
        return variable

    def clauses_with_negation(self, variable: Variable) -> List[Clause]:
        """
        Returns the clauses that were added with the negation of the
        given variable. Horn-SAT removes literals in place, so a returned
        clause may no longer contain it.
        """
        return list(self._negations.get(variable, ()))

    def copy(self) -> 'Formula':
        """
        Returns a deep copy with fresh clause objects, so the copy can be
        handed to the destructive Horn-SAT solver.
        """
        result = Formula(self.num_variables)
        for clause in self.clauses:
            result.add_clause(Clause(clause.literals))
        result.empty_implications = deque(self.empty_implications)
        result._queued = set(self.empty_implications)
        return result

    def to_ints(self) -> List[List[int]]:
        return [clause.to_ints() for clause in self.clauses]

    def __len__(self) -> int:
        return len(self.clauses)

    def __iter__(self) -> Iterator[Clause]:
        return iter(self.clauses)

    def __repr__(self) -> str:
        return f"Formula({self.num_variables}, {self.to_ints()})"

    def __str__(self) -> str:
        return " & ".join(str(clause) for clause in self.clauses)

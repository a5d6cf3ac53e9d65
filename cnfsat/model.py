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

from types import MappingProxyType
from typing import Dict, Iterator, Mapping, NamedTuple, Optional

from .cnf import Clause, Variable


class VariableAssignment(NamedTuple):
    variable: Variable
    value: bool

    def __str__(self) -> str:
        return f"{self.variable}: {self.value}"


class Model:
    """
    A partial assignment of truth values to variables. Models are never
    changed after construction: extending a model returns a new one, so
    the branches of a backtracking search cannot see each other's
    assignments.
    """

    def __init__(self, assignments: Optional[Mapping[Variable, bool]] = None):
        self._assignments: Dict[Variable, bool] = dict(assignments or {})

    @property
    def assignments(self) -> Mapping[Variable, bool]:
        return MappingProxyType(self._assignments)

    def extend(self, variable: Variable, value: bool) -> 'Model':
        model = Model(self._assignments)
        model._assignments[variable] = value
        return model

    def get(self, variable: Variable) -> Optional[bool]:
        return self._assignments.get(variable)

    def determine_clause_value(self, clause: Clause) -> Optional[bool]:
        """
        Evaluates the clause under this partial assignment. Returns True
        if the clause is a tautology or some literal is satisfied, False
        if every literal is assigned and none is satisfied, and None if
        the value still depends on unassigned variables. The empty clause
        is False.
        """
        if len(clause) == 0:
            return False
        if clause.is_tautology():
            return True

        unassigned = False
        for variable in clause.positive_variables:
            value = self._assignments.get(variable)
            if value is None:
                unassigned = True
            elif value:
                return True

        for variable in clause.negative_variables:
            value = self._assignments.get(variable)
            if value is None:
                unassigned = True
            elif not value:
                return True

        return None if unassigned else False

    def __len__(self) -> int:
        return len(self._assignments)

    def __iter__(self) -> Iterator[Variable]:
        return iter(self._assignments)

    def __contains__(self, variable: Variable) -> bool:
        return variable in self._assignments

    def __repr__(self) -> str:
        items = sorted(self._assignments.items(), key=lambda x: x[0].index)
        return "Model({" + ", ".join(f"{v.index}: {b}" for v, b in items) + "})"

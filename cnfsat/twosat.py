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
from typing import Dict

import numpy
from typeguard import typechecked

from .cnf import Formula, Literal, Variable
from .errors import UnsatisfiableError
from .graph import Graph

logger = logging.getLogger(__name__)


def implication_graph(formula: Formula) -> Graph[Literal]:
    """
    Builds the implication graph of a formula whose clauses have exactly
    two literals: for every clause (a | b) the edges ~a -> b and ~b -> a
    are added. Both literals of every variable are vertices.
    """
    graph: Graph[Literal] = Graph(directed=True)
    for variable in formula.variables:
        graph.add_vertex(Literal(variable, False))
        graph.add_vertex(Literal(variable, True))

    for clause in formula.clauses:
        assert len(clause) == 2
        first, second = clause.literals
        graph.add_edge(~first, second)
        graph.add_edge(~second, first)
    return graph


@typechecked
def solve_two_sat(formula: Formula) -> numpy.ndarray:
    """
    Returns a satisfying assignment of a 2-SAT formula as a boolean
    array indexed by variable number minus one, or raises
    UnsatisfiableError. Every clause must have exactly two literals.
    """
    solution = numpy.zeros(formula.num_variables, dtype=bool)

    graph = implication_graph(formula)
    components = graph.strongly_connected_components()
    logger.debug("implication graph with %d vertices, %d edges, %d components",
                 len(graph), graph.num_edges, max(components.values(), default=0))

    for variable in formula.variables:
        if components[Literal(variable, False)] == components[Literal(variable, True)]:
            raise UnsatisfiableError(
                "No satisfying assignment exists for the 2-SAT formula.")

    # the literal popped last for a variable lies closer to a sink
    # component and decides its value
    stack = graph.vertices_stack
    while stack:
        literal = stack.pop()
        solution[literal.variable.index - 1] = not literal.negated

    return solution


def component_assignment(components: Dict[Literal, int], variable: Variable) -> bool:
    """
    The value of the variable read off the component numbers directly:
    true if its positive literal was found before its negation.
    """
    return components[Literal(variable, False)] < components[Literal(variable, True)]

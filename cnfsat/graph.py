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
A directed or undirected graph over hashable vertices with depth first
search and Kosaraju's strongly connected components algorithm. The
traversals use an explicit stack, so their depth is not limited by the
interpreter's recursion limit.
"""

from typing import Dict, Generic, Hashable, Iterator, List, Set, TypeVar

V = TypeVar('V', bound=Hashable)


class Graph(Generic[V]):
    def __init__(self, directed: bool = True):
        self.directed = directed
        self._adjacency: Dict[V, List[V]] = {}

        # state of the last traversal, recomputed on every call
        self._visited: Set[V] = set()
        self._stack: List[V] = []
        self._components: Dict[V, int] = {}
        self._counter = 0

    def add_vertex(self, vertex: V) -> None:
        if vertex not in self._adjacency:
            self._adjacency[vertex] = []

    def add_edge(self, source: V, destination: V) -> None:
        """
        Adds an edge, registering missing endpoints. Parallel edges are
        kept. In an undirected graph the reverse edge is added too.
        """
        self.add_vertex(source)
        self.add_vertex(destination)

        self._adjacency[source].append(destination)
        if not self.directed:
            self._adjacency[destination].append(source)

    @property
    def vertices(self) -> List[V]:
        return list(self._adjacency)

    def neighbors(self, vertex: V) -> List[V]:
        return list(self._adjacency[vertex])

    @property
    def num_edges(self) -> int:
        count = sum(len(dests) for dests in self._adjacency.values())
        return count if self.directed else count // 2

    def reverse(self) -> 'Graph[V]':
        """
        Returns the transpose of this graph with every edge flipped. All
        vertices are kept, including the isolated ones.
        """
        reverse: Graph[V] = Graph(self.directed)
        for vertex in self._adjacency:
            reverse.add_vertex(vertex)
        for source, dests in self._adjacency.items():
            for dest in dests:
                reverse._adjacency[dest].append(source)
        return reverse

    def depth_first_search(self) -> List[V]:
        """
        Explores the whole graph and returns the vertices in finishing
        order. Every tree of the resulting forest gets a new number in
        the component map.
        """
        self._reset()
        for vertex in self._adjacency:
            if vertex not in self._visited:
                self._counter += 1
                self.explore(vertex)
        return list(self._stack)

    def explore(self, vertex: V) -> None:
        """
        Visits every unvisited vertex reachable from the given one,
        labels them with the current component number, and pushes each
        of them on the finishing stack after all of its descendants.
        """
        self._visited.add(vertex)
        self._components[vertex] = self._counter
        work = [(vertex, iter(self._adjacency[vertex]))]
        while work:
            current, dests = work[-1]
            for dest in dests:
                if dest not in self._visited:
                    self._visited.add(dest)
                    self._components[dest] = self._counter
                    work.append((dest, iter(self._adjacency[dest])))
                    break
            else:
                work.pop()
                self._stack.append(current)

    def strongly_connected_components(self) -> Dict[V, int]:
        """
        Returns the map from vertices to component numbers, starting
        from 1 in the order the components are found. The finishing order
        of the reverse graph is consumed from the top, so the components
        come out in reverse topological order: a component is numbered
        before every component that has an edge into it.
        """
        reverse = self.reverse()
        order = reverse.depth_first_search()

        self._reset()
        while order:
            vertex = order.pop()
            if vertex not in self._visited:
                self._counter += 1
                self.explore(vertex)

        return dict(self._components)

    @property
    def vertices_stack(self) -> List[V]:
        """
        The finishing stack of the last traversal, top at the end. After
        computing the strongly connected components this lists the
        vertices grouped by component in reverse topological order.
        """
        return list(self._stack)

    def _reset(self) -> None:
        self._visited = set()
        self._stack = []
        self._components = {}
        self._counter = 0

    def __len__(self) -> int:
        return len(self._adjacency)

    def __iter__(self) -> Iterator[V]:
        return iter(list(self._adjacency))

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._adjacency

    def __str__(self) -> str:
        return "".join(f"{vertex}: {[str(d) for d in dests]}\n"
                       for vertex, dests in self._adjacency.items())

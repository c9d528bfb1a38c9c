'''Binary relations whose related pairs are stored explicitly, pair by pair'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

import logging
LOGGER = logging.getLogger(__name__)

from typing import Hashable, Iterable, Iterator, TypeVar
from threading import RLock

import networkx as nx

from .base import MutableBinaryRelation, check_membership
from ..mutils.setutils import Universe, elements

ElementT = TypeVar('ElementT', bound=Hashable)


class PhysicalBinaryRelation(MutableBinaryRelation):
    '''
    A binary relation materialized as a table of pairs, built up via add_relation() and remove_relation()

    Pairs are held as the edges of a directed graph, whose adjacency forms the
    two-level mapping source -> target; an element with no outgoing edges relates to nothing (yet).
    Nothing is ever implied by a mutation: adding x -> y does NOT add y -> x or x -> x

    Parameters
    ----------
    universe : Universe
        The set over which the relation is defined; referenced, never copied
    pairs : Iterable[tuple[Hashable, Hashable]], default ()
        Ordered pairs to relate upon creation
    '''
    def __init__(
        self,
        universe : Universe[ElementT],
        pairs : Iterable[tuple[ElementT, ElementT]]=(),
    ) -> None:
        self._universe = universe
        self._graph = nx.DiGraph() # nodes are elements boxed as 1-tuples, since networkx forbids None as a node
        self._lock = RLock() # serializes mutations against reads from other threads

        for x, y in pairs:
            self.add_relation(x, y)

    @property
    def universe(self) -> Universe[ElementT]:
        return self._universe

    # mutation
    def add_relation(self, x : ElementT, y : ElementT) -> None:
        check_membership(self._universe, x, y, caller=f'{self.__class__.__name__}.add_relation')
        with self._lock:
            bucket = self._graph.adj.get((x,))
            if bucket is not None and (y,) in bucket:
                return # already related

            self._graph.add_edge((x,), (y,)) # creates the inner bucket for x lazily
        LOGGER.debug(f'Related {x!r} -> {y!r}')

    def remove_relation(self, x : ElementT, y : ElementT) -> None:
        check_membership(self._universe, x, y, caller=f'{self.__class__.__name__}.remove_relation')
        with self._lock:
            if not self._graph.has_edge((x,), (y,)):
                return
            self._graph.remove_edge((x,), (y,)) # leaves x's (possibly empty) bucket in place
        LOGGER.debug(f'Unrelated {x!r} -> {y!r}')

    # query
    def contains_relation(self, x : ElementT, y : ElementT) -> bool:
        check_membership(self._universe, x, y, caller=f'{self.__class__.__name__}.contains_relation')
        with self._lock:
            bucket = self._graph.adj.get((x,))
            if bucket is None:
                return False
            return (y,) in bucket

    def pairs(self) -> Iterator[tuple[ElementT, ElementT]]:
        '''Generates all currently related pairs (x, y), from a snapshot taken at call time'''
        with self._lock:
            snapshot = [(x, y) for (x,), (y,) in self._graph.edges]
        return iter(snapshot)

    @property
    def number_of_pairs(self) -> int:
        '''The number of ordered pairs currently related'''
        with self._lock:
            return self._graph.number_of_edges()

    # export and copying
    def to_digraph(self) -> nx.DiGraph:
        '''
        Independent directed graph with one node per universe element and one edge per related pair

        Nodes are integer indices (in the enumeration order of the universe), with the element
        each stands for bound to the "element" node attribute; this admits any hashable element, None included.
        Elements which participate in no pair still appear as isolated nodes
        '''
        graph = nx.DiGraph()
        node_index : dict[ElementT, int] = {}
        for idx, elem in enumerate(elements(self._universe)):
            node_index[elem] = idx
            graph.add_node(idx, element=elem)

        graph.add_edges_from(
            (node_index[x], node_index[y])
                for x, y in self.pairs()
        )

        return graph

    def copy(self) -> 'PhysicalBinaryRelation':
        '''Independent relation over the same universe, relating the same pairs as this one'''
        return self.__class__(self._universe, pairs=self.pairs())

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}(num_elements={len(self._universe)}, num_pairs={self.number_of_pairs})'

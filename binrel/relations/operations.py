'''Constructions of new relations from existing ones, and conversions between relation representations'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

import logging
LOGGER = logging.getLogger(__name__)

from typing import Generator, Hashable, Optional, Sequence, TypeVar

import numpy as np

from .base import BinaryRelation, IncomposableRelationsError
from .physical import PhysicalBinaryRelation
from .predicate import PredicateBinaryRelation
from .properties import composable_relations
from ..mutils.setutils import elements, ordered_pairs

ElementT = TypeVar('ElementT', bound=Hashable)


# derived relations
def complement(b : BinaryRelation) -> PredicateBinaryRelation:
    '''The relation which holds for exactly those pairs of the universe where B does not'''
    LOGGER.debug(f'Deriving complement of {b!r}')
    return PredicateBinaryRelation(
        b.universe,
        lambda x, y : not b.contains_relation(x, y),
    )

def converse(b : BinaryRelation) -> PredicateBinaryRelation:
    '''The transpose of B: x is related to y in the converse iff yBx'''
    LOGGER.debug(f'Deriving converse of {b!r}')
    return PredicateBinaryRelation(
        b.universe,
        lambda x, y : b.contains_relation(y, x),
    )

def compose(*relations : BinaryRelation) -> PredicateBinaryRelation:
    '''
    The relational composition of one or more relations, applied left-to-right:
    for relations (R, S), x is related to z iff there is some y in the universe with xRy and ySz

    Raises
    ------
    IncomposableRelationsError
        If no relations are given, or if the relations are not all defined over equivalent universes
    '''
    if not relations:
        raise IncomposableRelationsError('At least one relation is required for composition')

    if not composable_relations(relations):
        raise IncomposableRelationsError(f'Cannot compose relations over inequivalent universes: {relations!r}')

    universe = relations[0].universe
    def chain_exists(x : ElementT, z : ElementT) -> bool:
        elems = elements(universe)
        frontier = {x}
        for b in relations:
            frontier = {
                y
                    for w in frontier
                        for y in elems
                            if b.contains_relation(w, y)
            }
            if not frontier:
                return False

        return z in frontier

    LOGGER.debug(f'Composing {len(relations)} relations')
    return PredicateBinaryRelation(universe, chain_exists)

# representation changes
def related_pairs(b : BinaryRelation) -> Generator[tuple[ElementT, ElementT], None, None]:
    '''Generates every ordered pair of the universe which B relates'''
    for x, y in ordered_pairs(b.universe):
        if b.contains_relation(x, y):
            yield (x, y)

def materialize(b : BinaryRelation) -> PhysicalBinaryRelation:
    '''
    Snapshot of any relation as an explicitly-stored relation over the same universe
    Later changes to B (or to the inputs of its predicate) are not reflected in the snapshot
    '''
    return PhysicalBinaryRelation(b.universe, pairs=related_pairs(b))

def relation_matrix(
    b : BinaryRelation,
    order : Optional[Sequence[ElementT]]=None,
    dtype : type=bool,
) -> np.ndarray:
    '''
    Adjacency matrix of a relation, whose (i, j)-th entry indicates whether the i-th element is related to the j-th

    Parameters
    ----------
    b : BinaryRelation
        The relation to tabulate
    order : Sequence[Hashable], optional
        The order in which elements index rows and columns
        If not provided, the enumeration order of the universe is used
    dtype : type, default bool
        The datatype of the returned array's entries

    Returns
    -------
    matrix : np.ndarray
        Square array with one row and column per element
    '''
    if order is None:
        order = elements(b.universe)

    n_elems = len(order)
    matrix = np.zeros((n_elems, n_elems), dtype=dtype)
    for i, x in enumerate(order):
        for j, y in enumerate(order):
            matrix[i, j] = b.contains_relation(x, y)

    return matrix

'''
Checks of the classical properties of binary relations

Every check is a pure function written only against the BinaryRelation interface;
below, "B" denotes the relation checked and "X" its universe
'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

import logging
LOGGER = logging.getLogger(__name__)

from typing import Sequence

from .base import BinaryRelation
from ..mutils.setutils import elements, equivalent, ordered_pairs, ordered_triples


def reflexive(b : BinaryRelation) -> bool:
    '''Whether xBx for every x in X'''
    for e in elements(b.universe):
        if not b.contains_relation(e, e):
            LOGGER.debug(f'Not reflexive: {e!r} is not related to itself')
            return False

    return True

def complete(b : BinaryRelation) -> bool:
    '''Whether xBy or yBx for every x, y in X (including x = y, which therefore demands reflexivity)'''
    for x, y in ordered_pairs(b.universe):
        if not (b.contains_relation(x, y) or b.contains_relation(y, x)):
            LOGGER.debug(f'Not complete: neither {x!r} -> {y!r} nor {y!r} -> {x!r} are related')
            return False

    return True

def symmetric(b : BinaryRelation) -> bool:
    '''Whether xBy implies yBx, for every x, y in X'''
    for x, y in ordered_pairs(b.universe):
        if b.contains_relation(x, y) and not b.contains_relation(y, x):
            LOGGER.debug(f'Not symmetric: {x!r} -> {y!r} is related, but {y!r} -> {x!r} is not')
            return False

    return True

def antisymmetric(b : BinaryRelation) -> bool:
    '''Whether xBy and yBx together imply x = y, for every x, y in X'''
    for x, y in ordered_pairs(b.universe):
        if (x != y) and b.contains_relation(x, y) and b.contains_relation(y, x):
            LOGGER.debug(f'Not antisymmetric: distinct {x!r} and {y!r} are related in both directions')
            return False

    return True

def composes_transitively(b : BinaryRelation) -> bool:
    '''
    Whether xBy and yBz together imply xBz, for every x, y, z in X
    This is transitivity in the usual mathematical sense, with no demand on completeness
    '''
    for x, y, z in ordered_triples(b.universe):
        if b.contains_relation(x, y) and b.contains_relation(y, z) and not b.contains_relation(x, z):
            LOGGER.debug(f'Not transitive: {x!r} -> {y!r} -> {z!r} is related, but {x!r} -> {z!r} is not')
            return False

    return True

def transitive(b : BinaryRelation) -> bool:
    '''
    Whether B is complete, and xBy and yBz together imply xBz, for every x, y, z in X

    NOTE: completeness is demanded on top of transitivity proper; incomplete relations
    are never reported as transitive here. Use composes_transitively() for the plain property
    '''
    if not complete(b):
        return False
    return composes_transitively(b)

def composable_relations(relations : Sequence[BinaryRelation]) -> bool:
    '''
    Whether a collection of relations can be composed with one another,
    i.e. whether they are all defined over equivalent universes (vacuously true when there are no relations)
    '''
    if len(relations) == 0:
        return True

    universe = relations[0].universe
    for b in relations:
        if not equivalent(universe, b.universe):
            return False

    return True

'''Checks for order relations, and the reverse of a relation'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

from .base import BinaryRelation
from .predicate import PredicateBinaryRelation
from .properties import antisymmetric, complete, transitive
from .operations import complement


def weak_order(b : BinaryRelation) -> bool:
    '''Whether B is complete and transitive, e.g. ">=" on the natural numbers'''
    return complete(b) and transitive(b)

def strict_order(b : BinaryRelation) -> bool:
    '''Whether B is a weak order which is additionally antisymmetric'''
    return weak_order(b) and antisymmetric(b)

def reverse(b : BinaryRelation) -> PredicateBinaryRelation:
    '''
    Relation over the same universe holding for (x, y) exactly when xBy does NOT hold

    NOTE: despite the name, this is the complement of B, not its converse;
    the reverse of ">=" in this sense is "<". Use operations.converse() for the transpose
    '''
    return complement(b)

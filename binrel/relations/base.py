'''Abstract interfaces for binary relations, and the precondition boundary shared by all implementations'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

from typing import Hashable, TypeVar
from abc import ABC, abstractmethod

from ..mutils.setutils import Universe, contains

ElementT = TypeVar('ElementT', bound=Hashable)


# Custom Exceptions
class RelationError(Exception):
    '''Raised when relation-related errors are encountered'''
    pass

class PreconditionError(RelationError, AssertionError):
    '''
    Raised when a caller breaches the contract of a relation operation
    Signals a programming error, rather than a condition to be recovered from
    '''
    pass

class UniverseMembershipError(PreconditionError, KeyError):
    '''Raised when an element passed to a relation operation is not a member of the relation's universe'''
    def __str__(self) -> str: # KeyError otherwise repr()s the message
        return str(self.args[0]) if self.args else ''

class IncomposableRelationsError(RelationError, ValueError):
    '''Raised when attempting to combine relations which are not all defined over equivalent universes'''
    pass

def check_membership(universe : Universe[ElementT], *elems : ElementT, caller : str='relation') -> None:
    '''Raise a UniverseMembershipError if any of the given elements lie outside of a universe'''
    for position, elem in enumerate(elems, start=1):
        if not contains(universe, elem):
            raise UniverseMembershipError(f'{caller}: element {position} ({elem!r}) is not contained in universe')

# Interfaces
class BinaryRelation(ABC):
    '''
    A binary relation from set theory, i.e. a subset of the ordered pairs
    of elements drawn from some universe, here exposed only through membership queries

    Implementations are free to store pairs explicitly or compute them on demand;
    algorithms written against this interface must rely on nothing but "universe" and "contains_relation"
    '''
    @property
    @abstractmethod
    def universe(self) -> Universe:
        '''The set over which this relation is defined'''
        ...

    @abstractmethod
    def contains_relation(self, x : ElementT, y : ElementT) -> bool:
        '''
        Whether x is related to y, in that order

        Raises UniverseMembershipError if either element is not in the universe
        '''
        ...

    def __contains__(self, pair : tuple[ElementT, ElementT]) -> bool:
        if not (isinstance(pair, tuple) and len(pair) == 2):
            raise TypeError(f'Membership in a binary relation is only defined for ordered pairs (2-tuples), not {pair!r}')
        x, y = pair
        return self.contains_relation(x, y)

class MutableBinaryRelation(BinaryRelation):
    '''
    A binary relation constructed piecewise, whose representation is finite and stored in full
    Contrast with a relation defined by some function of pairs of elements
    '''
    @abstractmethod
    def add_relation(self, x : ElementT, y : ElementT) -> None:
        '''Record that x is related to y; adding a pair which is already present has no further effect'''
        ...

    @abstractmethod
    def remove_relation(self, x : ElementT, y : ElementT) -> None:
        '''Forget that x is related to y; removing a pair which is not present does nothing'''
        ...

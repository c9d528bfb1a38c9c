'''
Utilities related to generic set-theoretic operations,
namely the minimal contract any finite set must satisfy to serve as the universe of a relation
'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

from typing import (
    Generator,
    Hashable,
    Iterator,
    Protocol,
    TypeVar,
    runtime_checkable,
)
from itertools import product as cartesian

ElementT = TypeVar('ElementT', bound=Hashable)


@runtime_checkable
class Universe(Protocol[ElementT]):
    '''
    Any finite, re-enumerable collection of distinct elements over which a relation can be defined

    Builtin set, frozenset, range, and dict key views all satisfy this Protocol;
    enumeration order need not be stable between calls, but must be exhaustive and free of duplicates
    '''
    def __contains__(self, element : object) -> bool:
        ...

    def __iter__(self) -> Iterator[ElementT]:
        ...

    def __len__(self) -> int:
        ...

def contains(universe : Universe[ElementT], element : object) -> bool:
    '''Whether an element is a member of a universe; objects which can't be hashed are never members'''
    try:
        hash(element)
    except TypeError:
        return False

    return element in universe

def elements(universe : Universe[ElementT]) -> tuple[ElementT, ...]:
    '''Enumerate the elements of a universe once, for algorithms which need to traverse it several times'''
    return tuple(universe)

def equivalent(set_a : Universe[ElementT], set_b : Universe[ElementT]) -> bool:
    '''Whether two sets have exactly the same members, irrespective of container type or enumeration order'''
    if set_a is set_b:
        return True

    if len(set_a) != len(set_b):
        return False
    return all(contains(set_b, elem) for elem in set_a)

def ordered_pairs(universe : Universe[ElementT]) -> Generator[tuple[ElementT, ElementT], None, None]:
    '''Generates every ordered pair (x, y) of elements of a universe, including the diagonal pairs where x == y'''
    elems = elements(universe)
    yield from cartesian(elems, repeat=2)

def ordered_triples(universe : Universe[ElementT]) -> Generator[tuple[ElementT, ElementT, ElementT], None, None]:
    '''Generates every ordered triple (x, y, z) of elements of a universe, repetitions included'''
    elems = elements(universe)
    yield from cartesian(elems, repeat=3)

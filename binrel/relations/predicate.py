'''Binary relations defined by a rule evaluated on demand, rather than by stored pairs'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

from typing import Callable, Hashable, TypeAlias, TypeVar

from .base import BinaryRelation, check_membership
from ..mutils.setutils import Universe

ElementT = TypeVar('ElementT', bound=Hashable)
RelatedPredicate : TypeAlias = Callable[[Hashable, Hashable], bool]


class PredicateBinaryRelation(BinaryRelation):
    '''
    A binary relation defined by a predicate over pairs of elements, e.g. the ">=" relation on some integers
    Suited to relations too large or naturally algorithmic to materialize, and to relations derived from others

    Immutable; "modifying" the relation amounts to constructing a new one with a different predicate

    Parameters
    ----------
    universe : Universe
        The set over which the relation is defined; the predicate is trusted to be defined over all of it
    related : Callable[[Hashable, Hashable], bool]
        Indicates whether its first argument is related to its second
    '''
    def __init__(self, universe : Universe[ElementT], related : RelatedPredicate) -> None:
        if not callable(related):
            raise TypeError(f'Relation predicate must be callable, not {type(related).__name__}')

        self._universe = universe
        self._related = related

    @property
    def universe(self) -> Universe[ElementT]:
        return self._universe

    @property
    def related(self) -> RelatedPredicate:
        '''The predicate defining this relation'''
        return self._related

    def contains_relation(self, x : ElementT, y : ElementT) -> bool:
        check_membership(self._universe, x, y, caller=f'{self.__class__.__name__}.contains_relation')
        return bool(self._related(x, y))

    def __repr__(self) -> str:
        predicate_name = getattr(self._related, '__qualname__', repr(self._related))
        return f'{self.__class__.__name__}(num_elements={len(self._universe)}, related={predicate_name})'

'''Binary relations over finite sets, and checks of their classical properties'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

from .base import (
    BinaryRelation,
    MutableBinaryRelation,
    RelationError,
    PreconditionError,
    UniverseMembershipError,
    IncomposableRelationsError,
)
from .physical import PhysicalBinaryRelation
from .predicate import PredicateBinaryRelation, RelatedPredicate
from .properties import (
    reflexive,
    complete,
    symmetric,
    antisymmetric,
    composes_transitively,
    transitive,
    composable_relations,
)
from .operations import (
    complement,
    converse,
    compose,
    related_pairs,
    materialize,
    relation_matrix,
)
from .orders import weak_order, strict_order, reverse

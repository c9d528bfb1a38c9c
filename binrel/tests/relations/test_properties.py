'''Unit tests for checks of the classical properties of relations'''

__author__ = 'Timotej Bernat'
__email__ = 'timotej.bernat@colorado.edu'

import pytest

from binrel.relations.base import BinaryRelation
from binrel.relations.physical import PhysicalBinaryRelation
from binrel.relations.predicate import PredicateBinaryRelation
from binrel.relations.properties import (
    reflexive,
    complete,
    symmetric,
    antisymmetric,
    composes_transitively,
    transitive,
    composable_relations,
)


AB = frozenset({'a', 'b'})
ABC = frozenset({'a', 'b', 'c'})
NUMS = frozenset(range(1, 6))

# reflexivity tests
def test_reflexive_after_all_self_pairs() -> None:
    '''Test that reflexivity only holds once every element is related to itself'''
    R = PhysicalBinaryRelation(AB)
    R.add_relation('a', 'a')
    assert not reflexive(R)

    R.add_relation('b', 'b')
    assert reflexive(R)

def test_reflexive_empty_universe() -> None:
    '''Test that the relation over the empty set is vacuously reflexive'''
    assert reflexive(PhysicalBinaryRelation(frozenset()))

# completeness tests
def test_complete_single_pair() -> None:
    '''Test that a single off-diagonal pair doesn't make a relation complete (the diagonal is uncovered)'''
    R = PhysicalBinaryRelation(AB, pairs=[('a', 'b')])
    assert not complete(R)

def test_complete_tournament() -> None:
    '''Test that a relation covering both diagonal pairs and one direction between distinct elements is complete'''
    R = PhysicalBinaryRelation(AB, pairs=[('a', 'a'), ('b', 'b'), ('b', 'a')])
    assert complete(R)

def test_complete_all_pairs() -> None:
    '''Test that relating every ordered pair makes a relation complete'''
    R = PhysicalBinaryRelation(ABC, pairs=[(x, y) for x in ABC for y in ABC])
    assert complete(R)

# symmetry tests
@pytest.mark.parametrize(
    'pairs, expected_symmetric',
    [
        ([], True),
        ([('a', 'a')], True),
        ([('a', 'b'), ('b', 'a')], True),
        ([('a', 'b')], False),
        ([('a', 'b'), ('b', 'a'), ('b', 'c')], False),
    ]
)
def test_symmetric(pairs : list[tuple[str, str]], expected_symmetric : bool) -> None:
    '''Test that symmetry demands the converse of every related pair also be related'''
    R = PhysicalBinaryRelation(ABC, pairs=pairs)
    assert symmetric(R) == expected_symmetric

def test_symmetric_predicate() -> None:
    '''Test symmetry of relations defined by predicates'''
    assert symmetric(PredicateBinaryRelation(NUMS, lambda x, y : (x + y) % 2 == 0))
    assert not symmetric(PredicateBinaryRelation(NUMS, lambda x, y : x <= y))

# antisymmetry tests
def test_antisymmetric_mutual_pair() -> None:
    '''Test that distinct elements related in both directions violate antisymmetry'''
    R = PhysicalBinaryRelation(AB, pairs=[('a', 'b'), ('b', 'a')])
    assert not antisymmetric(R)

def test_antisymmetric_self_pair() -> None:
    '''Test that self-pairs never violate antisymmetry'''
    R = PhysicalBinaryRelation(AB, pairs=[('a', 'a')])
    assert antisymmetric(R)

def test_antisymmetric_predicate() -> None:
    '''Test that "<=" on integers is antisymmetric, while "same parity" is not'''
    assert antisymmetric(PredicateBinaryRelation(NUMS, lambda x, y : x <= y))
    assert not antisymmetric(PredicateBinaryRelation(NUMS, lambda x, y : (x - y) % 2 == 0))

# transitivity tests
CYCLE = [
    ('a', 'a'), ('b', 'b'), ('c', 'c'),
    ('a', 'b'), ('b', 'c'), ('c', 'a'),
]
TOTAL_ORDER = [
    ('a', 'a'), ('b', 'b'), ('c', 'c'),
    ('a', 'b'), ('b', 'c'), ('a', 'c'),
]

def test_transitive_cycle() -> None:
    '''Test that a complete 3-cycle without the shortcut a -> c is not transitive'''
    R = PhysicalBinaryRelation(ABC, pairs=CYCLE)
    assert complete(R) and not transitive(R)

def test_transitive_total_order() -> None:
    '''Test that a total order is transitive'''
    R = PhysicalBinaryRelation(ABC, pairs=TOTAL_ORDER)
    assert transitive(R)

def test_transitive_requires_complete() -> None:
    '''Test that an incomplete relation is never reported transitive, even if its pairs compose'''
    R = PhysicalBinaryRelation(ABC, pairs=[('a', 'b'), ('b', 'c'), ('a', 'c')])
    assert composes_transitively(R) and not transitive(R)

@pytest.mark.parametrize(
    'pairs, expected_composes',
    [
        ([], True),
        ([('a', 'b')], True),
        ([('a', 'b'), ('b', 'c')], False),
        ([('a', 'b'), ('b', 'a')], False), # would need both self-pairs
        ([('a', 'b'), ('b', 'a'), ('a', 'a'), ('b', 'b')], True),
        (CYCLE, False),
        (TOTAL_ORDER, True),
    ]
)
def test_composes_transitively(pairs : list[tuple[str, str]], expected_composes : bool) -> None:
    '''Test transitivity proper, without a completeness requirement'''
    R = PhysicalBinaryRelation(ABC, pairs=pairs)
    assert composes_transitively(R) == expected_composes

def test_transitive_predicate() -> None:
    '''Test that ">=" is transitive and "differs by exactly one" is not'''
    assert transitive(PredicateBinaryRelation(NUMS, lambda x, y : x >= y))
    assert not composes_transitively(PredicateBinaryRelation(NUMS, lambda x, y : abs(x - y) == 1))

# composability tests
def test_composable_empty() -> None:
    '''Test that no relations at all are vacuously composable'''
    assert composable_relations([])

def test_composable_equal_universes() -> None:
    '''Test that relations over universes with identical members are composable, regardless of container'''
    relations = [
        PhysicalBinaryRelation(frozenset({1, 2, 3})),
        PredicateBinaryRelation(range(1, 4), lambda x, y : x < y),
        PhysicalBinaryRelation({3, 2, 1}),
    ]
    assert composable_relations(relations)

@pytest.mark.parametrize(
    'other_universe',
    [
        frozenset({4, 5, 6}), # disjoint
        frozenset({1, 2}),    # proper subset
    ]
)
def test_composable_unequal_universes(other_universe : frozenset) -> None:
    '''Test that relations over inequivalent universes are not composable'''
    relations = [
        PhysicalBinaryRelation(frozenset({1, 2, 3})),
        PhysicalBinaryRelation(other_universe),
    ]
    assert not composable_relations(relations)

# purity tests
@pytest.mark.parametrize(
    'check',
    [reflexive, complete, symmetric, antisymmetric, composes_transitively, transitive],
)
def test_checks_do_not_mutate(check) -> None:
    '''Test that property checks leave the relation checked unchanged'''
    R = PhysicalBinaryRelation(ABC, pairs=CYCLE)
    pairs_before = set(R.pairs())
    _ = check(R)

    assert set(R.pairs()) == pairs_before

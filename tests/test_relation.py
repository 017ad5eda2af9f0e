from ialgebra import Relation, invert

PAIRS = [
    (Relation.BEFORE, Relation.AFTER),
    (Relation.MEETS, Relation.MET_BY),
    (Relation.OVERLAPS, Relation.OVERLAPPED_BY),
    (Relation.FINISHED_BY, Relation.FINISHES),
    (Relation.CONTAINS, Relation.DURING),
    (Relation.STARTS, Relation.STARTED_BY),
]


def test_there_are_fourteen_relations() -> None:
    assert len(Relation) == 14
    assert list(Relation)[0] is Relation.UNKNOWN
    assert list(Relation)[-1] is Relation.AFTER


def test_invert_swaps_each_pair() -> None:
    for forward, backward in PAIRS:
        assert invert(forward) is backward
        assert invert(backward) is forward


def test_fixed_points() -> None:
    assert invert(Relation.EQUAL) is Relation.EQUAL
    assert invert(Relation.UNKNOWN) is Relation.UNKNOWN


def test_invert_is_an_involution() -> None:
    for relation in Relation:
        assert invert(invert(relation)) is relation


def test_only_equal_and_unknown_are_self_inverse() -> None:
    fixed = {relation for relation in Relation if invert(relation) is relation}
    assert fixed == {Relation.EQUAL, Relation.UNKNOWN}


def test_invert_of_non_relation_is_unknown() -> None:
    assert invert(42) is Relation.UNKNOWN
    assert invert("before") is Relation.UNKNOWN
    assert invert(None) is Relation.UNKNOWN


def test_inverse_property_matches_invert() -> None:
    for relation in Relation:
        assert relation.inverse is invert(relation)


def test_is_known() -> None:
    assert not Relation.UNKNOWN.is_known
    assert all(r.is_known for r in Relation if r is not Relation.UNKNOWN)


def test_values_are_lowercase_names() -> None:
    assert Relation("overlapped_by") is Relation.OVERLAPPED_BY
    assert all(r.value == r.name.lower() for r in Relation)

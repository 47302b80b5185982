from memberquery.domain.paging import SortDirection, SortOrder
from memberquery.domain.predicates import Attribute, eq, goe
from memberquery.domain.query import JoinKind, MemberQuery, Projection


def test_member_query_is_copy_on_write():
    """
    Validate fluent methods leave the original query untouched.

    1. Build a base query and derive a filtered, joined query.
    2. Validate the base query still has defaults.
    3. Validate the derived query carries projection, join, and predicate.
    """
    base = MemberQuery()
    derived = base.select(Projection.member_team).left_join_team().where(eq(Attribute.username, "member1"))
    assert base.predicate is None
    assert base.team_join is JoinKind.none
    assert derived.projection is Projection.member_team
    assert derived.team_join is JoinKind.left
    assert derived.predicate == eq(Attribute.username, "member1")


def test_where_ignores_absent_predicates_and_merges_present_ones():
    """
    Validate where() AND-merges predicates and skips None.

    1. Call where() with only None.
    2. Call where() twice with real predicates.
    3. Validate the merged predicate holds both leaves.
    """
    assert MemberQuery().where(None, None).predicate is None
    query = MemberQuery().where(goe(Attribute.age, 10)).where(None, eq(Attribute.team_name, "teamA"))
    assert query.predicate is not None
    assert query.predicate.leaves() == (goe(Attribute.age, 10), eq(Attribute.team_name, "teamA"))


def test_for_count_strips_sort_and_paging_only():
    """
    Validate count derivation keeps the filter and join shape.

    1. Build a sorted, paged, filtered query.
    2. Derive its count query.
    3. Validate sort, offset, and limit are cleared while predicate and join remain.
    """
    query = (
        MemberQuery()
        .join_team()
        .where(eq(Attribute.team_name, "teamB"))
        .order_by(SortOrder(Attribute.username, SortDirection.desc))
        .paged(5, 10)
    )
    count_query = query.for_count()
    assert count_query.sort == ()
    assert count_query.offset is None
    assert count_query.limit is None
    assert count_query.predicate == query.predicate
    assert count_query.team_join is JoinKind.inner


def test_referenced_attributes_include_sort_keys():
    """
    Validate referenced attributes cover predicate and sort.

    1. Build a query filtering on age and sorting by team name.
    2. Validate both attributes are referenced.
    """
    query = MemberQuery().where(goe(Attribute.age, 1)).order_by(SortOrder(Attribute.team_name))
    assert query.referenced_attributes() == frozenset({Attribute.age, Attribute.team_name})

import itertools

from memberquery.application.services.condition_service import (
    age_at_least,
    age_at_most,
    age_between,
    compile_condition,
    team_name_equals,
    username_equals,
)
from memberquery.domain.predicates import Attribute, and_all, eq, goe, loe
from memberquery.domain.search_condition import SearchCondition


def test_compile_condition_without_fields_is_no_filter():
    """
    Validate an empty condition compiles to "no filter".

    1. Compile a condition with every field absent.
    2. Validate the result is None.
    """
    assert compile_condition(SearchCondition()) is None


def test_leaf_builders_return_none_for_absent_values():
    """
    Validate leaf builders never build clauses for absent values.

    1. Call every leaf builder on an empty condition.
    2. Validate each returns None.
    """
    condition = SearchCondition()
    assert username_equals(condition) is None
    assert team_name_equals(condition) is None
    assert age_at_least(condition) is None
    assert age_at_most(condition) is None


def test_blank_text_is_treated_as_absent():
    """
    Validate whitespace-only text behaves like a missing field.

    1. Build conditions with empty and whitespace-only text fields.
    2. Validate the text leaves are None.
    3. Validate the whole condition compiles to no filter.
    """
    condition = SearchCondition(username="   ", team_name="\t\n")
    assert username_equals(condition) is None
    assert team_name_equals(condition) is None
    assert compile_condition(condition) is None
    assert compile_condition(SearchCondition(username="")) is None


def test_zero_age_is_a_present_bound():
    """
    Validate numeric zero is a real constraint and not treated as absent.

    1. Build a condition with both age bounds at zero.
    2. Validate both leaves are built.
    """
    condition = SearchCondition(age_at_least=0, age_at_most=0)
    assert age_at_least(condition) == goe(Attribute.age, 0)
    assert age_at_most(condition) == loe(Attribute.age, 0)


def test_compile_condition_combines_present_leaves():
    """
    Validate the compiled predicate is the AND of present leaves.

    1. Compile a condition with team name and age range.
    2. Validate the leaves match the individual builders.
    """
    condition = SearchCondition(team_name="teamB", age_at_least=35, age_at_most=40)
    predicate = compile_condition(condition)
    assert predicate is not None
    assert set(predicate.leaves()) == {
        eq(Attribute.team_name, "teamB"),
        goe(Attribute.age, 35),
        loe(Attribute.age, 40),
    }


def test_compile_condition_is_independent_of_combination_order():
    """
    Validate AND combination order does not change the set of leaves.

    1. Build all four leaves for a full condition.
    2. Combine them in every order.
    3. Validate every combination holds the same leaves as compile_condition.
    """
    condition = SearchCondition(username="member4", team_name="teamB", age_at_least=35, age_at_most=40)
    leaves = [username_equals(condition), team_name_equals(condition), age_at_least(condition), age_at_most(condition)]
    compiled = compile_condition(condition)
    assert compiled is not None
    for ordering in itertools.permutations(leaves):
        combined = and_all(*ordering)
        assert combined is not None
        assert set(combined.leaves()) == set(compiled.leaves())


def test_age_between_handles_open_bounds():
    """
    Validate the inclusive age range helper.

    1. Build a closed range, two half-open ranges, and an unbounded range.
    2. Validate the produced leaves.
    """
    closed = age_between(10, 20)
    assert closed is not None
    assert closed.leaves() == (goe(Attribute.age, 10), loe(Attribute.age, 20))
    assert age_between(10, None) == goe(Attribute.age, 10)
    assert age_between(None, 20) == loe(Attribute.age, 20)
    assert age_between(None, None) is None

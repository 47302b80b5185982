from memberquery.domain.predicates import Attribute, Comparison, Predicate, and_all, eq, goe, loe
from memberquery.domain.search_condition import SearchCondition, has_text


def username_equals(condition: SearchCondition) -> Comparison | None:
    return eq(Attribute.username, condition.username) if has_text(condition.username) else None


def team_name_equals(condition: SearchCondition) -> Comparison | None:
    return eq(Attribute.team_name, condition.team_name) if has_text(condition.team_name) else None


def age_at_least(condition: SearchCondition) -> Comparison | None:
    return goe(Attribute.age, condition.age_at_least) if condition.age_at_least is not None else None


def age_at_most(condition: SearchCondition) -> Comparison | None:
    return loe(Attribute.age, condition.age_at_most) if condition.age_at_most is not None else None


def age_between(lower: int | None, upper: int | None) -> Predicate | None:
    """Inclusive age range; an absent bound leaves that side open."""
    return and_all(
        goe(Attribute.age, lower) if lower is not None else None,
        loe(Attribute.age, upper) if upper is not None else None,
    )


def compile_condition(condition: SearchCondition) -> Predicate | None:
    return and_all(
        username_equals(condition),
        team_name_equals(condition),
        age_at_least(condition),
        age_at_most(condition),
    )

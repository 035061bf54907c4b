"""Unit tests for constraint checking."""

from env_schema.model import Property
from validation.constraints import check_constraints, find_violations


def test_value_without_constraints_passes() -> None:
    assert check_constraints("anything", Property()) == []


def test_enum_membership() -> None:
    prop = Property(enum=("development", "production", "test"))

    assert check_constraints("production", prop) == []
    assert check_constraints("staging", prop) == ["must be equal to one of the allowed values"]


def test_enum_compares_numbers_numerically_but_not_booleans() -> None:
    numbers = Property(type="number", enum=(1, 2))
    flags = Property(type="boolean", enum=(1,))

    assert check_constraints(1.0, numbers) == []
    assert check_constraints(True, flags) == ["must be equal to one of the allowed values"]


def test_enum_does_not_match_across_strings_and_numbers() -> None:
    prop = Property(type="integer", enum=("8080",))

    assert check_constraints(8080, prop) == ["must be equal to one of the allowed values"]


def test_numeric_bounds_are_inclusive() -> None:
    prop = Property(type="integer", minimum=1, maximum=65535)

    assert check_constraints(1, prop) == []
    assert check_constraints(65535, prop) == []
    assert check_constraints(0, prop) == ["must be >= 1"]
    assert check_constraints(70000, prop) == ["must be <= 65535"]


def test_string_length_bounds() -> None:
    prop = Property(min_length=3, max_length=5)

    assert check_constraints("abc", prop) == []
    assert check_constraints("ab", prop) == ["must NOT have fewer than 3 characters"]
    assert check_constraints("abcdef", prop) == ["must NOT have more than 5 characters"]


def test_length_counts_utf16_code_units() -> None:
    prop = Property(max_length=1)

    assert check_constraints("é", prop) == []
    assert check_constraints("😀", prop) == ["must NOT have more than 1 characters"]


def test_pattern_is_an_unanchored_search() -> None:
    prop = Property(pattern="[0-9]{3}")

    assert check_constraints("abc123def", prop) == []
    assert check_constraints("abc", prop) == ['must match pattern "[0-9]{3}"']


def test_invalid_pattern_is_reported_not_raised() -> None:
    prop = Property(pattern="([")

    assert check_constraints("value", prop) == ['has invalid pattern "(["']


def test_format_violation_message() -> None:
    prop = Property(format="email")

    assert check_constraints("admin@example.com", prop) == []
    assert check_constraints("not-an-email", prop) == ['must match format "email"']


def test_inapplicable_constraints_are_skipped() -> None:
    numeric = Property(type="integer", pattern="^x$", min_length=10, format="email")
    textual = Property(minimum=100, maximum=200)
    flag = Property(type="boolean", minimum=5)

    assert check_constraints(3, numeric) == []
    assert check_constraints("1", textual) == []
    assert check_constraints(True, flag) == []


def test_all_violations_are_collected_in_keyword_order() -> None:
    prop = Property(enum=("long-value",), min_length=5, pattern="^z", format="uuid")

    violations = find_violations("abc", prop)

    assert [v.keyword for v in violations] == ["enum", "minLength", "pattern", "format"]
    assert violations[0].message == "must be equal to one of the allowed values"

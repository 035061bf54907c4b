"""Unit tests for string format recognizers."""

import pytest

from validation.formats import FORMAT_CHECKERS, check_format


@pytest.mark.parametrize(
    "name, value",
    [
        ("email", "ops@example.com"),
        ("email", "first.last+tag@mail.example.org"),
        ("uri", "http://localhost:5432/db"),
        ("uri", "https://x"),
        ("uuid", "123e4567-e89b-12d3-a456-426614174000"),
        ("uuid", "123E4567-E89B-12D3-A456-426614174000"),
        ("date", "2024-02-29"),
        ("time", "23:59:60"),
        ("time", "08:30:00.250Z"),
        ("time", "08:30:00+02:00"),
        ("time", "08:30:00-0530"),
        ("date-time", "2024-01-15T08:30:00Z"),
        ("date-time", "2024-01-15 08:30:00"),
    ],
)
def test_accepts_valid_values(name: str, value: str) -> None:
    assert check_format(name, value) is True


@pytest.mark.parametrize(
    "name, value",
    [
        ("email", "no-at-sign.example.com"),
        ("email", "two@@example.com"),
        ("email", "a@b@example.com"),
        ("email", "user@localhost"),
        ("email", "user name@example.com"),
        ("email", "ops@example.com\n"),
        ("uri", "ftp://example.com"),
        ("uri", "https://"),
        ("uri", "example.com"),
        ("uuid", "123e4567e89b12d3a456426614174000"),
        ("uuid", "123e4567-e89b-12d3-a456-42661417400g"),
        ("date", "2023-02-29"),
        ("date", "2024-13-01"),
        ("date", "24-01-01"),
        ("time", "24:00:00"),
        ("time", "12:60:00"),
        ("time", "12:00"),
        ("time", "12:00:00+25:00"),
        ("date-time", "2024-01-15"),
        ("date-time", "2024-01-15X08:30:00"),
    ],
)
def test_rejects_invalid_values(name: str, value: str) -> None:
    assert check_format(name, value) is False


def test_unknown_format_is_not_judged() -> None:
    assert check_format("hostname", "anything") is None


def test_all_documented_formats_registered() -> None:
    assert set(FORMAT_CHECKERS) == {"email", "uri", "uuid", "date", "time", "date-time"}

from __future__ import annotations

import random

import pytest
from fastapi.testclient import TestClient

from dice_roller.app import app
from dice_roller.rolls import MAX_ROLLS, coerce_count, roll_dice, roll_die


def test_roll_die_stays_in_range() -> None:
    rng = random.Random(7)

    assert all(1 <= roll_die(6, rng) <= 6 for _ in range(200))


def test_roll_die_rejects_sideless_die() -> None:
    with pytest.raises(ValueError):
        roll_die(0)


def test_roll_dice_counts() -> None:
    rng = random.Random(1)

    assert len(roll_dice(4, 20, rng)) == 4
    assert roll_dice(0, 6, rng) == []
    assert roll_dice(3, 0, rng) == []
    assert roll_dice(1, 1, rng) == [1]


@pytest.mark.parametrize(
    ("raw", "expected"),
    [(None, 0), ("", 0), ("3", 3), (" 2 ", 2), ("2.9", 2), ("abc", 0), ("-1", -1)],
)
def test_coerce_count(raw, expected) -> None:
    assert coerce_count(raw) == expected


def test_roll_endpoint_returns_plain_text() -> None:
    client = TestClient(app)

    response = client.get("/", params={"rolls": "3", "sides": "1"})

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/plain")
    assert response.text == "1\n1\n1\n\nGET /?rolls=3&sides=1\n"


def test_roll_endpoint_without_params() -> None:
    response = TestClient(app).get("/")

    assert response.text == "\nGET /\n"


def test_favicon_is_not_found() -> None:
    assert TestClient(app).get("/favicon.ico").status_code == 404


def test_roll_count_is_capped() -> None:
    assert coerce_count("1e9") == 1_000_000_000
    assert len(roll_dice(coerce_count("1e9"), 6, random.Random(3))) == MAX_ROLLS


def test_roll_endpoint_caps_huge_requests() -> None:
    response = TestClient(app).get("/", params={"rolls": "1e9", "sides": "1"})

    assert response.text.startswith("1\n" * MAX_ROLLS + "\nGET ")

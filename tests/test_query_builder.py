import itertools
import re
from datetime import date

import pytest

from services.query_builder import QueryBuilder, build_property_search, build_update

PLACEHOLDER = re.compile(r"\$(\d+)")

ALL_FILTERS = {
    "city": "Van",
    "owner_id": 3,
    "minimum_price_per_night": 50,
    "maximum_price_per_night": 150,
    "minimum_rating": 4,
}


def placeholders(sql):
    return [int(n) for n in PLACEHOLDER.findall(sql)]


def filter_combinations():
    keys = list(ALL_FILTERS)
    for size in range(len(keys) + 1):
        for combo in itertools.combinations(keys, size):
            yield {key: ALL_FILTERS[key] for key in combo}


@pytest.mark.parametrize("filters", list(filter_combinations()))
def test_placeholders_match_parameter_positions(filters):
    statement = build_property_search(filters, 7)
    assert placeholders(statement.text) == list(range(1, len(statement.params) + 1))
    assert statement.params[-1] == 7


def test_no_filters_returns_all_reviewed_properties():
    statement = build_property_search({})
    assert "WHERE" not in statement.text
    assert "HAVING" not in statement.text
    assert "JOIN property_reviews ON properties.id = property_reviews.property_id" in statement.text
    assert "GROUP BY properties.id" in statement.text
    assert statement.text.endswith("ORDER BY cost_per_night LIMIT $1")
    assert statement.params == [10]


def test_city_is_partial_match():
    statement = build_property_search({"city": "Van"})
    assert "WHERE city LIKE $1" in statement.text
    assert statement.params[0] == "%Van%"


@pytest.mark.parametrize("bound", ["minimum_price_per_night", "maximum_price_per_night"])
def test_single_price_bound_is_ignored(bound):
    statement = build_property_search({bound: 100})
    assert "cost_per_night >" not in statement.text
    assert "cost_per_night <" not in statement.text
    assert statement.params == [10]


def test_single_price_bound_does_not_shift_other_params():
    statement = build_property_search({"city": "Van", "maximum_price_per_night": 100, "minimum_rating": 4})
    assert statement.params == ["%Van%", 4, 10]
    assert "HAVING AVG(property_reviews.rating) >= $2" in statement.text


def test_price_range_is_scaled_to_cents():
    statement = build_property_search({"minimum_price_per_night": 50, "maximum_price_per_night": 150.5})
    assert "(properties.cost_per_night > $1 AND properties.cost_per_night < $2)" in statement.text
    assert statement.params == [5000, 15050, 10]


def test_present_filters_are_joined_with_and():
    statement = build_property_search({"city": "Van", "owner_id": 3})
    assert "WHERE city LIKE $1 AND owner_id = $2 GROUP BY" in statement.text
    assert statement.params == ["%Van%", 3, 10]


def test_minimum_rating_is_single_having_after_where():
    statement = build_property_search(ALL_FILTERS, 5)
    assert statement.text.count("HAVING") == 1
    assert "HAVING AVG(property_reviews.rating) >= $5" in statement.text
    assert statement.text.index("HAVING") > statement.text.index("cost_per_night <")
    assert statement.params == ["%Van%", 3, 5000, 15000, 4, 5]


def test_blank_query_string_values_count_as_absent():
    statement = build_property_search(
        {"city": "", "owner_id": "", "minimum_price_per_night": "", "maximum_price_per_night": "", "minimum_rating": ""}
    )
    assert "WHERE" not in statement.text
    assert "HAVING" not in statement.text
    assert statement.params == [10]


def test_string_filters_are_coerced():
    statement = build_property_search({"owner_id": "3", "minimum_rating": "4"})
    assert statement.params == [3, 4.0, 10]


def test_update_with_end_date_only():
    end = date(2026, 11, 5)
    statement = build_update("reservations", [("end_date", end)], "id", 42)
    assert statement.text == "UPDATE reservations SET end_date = $1 WHERE id = $2 RETURNING *"
    assert statement.params == [end, 42]


def test_update_with_both_dates():
    start, end = date(2026, 11, 1), date(2026, 11, 5)
    statement = build_update("reservations", [("start_date", start), ("end_date", end)], "id", 42)
    assert statement.text == "UPDATE reservations SET start_date = $1, end_date = $2 WHERE id = $3 RETURNING *"
    assert statement.params == [start, end, 42]


def test_update_without_assignments_is_rejected():
    with pytest.raises(ValueError):
        build_update("reservations", [], "id", 42)


def test_marker_count_must_match_values():
    with pytest.raises(ValueError):
        QueryBuilder("SELECT * FROM users").where("id = ?", 1, 2)


def test_builder_numbers_having_after_where():
    statement = (
        QueryBuilder("SELECT owner_id, COUNT(*) FROM properties")
        .where("city = ?", "Austin")
        .group_by("owner_id")
        .having("COUNT(*) > ?", 2)
        .order_by("owner_id")
        .limit(3)
        .build()
    )
    assert statement.text == (
        "SELECT owner_id, COUNT(*) FROM properties WHERE city = $1 "
        "GROUP BY owner_id HAVING COUNT(*) > $2 ORDER BY owner_id LIMIT $3"
    )
    assert statement.params == ["Austin", 2, 3]

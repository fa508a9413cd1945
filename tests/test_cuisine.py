import pytest

from restotrees.cuisine import (
    MISSING_RATING,
    WINNER_ORDER,
    calculate_score,
    cuisine_rating,
    cuisine_scores,
    format_winners,
    highest_score_restaurant_id,
    monthly_winners,
)
from restotrees.models import Cuisine, Place, Restaurant
from restotrees.sales import SalesTree

HEADER = "Date,Id,Total,Algerian,Syrian,Indian,Chinese,European\n"


@pytest.fixture
def ratings_file(tmp_path):
    path = tmp_path / "ratings.csv"
    path.write_text(
        HEADER
        + "2023-01-15,1,4.0,80,70,60,50,40\n"
        + "bad-row,abc,1,2,3,4,5,6\n"
        + "2023-01-20,2,3.0,0,10,20,30,90\n"
        + "2023-02-10,1,2.0,11,12,13,14,15\n",
        encoding="utf-8",
    )
    return path


def make_restaurant(restaurant_id, cuisines=None):
    restaurant = Restaurant(restaurant_id, f"r{restaurant_id}", "Owned", 5, Place())
    if cuisines is not None:
        restaurant.cuisines = [Cuisine(name) for name in cuisines]
    return restaurant


@pytest.mark.parametrize(
    "cuisine, expected",
    [("Algerian", 80.0), ("syrian", 70.0), ("INDIAN", 60.0), ("Chinese", 50.0), ("european", 40.0)],
)
def test_cuisine_rating_reads_each_column(ratings_file, cuisine, expected):
    assert cuisine_rating(ratings_file, 1, "2023-01", cuisine) == expected


def test_cuisine_rating_matches_month_and_id(ratings_file):
    assert cuisine_rating(ratings_file, 1, "2023-02", "Algerian") == 11.0
    assert cuisine_rating(ratings_file, 2, "2023-01", "European") == 90.0


def test_cuisine_rating_missing_returns_none(ratings_file):
    assert cuisine_rating(ratings_file, 3, "2023-01", "Algerian") is None
    assert cuisine_rating(ratings_file, 1, "2024-01", "Algerian") is None


def test_cuisine_rating_unknown_cuisine(ratings_file):
    with pytest.raises(ValueError):
        cuisine_rating(ratings_file, 1, "2023-01", "Martian")


def test_cuisine_rating_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        cuisine_rating(tmp_path / "absent.csv", 1, "2023-01", "Algerian")


def test_calculate_score_with_zero_rating_equals_sales(ratings_file):
    sales = SalesTree()
    sales.insert("2023-01", 2, {"Algerian": 100.0})
    score = calculate_score(make_restaurant(2), "2023-01", "Algerian", ratings_file, sales)
    assert score == pytest.approx(100.0)


def test_calculate_score_adds_rating_fraction(ratings_file):
    sales = SalesTree()
    sales.insert("2023-01", 1, {"Algerian": 100.0})
    score = calculate_score(make_restaurant(1), "2023-01", "Chinese", ratings_file, sales)
    assert score == pytest.approx(100.5)


def test_calculate_score_missing_rating_lowers_score(ratings_file):
    sales = SalesTree()
    sales.insert("2023-03", 1, {"Algerian": 10.0})
    score = calculate_score(make_restaurant(1), "2023-03", "Algerian", ratings_file, sales)
    assert MISSING_RATING < 0
    assert score < 10.0


def test_calculate_score_higher_rating_scores_higher(ratings_file):
    sales = SalesTree()
    restaurant = make_restaurant(1)
    high = calculate_score(restaurant, "2023-01", "Algerian", ratings_file, sales)
    low = calculate_score(restaurant, "2023-01", "European", ratings_file, sales)
    assert high > low


def test_calculate_score_invalid_cuisine(ratings_file):
    with pytest.raises(ValueError):
        calculate_score(make_restaurant(1), "2023-01", "Martian", ratings_file, SalesTree())


def test_cuisine_scores_skips_restaurants_without_cuisine(ratings_file):
    restaurants = [make_restaurant(1), make_restaurant(2, cuisines=["Algerian"])]
    scores = cuisine_scores(restaurants, "chinese", "2023-01", ratings_file, SalesTree())
    assert [restaurant_id for restaurant_id, _ in scores] == [1]


def test_highest_score_restaurant_id():
    assert highest_score_restaurant_id([(1, 2.0), (7, 9.5), (3, 4.0)]) == 7
    assert highest_score_restaurant_id([]) is None


def test_monthly_winners_picks_best_per_cuisine(ratings_file):
    sales = SalesTree()
    restaurants = [make_restaurant(1), make_restaurant(2)]
    winners = monthly_winners(restaurants, "2023-01", ratings_file, sales)
    assert list(winners) == list(WINNER_ORDER)
    assert winners["Algerian"] == 1
    assert winners["European"] == 2


def test_monthly_winners_sales_dominate(ratings_file):
    sales = SalesTree()
    sales.insert("2023-01", 2, {"Syrian": 1000.0})
    restaurants = [make_restaurant(1), make_restaurant(2)]
    winners = monthly_winners(restaurants, "2023-01", ratings_file, sales)
    assert set(winners.values()) == {2}


def test_monthly_winners_without_restaurants(ratings_file):
    winners = monthly_winners([], "2023-01", ratings_file, SalesTree())
    assert all(winner is None for winner in winners.values())


def test_format_winners():
    winners = {name: index for index, name in enumerate(WINNER_ORDER, start=1)}
    winners["Indian"] = None
    lines = format_winners("2023-01", winners).split("\n")
    assert lines[0] == "Winners of the month 2023-01 are :"
    assert lines[1] == "Restaurant ID with the highest score for Chinese cuisine: 1"
    assert lines[5] == "Restaurant ID with the highest score for Indian cuisine: -1"
    assert len(lines) == 1 + len(WINNER_ORDER)
import pytest

from cinereview.domain.dataclasses.queries import MovieFilter, SearchQuery
from cinereview.domain.errors import InvalidArgument


def test_parse_types_and_blanks():
    q = SearchQuery.parse(q="  ", genre="Drama", year="1994", rating="8.5")
    assert q.q is None
    assert q.genre == "Drama"
    assert q.year == 1994
    assert q.min_rating == 8.5


def test_parse_all_absent_gives_empty_filter():
    assert SearchQuery.parse().to_filter().is_empty()
    assert SearchQuery.parse(q="", genre=" ", year="", rating=None).to_filter().is_empty()


@pytest.mark.parametrize("year,rating", [("nineteen", None), (None, "high")])
def test_parse_rejects_non_numeric(year, rating):
    with pytest.raises(InvalidArgument):
        SearchQuery.parse(year=year, rating=rating)


def test_search_filter_widens_text_match_to_genre():
    flt = SearchQuery.parse(q="crime").to_filter()
    assert flt.search_genre is True
    assert MovieFilter(search="crime").search_genre is False


@pytest.mark.parametrize("rating", ["nan", "NaN", "inf", "-inf", "Infinity"])
def test_parse_rejects_non_finite_rating(rating):
    with pytest.raises(InvalidArgument):
        SearchQuery.parse(rating=rating)

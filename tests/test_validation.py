import pytest

from movie_catalog.applications.interfaces.validation import (
    ValidationFailure,
    ValidationSuccess,
    validate_movie,
    validate_partial_movie,
)

from .factories import movie_factory


def _paths(result):
    return [tuple(v.path) for v in result.violations]


class TestValidateMovie:
    def test_valid_movie(self):
        data = movie_factory.create_movie_data()

        result = validate_movie(data)

        assert isinstance(result, ValidationSuccess)
        assert result.success is True
        assert result.data == data

    def test_missing_title(self):
        data = movie_factory.create_movie_data()
        del data["title"]

        result = validate_movie(data)

        assert isinstance(result, ValidationFailure)
        assert result.success is False
        assert _paths(result) == [("title",)]
        assert result.violations[0].code == "missing"

    def test_every_field_is_required(self):
        result = validate_movie({})

        assert isinstance(result, ValidationFailure)
        assert {path[0] for path in _paths(result)} == {
            "title",
            "year",
            "director",
            "duration",
            "rating",
            "poster",
            "genre",
        }

    @pytest.mark.parametrize(
        "field, value",
        [
            ("title", ""),
            ("title", 42),
            ("year", "1977"),
            ("year", 1800),
            ("year", 1977.5),
            ("year", True),
            ("director", ""),
            ("duration", 0),
            ("duration", -10),
            ("rating", 11),
            ("rating", -0.5),
            ("rating", "9"),
            ("poster", "not a url"),
            ("genre", []),
            ("genre", ["Documentary"]),
            ("genre", "Action"),
            ("genre", ["Action", "Action"]),
        ],
    )
    def test_invalid_field(self, field, value):
        data = movie_factory.create_movie_data()
        data[field] = value

        result = validate_movie(data)

        assert isinstance(result, ValidationFailure)
        assert all(path[0] == field for path in _paths(result))

    def test_integer_rating_is_accepted(self):
        result = validate_movie(movie_factory.create_movie_data(rating=9))

        assert isinstance(result, ValidationSuccess)
        assert result.data["rating"] == 9

    def test_unknown_keys_and_id_are_dropped(self):
        data = movie_factory.create_movie_data()
        data["id"] = "client-chosen"
        data["budget"] = 11000000

        result = validate_movie(data)

        assert isinstance(result, ValidationSuccess)
        assert "id" not in result.data
        assert "budget" not in result.data

    def test_genre_violation_points_at_element(self):
        result = validate_movie(movie_factory.create_movie_data(genre=["Action", "Western"]))

        assert isinstance(result, ValidationFailure)
        assert ("genre", 1) in _paths(result)

    @pytest.mark.parametrize("payload", [None, [], "movie", 3])
    def test_non_object_payload(self, payload):
        result = validate_movie(payload)

        assert isinstance(result, ValidationFailure)
        assert _paths(result) == [()]


class TestValidatePartialMovie:
    def test_empty_payload_is_valid(self):
        result = validate_partial_movie({})

        assert isinstance(result, ValidationSuccess)
        assert result.data == {}

    def test_only_supplied_fields_are_returned(self):
        result = validate_partial_movie({"year": 1980})

        assert isinstance(result, ValidationSuccess)
        assert result.data == {"year": 1980}

    def test_supplied_field_uses_full_constraints(self):
        result = validate_partial_movie({"year": 1800, "title": "Empire"})

        assert isinstance(result, ValidationFailure)
        assert _paths(result) == [("year",)]

    def test_explicit_null_is_rejected(self):
        result = validate_partial_movie({"title": None})

        assert isinstance(result, ValidationFailure)
        assert _paths(result) == [("title",)]

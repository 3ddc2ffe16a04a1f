"""Unit tests for the User entity and PageRequest."""

import pytest

from user_directory.domain.entities.user import (
    DEFAULT_PAGE,
    DEFAULT_PAGE_SIZE,
    PageRequest,
    User,
)


class TestMatchesCountry:
    @pytest.mark.parametrize("country", ["UK", "uk", "Uk"])
    def test_case_insensitive(self, country: str):
        assert User(country="UK").matches_country(country)

    def test_empty_filter_matches(self):
        assert User(country="India").matches_country("")

    def test_different_country(self):
        assert not User(country="India").matches_country("UK")


class TestPageRequestFromQuery:
    def test_defaults_when_absent(self):
        query = PageRequest.from_query()

        assert query.page == DEFAULT_PAGE == 1
        assert query.page_size == DEFAULT_PAGE_SIZE == 10
        assert query.country == ""

    def test_parses_numeric_strings(self):
        query = PageRequest.from_query("3", "25", "UK")

        assert query == PageRequest(page=3, page_size=25, country="UK")

    @pytest.mark.parametrize("raw", ["0", "-2", "abc", "", "1.5"])
    def test_invalid_values_fall_back(self, raw: str):
        query = PageRequest.from_query(raw, raw)

        assert query.page == 1
        assert query.page_size == 10

    def test_offset(self):
        assert PageRequest(page=1, page_size=10).offset == 0
        assert PageRequest(page=3, page_size=2).offset == 4

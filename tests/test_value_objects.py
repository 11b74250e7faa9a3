from __future__ import annotations

import pytest

from pokedex_explorer.domain.exceptions import InvalidQueryError, InvalidResourceUrlError
from pokedex_explorer.domain.value_objects import PageRequest, extract_id


class TestExtractId:
    @pytest.mark.parametrize(
        ("url", "expected"),
        [
            ("https://host/pokemon/25/", 25),
            ("https://pokeapi.co/api/v2/pokemon/10277/", 10277),
            ("https://pokeapi.co/api/v2/evolution-trigger/3", 3),
            ("https://host/pokemon/007/", 7),
        ],
    )
    def test_extracts(self, url: str, expected: int):
        assert extract_id(url) == expected

    @pytest.mark.parametrize(
        "url",
        [
            "https://host/",
            "https://host/25/",
            "https://host/pokemon/pikachu/",
            "https://host/pokemon/-1/",
            "",
        ],
    )
    def test_rejects(self, url: str):
        with pytest.raises(InvalidResourceUrlError):
            extract_id(url)


class TestPageRequest:
    def test_for_page(self):
        assert PageRequest.for_page(1, 20) == PageRequest(limit=20, offset=0)
        assert PageRequest.for_page(3, 20) == PageRequest(limit=20, offset=40)

    def test_page_round_trips(self):
        assert PageRequest.for_page(7, 10).page == 7

    def test_item_range(self):
        assert PageRequest.for_page(2, 20).item_range(1302) == (21, 40)
        assert PageRequest.for_page(66, 20).item_range(1302) == (1301, 1302)

    @pytest.mark.parametrize(("page", "limit"), [(0, 20), (1, 0), (-2, 10)])
    def test_rejects(self, page: int, limit: int):
        with pytest.raises(InvalidQueryError):
            PageRequest.for_page(page, limit)

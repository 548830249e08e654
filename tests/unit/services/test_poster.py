"""
Tests unitaires pour la construction des URL de posters.
"""

import pytest

from cinecatalogue.core.ports.api_clients import ImageConfiguration
from cinecatalogue.services.poster import (
    DEFAULT_IMAGE_BASE_URL,
    build_poster_url,
    choose_base_url,
    choose_poster_size,
)

TMDB_CONFIG = ImageConfiguration(
    base_url="http://image.tmdb.org/t/p/",
    secure_base_url="https://image.tmdb.org/t/p/",
    poster_sizes=("w92", "w154", "w185", "w342", "w500", "w780", "original"),
)


class TestChoosePosterSize:

    def test_preferred_size_when_supported(self) -> None:
        assert choose_poster_size(TMDB_CONFIG) == "w500"

    def test_largest_supported_size_otherwise(self) -> None:
        config = ImageConfiguration(poster_sizes=("w92", "w185", "original"))
        assert choose_poster_size(config) == "original"

    def test_original_without_configuration(self) -> None:
        assert choose_poster_size(None) == "original"

    def test_original_with_empty_sizes(self) -> None:
        assert choose_poster_size(ImageConfiguration()) == "original"


class TestChooseBaseUrl:

    def test_secure_url_preferred(self) -> None:
        assert choose_base_url(TMDB_CONFIG) == "https://image.tmdb.org/t/p/"

    def test_plain_url_when_secure_missing(self) -> None:
        config = ImageConfiguration(base_url="http://img.example/")
        assert choose_base_url(config) == "http://img.example/"

    def test_fallback_without_configuration(self) -> None:
        assert choose_base_url(None, "https://cdn.example/p/") == "https://cdn.example/p/"
        assert choose_base_url(None, "") == DEFAULT_IMAGE_BASE_URL


class TestBuildPosterUrl:

    def test_with_configuration(self) -> None:
        url = build_poster_url(TMDB_CONFIG, "/f89U3ADr1oiB1s9GkdPOEpXUk5H.jpg")
        assert url == "https://image.tmdb.org/t/p/w500/f89U3ADr1oiB1s9GkdPOEpXUk5H.jpg"

    def test_without_configuration_uses_default_host(self) -> None:
        url = build_poster_url(None, "/abc.jpg")
        assert url == "https://image.tmdb.org/t/p/original/abc.jpg"

    def test_single_slash_between_parts(self) -> None:
        config = ImageConfiguration(secure_base_url="https://img.example/p", poster_sizes=("w500",))
        assert build_poster_url(config, "abc.jpg") == "https://img.example/p/w500/abc.jpg"

    @pytest.mark.parametrize("path", [None, "", "   ", "/a b.jpg", "https://evil.example/x.jpg"])
    def test_empty_or_malformed_path_returns_none(self, path) -> None:
        assert build_poster_url(TMDB_CONFIG, path) is None

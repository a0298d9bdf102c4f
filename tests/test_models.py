"""
Tests for keyword records, sample data and configuration.
"""

import logging

import pytest
from pydantic import ValidationError

from searchshare.models import BrandKeyword, RankedKeyword
from searchshare.sample_data import (
    SAMPLE_BRAND_KEYWORDS,
    SAMPLE_RANKED_KEYWORDS,
    sample_request_body,
)
from searchshare.quality import validate_calculate_request
from searchshare.utils import Settings, get_settings, setup_logging


class TestBrandKeyword:

    def test_to_dict(self):
        assert BrandKeyword(keyword="lavera", search_volume=12100, is_own_brand=True).to_dict() == {
            "keyword": "lavera",
            "searchVolume": 12100,
            "isOwnBrand": True,
        }

    def test_accepts_wire_names(self):
        kw = BrandKeyword.model_validate({"keyword": "weleda", "searchVolume": 18100, "isOwnBrand": False})
        assert kw == BrandKeyword(keyword="weleda", search_volume=18100, is_own_brand=False)

    def test_accepts_field_names(self):
        kw = BrandKeyword.model_validate({"keyword": "weleda", "search_volume": 18100, "is_own_brand": False})
        assert kw == BrandKeyword(keyword="weleda", search_volume=18100, is_own_brand=False)

    def test_immutable(self):
        kw = BrandKeyword(keyword="lavera", search_volume=12100, is_own_brand=True)
        with pytest.raises(ValidationError):
            kw.search_volume = 0


class TestRankedKeyword:

    def test_optional_fields_default_to_none(self):
        kw = RankedKeyword(keyword="kw", search_volume=100, position=3)

        assert kw.url is None
        assert kw.ctr is None
        assert kw.visible_volume is None

    def test_to_dict_omits_unset_optionals(self):
        assert RankedKeyword(keyword="kw", search_volume=100, position=3).to_dict() == {
            "keyword": "kw",
            "searchVolume": 100,
            "position": 3,
        }

    def test_with_visibility_returns_copy(self):
        kw = RankedKeyword(keyword="kw", search_volume=100, position=3, url="/kw")
        enriched = kw.with_visibility(ctr=9.0, visible_volume=9)

        assert enriched.to_dict() == {
            "keyword": "kw",
            "searchVolume": 100,
            "position": 3,
            "url": "/kw",
            "ctr": 9.0,
            "visibleVolume": 9,
        }
        assert kw.ctr is None

    def test_round_trips_wire_format(self):
        kw = RankedKeyword(keyword="kw", search_volume=100, position=3, url="/kw").with_visibility(6.0, 6)
        assert RankedKeyword.model_validate(kw.to_dict()) == kw


class TestSampleData:

    def test_sizes(self):
        assert len(SAMPLE_BRAND_KEYWORDS) == 7
        assert len(SAMPLE_RANKED_KEYWORDS) == 10

    def test_request_body_passes_validation(self):
        result = validate_calculate_request(sample_request_body())

        assert result.valid
        assert tuple(result.data["brand_keywords"]) == SAMPLE_BRAND_KEYWORDS
        assert tuple(result.data["ranked_keywords"]) == SAMPLE_RANKED_KEYWORDS


class TestSettings:

    def test_defaults(self):
        settings = Settings()

        assert settings.MAX_BRAND_KEYWORDS == 500
        assert settings.MAX_RANKED_KEYWORDS == 1000
        assert settings.MAX_POSITION == 100
        assert settings.LOG_LEVEL == "INFO"

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("max_position", "20")
        assert get_settings().MAX_POSITION == 20

    def test_cached(self):
        assert get_settings() is get_settings()

    def test_setup_logging(self, monkeypatch):
        calls = {}
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.update(kwargs))

        setup_logging("debug")

        assert calls["level"] == logging.DEBUG
        assert "%(name)s" in calls["format"]

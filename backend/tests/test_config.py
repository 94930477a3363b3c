"""
Violet API Backend - Settings Tests
====================================

What we test:
    ✅ Base path normalised to "/segment" or ""
    ✅ Log level validated against the full severity scale
    ✅ Out-of-range rate limit settings rejected
"""

import pytest
from pydantic import ValidationError

from violet.config import Settings


def build(**overrides) -> Settings:
    return Settings(_env_file=None, **overrides)


class TestBasePath:

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("/api", "/api"),
            ("api", "/api"),
            ("/api/", "/api"),
            ("/service/api/", "/service/api"),
            ("/", ""),
            ("", ""),
        ],
    )
    def test_normalized(self, raw, expected):
        assert build(api_base_path=raw).api_base_path == expected


class TestLogLevel:

    @pytest.mark.parametrize("level", ["debug", "Notice", "ALERT", "emergency"])
    def test_known_levels_upper_cased(self, level):
        assert build(log_level=level).log_level == level.upper()

    def test_unknown_level_rejected(self):
        with pytest.raises(ValidationError):
            build(log_level="verbose")


class TestLimits:

    def test_rate_limit_below_minimum_rejected(self):
        with pytest.raises(ValidationError):
            build(rate_limit_requests=1)

    def test_unknown_environment_rejected(self):
        with pytest.raises(ValidationError):
            build(server_environment="staging")

    def test_cors_origins_split(self):
        settings = build(cors_origins="http://a.test, http://b.test,")

        assert settings.cors_origins_list == ["http://a.test", "http://b.test"]

"""Tests for classification rules."""

from datetime import timedelta

import pytest

from conftest import NOW, make_metadata
from whatcanidelete.classifier import (
    LARGE_IDLE_REASON,
    RECENT_REASON,
    STALE_REASON,
    TEMPORARY_REASON,
    classify,
)
from whatcanidelete.models import ClassificationRules, FileCategory

MIB = 1024 * 1024


class TestTemporaryExtensions:
    @pytest.mark.parametrize("name", ["a.tmp", "a.log", "a.bak", "a.old", "a.cache"])
    def test_temp_extensions_likely_safe(self, name):
        judgment = classify(make_metadata(name=name), NOW)
        assert judgment.category == FileCategory.LIKELY_SAFE
        assert judgment.reason == TEMPORARY_REASON

    def test_extension_case_insensitive(self):
        judgment = classify(make_metadata(name="SERVER.LOG"), NOW)
        assert judgment.category == FileCategory.LIKELY_SAFE

    def test_temp_wins_over_size_and_age(self):
        """Temp extension applies even to large, recently used files."""
        metadata = make_metadata(name="huge.bak", size=5 * 1024 * MIB, modified_days_ago=0)
        judgment = classify(metadata, NOW)
        assert judgment.category == FileCategory.LIKELY_SAFE
        assert judgment.reason == "Temporary or cache-style extension."


class TestStaleFiles:
    def test_not_accessed_for_a_year(self):
        metadata = make_metadata(name="report.csv", modified_days_ago=400)
        judgment = classify(metadata, NOW)
        assert judgment.category == FileCategory.LIKELY_SAFE
        assert judgment.reason == STALE_REASON

    def test_exactly_365_days(self):
        metadata = make_metadata(name="a.txt", modified_days_ago=365)
        assert classify(metadata, NOW).category == FileCategory.LIKELY_SAFE

    def test_just_under_365_days(self):
        metadata = make_metadata(name="a.txt", modified_days_ago=364)
        assert classify(metadata, NOW).category == FileCategory.DO_NOT_DELETE

    def test_recent_access_overrides_old_modification(self):
        metadata = make_metadata(name="a.txt", modified_days_ago=900, accessed_days_ago=2)
        judgment = classify(metadata, NOW)
        assert judgment.category == FileCategory.DO_NOT_DELETE
        assert judgment.reason == RECENT_REASON


class TestLargeIdleFiles:
    def test_large_idle_file(self):
        metadata = make_metadata(name="video.mp4", size=200 * MIB, modified_days_ago=200)
        judgment = classify(metadata, NOW)
        assert judgment.category == FileCategory.BE_CAREFUL
        assert judgment.reason == LARGE_IDLE_REASON

    def test_exactly_100_mib(self):
        metadata = make_metadata(name="disk.img", size=100 * MIB, modified_days_ago=200)
        assert classify(metadata, NOW).category == FileCategory.BE_CAREFUL

    def test_one_byte_under_100_mib(self):
        metadata = make_metadata(name="disk.img", size=100 * MIB - 1, modified_days_ago=200)
        assert classify(metadata, NOW).category == FileCategory.DO_NOT_DELETE

    def test_exactly_180_days(self):
        metadata = make_metadata(name="disk.img", size=100 * MIB, modified_days_ago=180)
        assert classify(metadata, NOW).category == FileCategory.BE_CAREFUL

    def test_large_but_recent(self):
        metadata = make_metadata(name="disk.img", size=500 * MIB, modified_days_ago=30)
        assert classify(metadata, NOW).category == FileCategory.DO_NOT_DELETE

    def test_uses_access_time_when_present(self):
        metadata = make_metadata(
            name="disk.img", size=500 * MIB, modified_days_ago=10, accessed_days_ago=250
        )
        assert classify(metadata, NOW).category == FileCategory.BE_CAREFUL


class TestDefault:
    def test_recent_small_file(self):
        judgment = classify(make_metadata(name="notes.md"), NOW)
        assert judgment.category == FileCategory.DO_NOT_DELETE
        assert judgment.reason == "Recent activity or insufficient data."

    def test_file_without_extension(self):
        judgment = classify(make_metadata(name="Makefile"), NOW)
        assert judgment.category == FileCategory.DO_NOT_DELETE

    def test_future_timestamp(self):
        """Clock skew leaves a negative age, treated as recent."""
        metadata = make_metadata(name="a.txt", modified_days_ago=-5)
        assert classify(metadata, NOW).category == FileCategory.DO_NOT_DELETE


class TestCustomRules:
    def test_overridden_thresholds(self):
        rules = ClassificationRules(
            stale_after=timedelta(days=30),
            idle_after=timedelta(days=7),
            large_file_bytes=1000,
        )
        assert classify(make_metadata(modified_days_ago=31), NOW, rules).category == (
            FileCategory.LIKELY_SAFE
        )
        assert classify(make_metadata(size=1000, modified_days_ago=8), NOW, rules).category == (
            FileCategory.BE_CAREFUL
        )

    def test_overridden_extensions(self):
        rules = ClassificationRules(temporary_extensions=frozenset({".swp"}))
        assert classify(make_metadata(name="a.swp"), NOW, rules).category == (
            FileCategory.LIKELY_SAFE
        )
        assert classify(make_metadata(name="a.log"), NOW, rules).category == (
            FileCategory.DO_NOT_DELETE
        )

    def test_every_judgment_has_reason(self):
        for metadata in [
            make_metadata(name="a.tmp"),
            make_metadata(modified_days_ago=500),
            make_metadata(size=200 * MIB, modified_days_ago=200),
            make_metadata(),
        ]:
            assert classify(metadata, NOW).reason

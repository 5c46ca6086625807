"""
Tests for the log scanner.

Validates origin-error extraction (503 lines) and cache hit/miss tallies.
"""

import pytest

from support_tools.log_parser import (
    _is_origin_error,
    analyze_cache_performance,
    parse_origin_errors,
    read_log_file,
)


# ─── Sample Logs ──────────────────────────────────────────────

SAMPLE_CDN_LOG = """\
2026-02-01T20:15:01Z edge-iad GET /live/manifest.m3u8 200 HIT 12ms
2026-02-01T20:15:02Z edge-iad GET /live/seg_1001.ts 503 MISS 3004ms
2026-02-01T20:15:02Z edge-ord GET /live/seg_1001.ts 200 MISS 180ms
2026-02-01T20:15:03Z origin upstream status=503 retry=1
2026-02-01T20:15:04Z edge-ord GET /live/seg_1002.ts 200 HIT 9ms
2026-02-01T20:15:05Z edge-lax GET /api/v1/5031 200 HIT 20ms
"""


# ─── Tests ────────────────────────────────────────────────────


class TestIsOriginError:
    def test_space_bounded(self):
        assert _is_origin_error("a 503 b")

    def test_word_bounded(self):
        assert _is_origin_error("status=503")
        assert _is_origin_error("503")

    def test_embedded_digits_do_not_match(self):
        assert not _is_origin_error("id 15030")
        assert not _is_origin_error("c503d")


class TestParseOriginErrors:
    def test_extracts_503_lines(self):
        errors = parse_origin_errors(SAMPLE_CDN_LOG)
        assert len(errors) == 2
        assert "seg_1001.ts 503 MISS" in errors[0]
        assert errors[1].endswith("status=503 retry=1")

    def test_preserves_order_and_excludes_others(self):
        content = "a 503 b\nok\nstatus=503\n"
        assert parse_origin_errors(content) == ["a 503 b", "status=503"]

    def test_empty_input(self):
        assert parse_origin_errors("") == []

    def test_no_matches(self):
        assert parse_origin_errors("all good\nstill good") == []


class TestAnalyzeCachePerformance:
    def test_counts_and_rate(self):
        perf = analyze_cache_performance(["HIT", "MISS", "HIT", "other"])
        assert perf.hit_count == 2
        assert perf.miss_count == 1
        assert perf.total == 3
        assert perf.hit_rate == pytest.approx(2 / 3)

    def test_hit_takes_precedence(self):
        perf = analyze_cache_performance(["MISS then HIT"])
        assert perf.hit_count == 1
        assert perf.miss_count == 0

    def test_no_cache_lines(self):
        perf = analyze_cache_performance(["nothing", ""])
        assert perf.hit_rate == 0
        assert perf.hit_count == 0
        assert perf.miss_count == 0

    def test_empty(self):
        assert analyze_cache_performance([]).hit_rate == 0

    def test_sample_log(self):
        perf = analyze_cache_performance(SAMPLE_CDN_LOG.splitlines())
        assert perf.hit_count == 3
        assert perf.miss_count == 2
        assert perf.hit_rate == pytest.approx(0.6)


class TestReadLogFile:
    def test_reads_text(self, tmp_path):
        path = tmp_path / "cdn.log"
        path.write_text(SAMPLE_CDN_LOG, encoding="utf-8")
        assert read_log_file(path) == SAMPLE_CDN_LOG

    def test_replaces_bad_bytes(self, tmp_path):
        path = tmp_path / "bin.log"
        path.write_bytes(b"ok \xff 503 \n")
        assert parse_origin_errors(read_log_file(path)) == ["ok � 503 "]

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            read_log_file(tmp_path / "missing.log")

"""
Unit tests for statistics persistence.
"""

import pytest

from console_wordle.config.game_settings import BOARD_ROWS
from console_wordle.models.errors import MalformedStats, StatsPersistenceFailure
from console_wordle.models.stats import StatsLedger
from console_wordle.services.stats_store import StatsStore, dump_stats, parse_stats


def sample_ledger():
    ledger = StatsLedger()
    ledger.record_round(True, 3)
    ledger.record_round(True, 4)
    ledger.record_round(False, 6)
    ledger.record_round(True, 3)
    return ledger


class TestLayout:

    def test_dump_layout(self):
        assert dump_stats(sample_ledger()) == "4\n3\n1\n2\n0 0 2 1 0 0 \n"

    def test_parse_dump(self):
        ledger = sample_ledger()
        assert parse_stats(dump_stats(ledger)) == ledger

    def test_parse_without_trailing_space_or_newline(self):
        ledger = parse_stats("1\n1\n1\n1\n1 0 0 0 0 0")
        assert ledger.games_won == 1
        assert ledger.guess_distribution == [1, 0, 0, 0, 0, 0]

    def test_parse_ignores_extra_histogram_entries(self):
        ledger = parse_stats("0\n0\n0\n0\n0 0 0 0 0 0 9")
        assert len(ledger.guess_distribution) == BOARD_ROWS

    @pytest.mark.parametrize("text", [
        "",
        "1\n1\n1\n1\n",
        "one\n1\n1\n1\n0 0 0 0 0 0",
        "1\n1\n1\n1\n0 0 x 0 0 0",
        "1\n1\n1\n1\n0 0 0",
        "1\n1\n-1\n1\n0 0 0 0 0 0",
        "1.5\n1\n1\n1\n0 0 0 0 0 0",
    ])
    def test_malformed(self, text):
        with pytest.raises(MalformedStats):
            parse_stats(text)

    def test_malformed_is_a_value_error(self):
        with pytest.raises(ValueError):
            parse_stats("garbage")


class TestStatsStore:

    def test_write_then_read(self, tmp_path):
        store = StatsStore(tmp_path / "stats.txt")
        store.write(sample_ledger())
        assert store.read() == sample_ledger()

    def test_load_existing_file(self, tmp_path):
        path = tmp_path / "stats.txt"
        path.write_text(dump_stats(sample_ledger()), encoding="utf-8")
        ledger = StatsStore(path).load_into(StatsLedger())
        assert ledger == sample_ledger()

    def test_missing_file_is_created_with_defaults(self, tmp_path):
        path = tmp_path / "stats.txt"
        store = StatsStore(path)
        ledger = store.load_into(StatsLedger())
        assert ledger == StatsLedger()
        assert store.enabled
        assert path.read_text(encoding="utf-8") == dump_stats(StatsLedger())

    def test_malformed_file_resets_ledger(self, tmp_path):
        path = tmp_path / "stats.txt"
        path.write_text("not\nstats\n", encoding="utf-8")
        store = StatsStore(path)
        ledger = sample_ledger()
        store.load_into(ledger)
        assert ledger == StatsLedger()
        assert store.enabled
        assert parse_stats(path.read_text(encoding="utf-8")) == StatsLedger()

    def test_unreadable_store_disables_persistence(self, tmp_path):
        # A directory cannot be read as a file
        store = StatsStore(tmp_path)
        ledger = sample_ledger()
        store.load_into(ledger)
        assert not store.enabled
        assert store.error_message
        assert ledger == sample_ledger()

    def test_read_failure_is_wrapped(self, tmp_path):
        with pytest.raises(StatsPersistenceFailure):
            StatsStore(tmp_path).read()

    def test_write_failure_is_wrapped(self, tmp_path):
        with pytest.raises(StatsPersistenceFailure):
            StatsStore(tmp_path / "missing" / "stats.txt").write(StatsLedger())

    def test_persist_failure_disables_store(self, tmp_path):
        store = StatsStore(tmp_path / "missing" / "stats.txt")
        assert store.persist(StatsLedger()) is False
        assert not store.enabled
        assert "missing" in store.error_message

    def test_disabled_store_does_not_write(self, tmp_path):
        path = tmp_path / "stats.txt"
        store = StatsStore(path)
        store.enabled = False
        assert store.persist(sample_ledger()) is False
        assert not path.exists()

    def test_persistence_failure_is_an_os_error(self, tmp_path):
        with pytest.raises(OSError):
            StatsStore(tmp_path).read()

# test.py

import logging

from engine import SugarOptEngine
from options import AssignResult
import utils


def test_engine_initialization():
    """Check that the engine initializes its subsystems from the defaults."""
    engine = SugarOptEngine()
    assert len(engine.options) == 41
    assert engine.tt.size_mb == 16
    assert engine.tt.capacity == 16 * 1024 * 1024 // 16
    assert engine.threads.size == engine.options["Threads"].as_int()
    assert engine.evaluation.weights["Space"] == 100
    assert engine.tablebases.files == []


def test_hash_resizes_table():
    engine = SugarOptEngine()
    engine.tt.table[1] = (0, 0, 0)
    result, _ = engine.set_option("hash", "64")
    assert result is AssignResult.APPLIED
    assert engine.tt.size_mb == 64
    assert engine.tt.table == {}


def test_out_of_range_hash_is_ignored():
    engine = SugarOptEngine()
    result, msg = engine.set_option("Hash", "0")
    assert result is AssignResult.REJECTED
    assert msg == ""
    assert engine.tt.size_mb == 16


def test_unknown_option():
    engine = SugarOptEngine()
    result, msg = engine.set_option("Frobnicate", "1")
    assert result is AssignResult.NOT_FOUND
    assert msg == "No such option: Frobnicate"


def test_clear_hash_resets_search():
    engine = SugarOptEngine()
    engine.search.nodes = 1000
    engine.search.history[(1, 2)] = 5
    engine.set_option("Clear Hash", "")
    assert engine.search.nodes == 0
    assert engine.search.history == {}
    assert engine.search.clears == 1


def test_eval_weight_change_reloads_evaluation():
    engine = SugarOptEngine()
    engine.set_option("KingSafety(mg)", "250")
    assert engine.evaluation.weights["KingSafety(mg)"] == 250
    engine.set_option("KingSafety(mg)", "301")
    assert engine.evaluation.weights["KingSafety(mg)"] == 250


def test_threads_change_resizes_pool():
    engine = SugarOptEngine()
    engine.set_option("Threads", "3")
    assert engine.threads.size == 3


def test_large_pages_reallocates_at_current_hash():
    engine = SugarOptEngine()
    engine.set_option("Hash", "32")
    engine.tt.table[7] = (1, 2, 3)
    engine.set_option("Large Pages", "false")
    assert engine.tt.size_mb == 32
    assert engine.tt.table == {}


def test_tablebase_path_rescan(tmp_path):
    for fname in ("KQvK.rtbw", "KQvK.rtbz", "KRPvKR.rtbw", "readme.txt"):
        (tmp_path / fname).write_text("")
    engine = SugarOptEngine()
    engine.set_option("SyzygyPath", str(tmp_path))
    assert len(engine.tablebases.files) == 2
    assert engine.tablebases.max_cardinality == 5

    engine.set_option("SyzygyPath", "<empty>")
    assert engine.tablebases.files == []
    assert engine.tablebases.max_cardinality == 0


def test_debug_log_file_mirrors_io(tmp_path):
    log_path = tmp_path / "io.log"
    engine = SugarOptEngine()
    try:
        engine.set_option("Debug Log File", str(log_path))
        utils.log_input("isready")
        utils.log_output("readyok")
    finally:
        utils.start_logger("")
    assert log_path.read_text().splitlines() == [">> isready", "<< readyok"]
    assert not logging.getLogger("uci.io").handlers


def test_new_game_resets_search():
    engine = SugarOptEngine()
    engine.search.nodes = 10
    engine.new_game()
    assert engine.search.nodes == 0

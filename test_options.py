# test_options.py

import pytest

from options import (
    AssignResult,
    DuplicateOptionError,
    Kind,
    Option,
    OptionsMap,
    OptionTypeError,
    ci_key,
    ci_less,
    format_option,
    format_options,
)


class Recorder:
    def __init__(self):
        self.calls = []

    def __call__(self, option):
        self.calls.append(option.current_value)


def test_spin_in_range_applies_and_fires_callback():
    """Hash 16 in [1, 1024]: 512 is applied, 2000 is ignored."""
    cb = Recorder()
    om = OptionsMap()
    om.register("Hash", Option.spin(16, 1, 1024, cb))

    assert om["Hash"].assign("512") is True
    assert om["Hash"].current_value == "512"
    assert om["Hash"].as_int() == 512
    assert cb.calls == ["512"]

    assert om["Hash"].assign("2000") is False
    assert om["Hash"].current_value == "512"
    assert cb.calls == ["512"]


@pytest.mark.parametrize("text", ["0", "-5", "1025", "abc", "12abc", "", "1.5", " 7", "1_0"])
def test_spin_rejects_out_of_range_and_garbage(text):
    opt = Option.spin(16, 1, 1024)
    assert opt.assign(text) is False
    assert opt.current_value == "16"


def test_spin_bounds_are_inclusive():
    opt = Option.spin(0, -100, 100)
    assert opt.assign("-100")
    assert opt.as_int() == -100
    assert opt.assign("100")
    assert opt.as_int() == 100
    assert opt.assign("+5")
    assert opt.as_int() == 5


def test_spin_with_inverted_bounds_is_refused():
    with pytest.raises(ValueError):
        Option.spin(5, 10, 1)


def test_check_accepts_only_true_and_false():
    cb = Recorder()
    opt = Option.check(False, cb)
    assert opt.current_value == "false"
    for bad in ("True", "1", "yes", "on", "", "false "):
        assert opt.assign(bad) is False
    assert opt.current_value == "false"
    assert cb.calls == []

    assert opt.assign("true")
    assert opt.as_int() == 1
    assert opt.assign("false")
    assert opt.as_int() == 0
    assert cb.calls == ["true", "false"]


def test_button_fires_on_every_call():
    """Clear Hash fires once per press, whatever text comes with it."""
    cb = Recorder()
    om = OptionsMap()
    om.register("Clear Hash", Option.button(cb))

    assert om["Clear Hash"].assign("") is True
    assert len(cb.calls) == 1
    assert om["clear hash"].assign("anything") is True
    assert len(cb.calls) == 2
    assert om["Clear Hash"].current_value == ""


def test_string_rejects_empty_but_may_default_empty():
    cb = Recorder()
    opt = Option.string("", cb)
    assert opt.as_str() == ""
    assert opt.assign("") is False
    assert cb.calls == []
    assert opt.assign("/tmp/debug.log")
    assert opt.as_str() == "/tmp/debug.log"
    assert cb.calls == ["/tmp/debug.log"]


def test_callback_sees_new_value():
    seen = []
    opt = Option.spin(1, 1, 512, lambda o: seen.append(o.as_int()))
    opt.assign("8")
    assert seen == [8]


def test_wrong_accessor_raises():
    with pytest.raises(OptionTypeError):
        Option.string("x").as_int()
    with pytest.raises(OptionTypeError):
        Option.button().as_int()
    with pytest.raises(OptionTypeError):
        Option.spin(1, 0, 2).as_str()
    with pytest.raises(OptionTypeError):
        Option.check(True).as_str()
    assert isinstance(OptionTypeError(), TypeError)


def test_int_conversion():
    assert int(Option.spin(42, 0, 100)) == 42
    assert int(Option.check(True)) == 1


def test_ci_key_folds_ascii_only():
    assert ci_key("Hash") == ci_key("HASH") == ci_key("hash")
    assert ci_key("ÄB") == "Äb"
    assert ci_less("alpha", "BETA")
    assert not ci_less("BETA", "alpha")
    assert not ci_less("Hash", "hash")


def test_lookup_is_case_insensitive():
    om = OptionsMap()
    om.register("Hash", Option.spin(16, 1, 1024))
    cell = om.lookup("Hash")
    assert cell is not None
    assert om.lookup("hash") is cell
    assert om.lookup("HASH") is cell
    assert "hAsH" in om
    assert om.lookup("Hashes") is None
    assert "Hashes" not in om


def test_lookup_never_creates():
    om = OptionsMap()
    assert om.lookup("Missing") is None
    assert len(om) == 0
    with pytest.raises(KeyError):
        om["Missing"]


def test_get_or_create_returns_existing_slot():
    om = OptionsMap()
    slot = om.register("Ponder", Option.check(False))
    assert om.get_or_create("PONDER") is slot
    assert len(om) == 1


def test_duplicate_registration_is_refused():
    om = OptionsMap()
    om.register("Hash", Option.spin(16, 1, 1024))
    with pytest.raises(DuplicateOptionError):
        om.register("hash", Option.spin(32, 1, 1024))
    assert om["Hash"].as_int() == 16
    assert om["Hash"].idx == 0


def test_insertion_order_is_independent_of_name_order():
    om = OptionsMap()
    for name in ("Zeta", "alpha", "Mid", "BETA"):
        om.register(name, Option.check(True))

    assert list(om) == ["alpha", "BETA", "Mid", "Zeta"]
    ordered = [name for name, _ in om.enumerate_by_insertion_order()]
    assert ordered == ["Zeta", "alpha", "Mid", "BETA"]
    assert [o.idx for _, o in om.enumerate_by_insertion_order()] == [0, 1, 2, 3]


def test_enumeration_is_restartable_and_live():
    om = OptionsMap()
    om.register("A", Option.check(True))
    first = list(om.enumerate_by_insertion_order())
    assert first == list(om.enumerate_by_insertion_order())
    om.register("B", Option.check(True))
    assert [n for n, _ in om.enumerate_by_insertion_order()] == ["A", "B"]


def test_set_option_reports_outcome():
    om = OptionsMap()
    om.register("Threads", Option.spin(4, 1, 512))
    assert om.set_option("threads", "8") is AssignResult.APPLIED
    assert om.set_option("Threads", "0") is AssignResult.REJECTED
    assert om.set_option("Nope", "1") is AssignResult.NOT_FOUND
    assert om["Threads"].as_int() == 8


def test_format_two_options():
    """Ponder then Threads: only the spin line carries bounds."""
    om = OptionsMap()
    om.register("Ponder", Option.check(False))
    om.register("Threads", Option.spin(4, 1, 512))

    assert format_options(om) == (
        "\noption name Ponder type check default false"
        "\noption name Threads type spin default 4 min 1 max 512"
    )
    assert str(om) == format_options(om)


def test_format_button_and_string():
    assert format_option("Clear Hash", Option.button()) == "option name Clear Hash type button"
    assert (
        format_option("SyzygyPath", Option.string("<empty>"))
        == "option name SyzygyPath type string default <empty>"
    )


def test_format_uses_default_not_current_value():
    om = OptionsMap()
    om.register("Hash", Option.spin(16, 1, 1024))
    om.set_option("Hash", "64")
    assert format_options(om) == "\noption name Hash type spin default 16 min 1 max 1024"


def test_kind_names_match_protocol():
    assert [k.value for k in Kind] == ["string", "check", "button", "spin"]


def test_spin_stores_canonical_text():
    opt = Option.spin(16, 1, 1024)
    assert opt.assign("+05")
    assert opt.current_value == "5"

    contempt = Option.spin(0, -100, 100)
    assert contempt.assign("-0")
    assert contempt.current_value == "0"
    assert contempt.assign("-007")
    assert contempt.current_value == "-7"


def test_wrong_accessor_in_callback_escapes_assign():
    om = OptionsMap()
    om.register("Contempt", Option.spin(0, -100, 100, lambda o: o.as_str()))
    with pytest.raises(OptionTypeError):
        om.set_option("Contempt", "5")

from typing import List, Tuple

import pytest

from services.mask_options import MaskBinding, MaskOptions
from services.translation import MaskConfigError


class Recorder:
    def __init__(self) -> None:
        self.calls: List[Tuple[str, str]] = []

    def cb(self, name: str):
        return lambda value: self.calls.append((name, value))


def _binding(rec: Recorder, **opts) -> MaskBinding:
    return MaskBinding(
        MaskOptions(**opts),
        on_change=rec.cb("change"),
        on_complete=rec.cb("complete"),
        on_invalid=rec.cb("invalid"),
    )


def test_options_require_mask() -> None:
    with pytest.raises(MaskConfigError):
        MaskOptions(mask="")
    with pytest.raises(MaskConfigError):
        MaskOptions.from_dict({"reverse": True})


def test_options_from_dict_accepts_camel_case() -> None:
    opts = MaskOptions.from_dict(
        {"mask": "00000-000", "clearIfNotMatch": True, "selectOnFocus": True, "onKeyPress": None}
    )
    assert opts.clear_if_not_match is True
    assert opts.select_on_focus is True
    assert opts.reverse is False


def test_options_merge_translation() -> None:
    opts = MaskOptions(mask="AAA", translation={"A": {"pattern": "[A-Z]"}})
    assert opts.apply("abcXYZ").formatted == "XYZ"
    assert "0" in opts.table


def test_reverse_mask_with_two_commas_is_rejected() -> None:
    with pytest.raises(MaskConfigError):
        MaskOptions(mask="#,##0,00", reverse=True)
    # forward não tem separador decimal, vírgula é só literal
    assert MaskOptions(mask="0,0,0").apply("123").formatted == "1,2,3"


def test_bad_translation_is_config_error() -> None:
    with pytest.raises(MaskConfigError):
        MaskOptions(mask="00", translation={"00": {"pattern": "[0-9]"}})


def test_change_fires_change_then_complete() -> None:
    rec = Recorder()
    res = _binding(rec, mask="00000-000").handle_change("01310100")
    assert res.formatted == "01310-100"
    assert rec.calls == [("change", "01310-100"), ("complete", "01310-100")]


def test_incomplete_change_does_not_complete() -> None:
    rec = Recorder()
    _binding(rec, mask="00000-000").handle_change("0131")
    assert rec.calls == [("change", "0131")]


def test_invalid_fires_only_with_clear_if_not_match() -> None:
    rec = Recorder()
    _binding(rec, mask="00000-000", clear_if_not_match=True).handle_change("abc")
    assert rec.calls == [("invalid", ""), ("change", "")]

    rec = Recorder()
    _binding(rec, mask="00000-000").handle_change("abc")
    assert rec.calls == [("change", "")]


def test_invalid_not_fired_for_empty_value() -> None:
    rec = Recorder()
    _binding(rec, mask="00000-000", clear_if_not_match=True).handle_change("")
    assert rec.calls == [("change", "")]


def test_reverse_binding() -> None:
    rec = Recorder()
    _binding(rec, mask="#.##0,00", reverse=True).handle_change("123456")
    assert rec.calls == [("change", "1.234,56"), ("complete", "1.234,56")]


def test_initial_value_masks_without_callbacks() -> None:
    rec = Recorder()
    b = _binding(rec, mask="(00) 00000-0000")
    assert b.initial_value("11987654321") == "(11) 98765-4321"
    assert b.initial_value("") == ""
    assert rec.calls == []


def test_with_options_rebinds_explicitly() -> None:
    rec = Recorder()
    b = _binding(rec, mask="00000-000")
    b2 = b.with_options(mask="000.000.000-00")
    assert b.options.mask == "00000-000"
    assert b2.handle_change("12345678909").formatted == "123.456.789-09"
    assert rec.calls[-1] == ("complete", "123.456.789-09")


def test_callback_errors_propagate() -> None:
    def boom(_value: str) -> None:
        raise RuntimeError("falhou")

    b = MaskBinding(MaskOptions(mask="0"), on_change=boom)
    with pytest.raises(RuntimeError):
        b.handle_change("1")


def test_options_with_mask_that_compiles_to_nothing() -> None:
    rec = Recorder()
    res = _binding(rec, mask="\\").handle_change("12")
    assert res.formatted == "" and res.complete is False
    assert rec.calls == [("change", "")]

import json

import pytest

from tools import mask_cli


def test_apply_with_mask(capsys) -> None:
    assert mask_cli.main(["apply", "--mask", "(00) 00000-0000", "11987654321"]) == 0
    assert capsys.readouterr().out.strip() == "(11) 98765-4321"


def test_apply_reverse_json(capsys) -> None:
    assert mask_cli.main(["apply", "--mask", "#.##0,00", "--reverse", "--json", "75"]) == 0
    assert json.loads(capsys.readouterr().out) == {"formatted": "0,75", "complete": False}


def test_apply_with_preset(capsys) -> None:
    assert mask_cli.main(["apply", "--preset", "money", "123456"]) == 0
    assert capsys.readouterr().out.strip() == "1.234,56"


def test_unmask(capsys) -> None:
    assert mask_cli.main(["unmask", "--mask", "000.000.000-00", "123.456.789-09"]) == 0
    assert capsys.readouterr().out.strip() == "12345678909"


@pytest.mark.parametrize("value, code", [("01310-100", 0), ("0131", 1)])
def test_check_exit_code(value: str, code: int, capsys) -> None:
    assert mask_cli.main(["check", "--mask", "00000-000", value]) == code
    assert capsys.readouterr().out.strip() in ("completo", "incompleto")


def test_presets_listing(capsys) -> None:
    assert mask_cli.main(["presets"]) == 0
    out = capsys.readouterr().out
    assert "cpf" in out and "(reversa)" in out


def test_missing_mask_is_usage_error() -> None:
    with pytest.raises(SystemExit):
        mask_cli.main(["apply", "123"])

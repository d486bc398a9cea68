import pytest

from components import masks


@pytest.mark.parametrize(
    "fn, raw, expected",
    [
        (masks.mask_cpf, "123.456.789-09", "123.456.789-09"),
        (masks.mask_cpf, "1234", "123.4"),
        (masks.mask_cnpj, "12345678000190", "12.345.678/0001-90"),
        (masks.mask_phone, "11987654321", "(11) 98765-4321"),
        (masks.mask_landline, "1133334444", "(11) 3333-4444"),
        (masks.mask_cep, "01310100", "01310-100"),
        (masks.mask_date, "25122024", "25/12/2024"),
        (masks.mask_time, "0930", "09:30"),
        (masks.mask_money, "123456", "1.234,56"),
        (masks.mask_card, "4111111111111111", "4111 1111 1111 1111"),
        (masks.mask_plate, "abc1d23", "ABC-1D23"),
    ],
)
def test_preset_helpers(fn, raw: str, expected: str) -> None:
    assert fn(raw) == expected


def test_helpers_tolerate_none_and_empty() -> None:
    assert masks.mask_cpf("") == ""
    assert masks.mask_cpf(None) == ""  # type: ignore[arg-type]


def test_only_digits() -> None:
    assert masks.only_digits("(11) 9876-5432") == "1198765432"
    assert masks.only_digits(None) == ""  # type: ignore[arg-type]


def test_unknown_preset() -> None:
    with pytest.raises(KeyError):
        masks.preset("rg")


def test_money_is_the_only_reverse_preset() -> None:
    assert [n for n, (_m, rev) in masks.PRESETS.items() if rev] == ["money"]

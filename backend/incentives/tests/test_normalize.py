"""
Tests pour la normalisation des saisies.
"""
import pytest
from decimal import Decimal
from incentives.core.errors import InvalidInputError
from incentives.core.normalize import parse_amount, parse_flag


def test_parse_amount_numbers():
    assert parse_amount(3000000) == 3000000.0
    assert parse_amount(1234.5) == 1234.5
    assert parse_amount(Decimal("99.90")) == 99.9


def test_parse_amount_empty_field():
    """Test champ vide -> 0"""
    assert parse_amount(None) == 0.0
    assert parse_amount("") == 0.0
    assert parse_amount("   ") == 0.0


def test_parse_amount_formatted_strings():
    """Test séparateurs de milliers, symbole ₹, Rs, INR"""
    assert parse_amount("30,00,000") == 3000000.0
    assert parse_amount("3,000,000.50") == 3000000.5
    assert parse_amount("₹ 4,50,000") == 450000.0
    assert parse_amount("Rs. 1,500") == 1500.0
    assert parse_amount("INR 2500") == 2500.0
    assert parse_amount("-1\xa0000") == -1000.0
    assert parse_amount("1e6") == 1000000.0


def test_parse_amount_rejects_text():
    """Test texte non numérique -> InvalidInputError avec le champ"""
    with pytest.raises(InvalidInputError) as exc_info:
        parse_amount("abc", field="er_actual")

    assert exc_info.value.field == "er_actual"
    assert "er_actual" in exc_info.value.message


@pytest.mark.parametrize("value", ["1.2.3", "12abc", "--5", "nan", "inf", float("nan"), float("inf"), "1e999"])
def test_parse_amount_rejects_invalid(value):
    with pytest.raises(InvalidInputError):
        parse_amount(value)


def test_parse_amount_rejects_bool_and_other_types():
    with pytest.raises(InvalidInputError):
        parse_amount(True)
    with pytest.raises(InvalidInputError):
        parse_amount([1, 2])


def test_parse_flag():
    """Test case à cocher"""
    assert parse_flag(True) is True
    assert parse_flag(False) is False
    assert parse_flag(None) is False
    assert parse_flag("on") is True
    assert parse_flag("TRUE") is True
    assert parse_flag("oui") is True
    assert parse_flag("") is False
    assert parse_flag("off") is False


def test_parse_flag_rejects_unknown():
    with pytest.raises(InvalidInputError):
        parse_flag("peut-être", field="sih_condition_met")

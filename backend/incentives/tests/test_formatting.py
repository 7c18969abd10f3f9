"""
Tests pour le formatage d'affichage (roupies, pourcentages).
"""
from decimal import Decimal
from incentives.services.formatting import (
    group_indian,
    format_currency,
    format_percent,
    format_tier,
    build_display,
)
from incentives.services.incentive_calculator import calculate_incentive


def test_group_indian():
    """Test groupement lakh/crore"""
    assert group_indian("999") == "999"
    assert group_indian("1000") == "1,000"
    assert group_indian("100000") == "1,00,000"
    assert group_indian("1234567") == "12,34,567"
    assert group_indian("123456789") == "12,34,56,789"


def test_format_currency():
    assert format_currency(75000) == "₹75,000.00"
    assert format_currency(37500.0) == "₹37,500.00"
    assert format_currency(12345678.9) == "₹1,23,45,678.90"
    assert format_currency(0) == "₹0.00"


def test_format_currency_negative():
    """Test signe avant le symbole, zéro négatif conservé"""
    assert format_currency(-1000) == "-₹1,000.00"
    assert format_currency(-0.0) == "-₹0.00"


def test_format_currency_rounding():
    """Test arrondi sur la valeur binaire exacte"""
    assert format_currency(0.125) == "₹0.13"
    # 1.005 vaut 1.00499999... en binaire
    assert format_currency(1.005) == "₹1.00"


def test_format_percent():
    assert format_percent(100.0) == "100.00%"
    assert format_percent(33.333333) == "33.33%"
    assert format_percent(2.675) == "2.67%"
    assert format_percent(-16.666666666666668) == "-16.67%"
    assert format_percent(-0.0) == "0.00%"


def test_format_tier():
    assert format_tier(0) == "0%"
    assert format_tier(110) == "110%"


def test_build_display():
    """Test panneau de résultats complet"""
    result = calculate_incentive(1500000, 225000, 200000, True)
    display = build_display(result)

    assert display == {
        "nrv_percent": "50.00%",
        "er_percent": "50.00%",
        "final_tier": "50%",
        "nrv_incentive": "₹7,500.00",
        "er_incentive": "₹4,500.00",
        "booster_incentive": "₹6,750.00",
        "total_incentive": "₹18,750.00",
        "payout_1": "₹9,375.00",
        "payout_2": "₹9,375.00",
    }


def test_format_very_large_values():
    """Test très grands montants -> tous les chiffres, sans erreur de précision"""
    assert format_percent(1e100) == format(Decimal(1e100), "f") + ".00%"
    assert format_currency(1e25).replace(",", "") == "₹10000000000000000905969664.00"
    assert format_percent(100 * 1e100 / 3000000).endswith("%")
    # 101 chiffres : premier groupe à deux chiffres
    assert format_currency(-1e100).startswith("-₹10,00,00,")

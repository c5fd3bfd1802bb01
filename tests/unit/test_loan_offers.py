"""Unit tests for synthetic loan offer generation"""

import pytest
from creditbridge.domain.loan_offers import BANKS, generate_loan_offers, score_tier


def _by_type(offers, loan_type):
    return [offer for offer in offers if offer.loan_type == loan_type]


def test_below_card_floor_gets_nothing():
    assert generate_loan_offers(599) == []
    assert generate_loan_offers(300) == []


def test_fair_card_score_only_alternative_lenders():
    """610: only the two alternative-tier banks issue a Standard Card"""
    offers = generate_loan_offers(610)

    assert [offer.bank_id for offer in offers] == ["discover", "capital-one"]
    assert all(offer.product_name == "Standard Card" for offer in offers)
    assert all(offer.interest_rate == 22.99 for offer in offers)
    assert all(offer.approval_likelihood == 70 for offer in offers)


def test_personal_loans_skip_premium_banks_below_700():
    offers = generate_loan_offers(630)
    personal = _by_type(offers, "personal")

    assert [offer.bank_id for offer in personal] == ["wells", "discover", "capital-one", "ally"]
    assert all(offer.approval_likelihood == 65 for offer in personal)
    assert [offer.loan_type for offer in offers] == ["credit-card"] * 2 + ["personal"] * 4


def test_excellent_score_full_catalog():
    offers = generate_loan_offers(768)

    assert len(offers) == 20
    assert [offer.loan_type for offer in offers] == (
        ["credit-card"] * 8 + ["auto"] * 5 + ["personal"] * 4 + ["mortgage"] * 3
    )
    assert [offer.bank_id for offer in _by_type(offers, "credit-card")] == [bank.id for bank in BANKS]
    assert [offer.bank_id for offer in _by_type(offers, "personal")] == ["chase", "bofa", "wells", "citi"]
    assert [offer.bank_id for offer in _by_type(offers, "mortgage")] == ["chase", "bofa", "wells"]
    assert _by_type(offers, "credit-card")[0].product_name == "Premium Rewards Card"
    assert _by_type(offers, "auto")[0].interest_rate == 3.49


def test_offers_sorted_by_approval_likelihood():
    for score in (600, 625, 655, 690, 705, 725, 745, 800, 850):
        likelihoods = [offer.approval_likelihood for offer in generate_loan_offers(score)]
        assert likelihoods == sorted(likelihoods, reverse=True)


def test_mortgage_bands():
    conventional = _by_type(generate_loan_offers(745), "mortgage")
    assert {offer.product_name for offer in conventional} == {"Conventional Mortgage"}
    assert conventional[0].interest_rate == 6.75
    assert conventional[0].requirements == ["20% Down Payment", "Stable Income"]

    fha = _by_type(generate_loan_offers(730), "mortgage")
    assert {offer.product_name for offer in fha} == {"FHA Mortgage"}
    assert fha[0].interest_rate == 6.75

    fair = _by_type(generate_loan_offers(690), "mortgage")
    assert fair[0].interest_rate == 7.25
    assert fair[0].approval_likelihood == 65


@pytest.mark.parametrize(
    "score,expected",
    [(619, set()), (620, {"personal"}), (650, {"personal", "auto"}), (680, {"personal", "auto", "mortgage"})],
)
def test_category_floors(score: int, expected: set):
    loan_types = {offer.loan_type for offer in generate_loan_offers(score)}
    assert loan_types - {"credit-card"} == expected


def test_offer_lists_are_independent_copies():
    first = generate_loan_offers(760)
    first[0].features.append("Mutated")
    assert "Mutated" not in generate_loan_offers(760)[0].features


def test_score_tier():
    assert score_tier(750) == "excellent"
    assert score_tier(749) == "good"
    assert score_tier(700) == "good"
    assert score_tier(699) == "fair"
    assert score_tier(719, good=720) == "fair"

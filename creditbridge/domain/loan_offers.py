"""Synthetic loan offer catalog keyed on the final hybrid score"""

from dataclasses import dataclass
from typing import Dict, List

from creditbridge.domain.models import LoanOffer


@dataclass(frozen=True)
class Bank:
    id: str
    name: str
    tier: str  # premium | traditional | alternative | online


BANKS: List[Bank] = [
    Bank("chase", "Chase Bank", "premium"),
    Bank("bofa", "Bank of America", "premium"),
    Bank("wells", "Wells Fargo", "traditional"),
    Bank("citi", "Citibank", "premium"),
    Bank("discover", "Discover Bank", "alternative"),
    Bank("capital-one", "Capital One", "alternative"),
    Bank("ally", "Ally Bank", "online"),
    Bank("marcus", "Marcus by Goldman Sachs", "premium"),
]

# Minimum score for any offer in each category
CATEGORY_FLOORS = {
    "credit-card": 600,
    "personal": 620,
    "auto": 650,
    "mortgage": 680,
}

# Per-band terms: excellent >= 750, good >= 700 (720 for mortgages), fair otherwise
CREDIT_CARD_TERMS: Dict[str, dict] = {
    "excellent": {
        "product_name": "Premium Rewards Card",
        "interest_rate": 14.99,
        "max_amount": 25000,
        "approval_likelihood": 95,
        "requirements": ["Excellent Credit", "$50K+ Income"],
        "features": ["2% Cash Back", "No Annual Fee", "Travel Insurance"],
    },
    "good": {
        "product_name": "Rewards Card",
        "interest_rate": 18.99,
        "max_amount": 15000,
        "approval_likelihood": 85,
        "requirements": ["Good Credit", "$25K+ Income"],
        "features": ["1.5% Cash Back", "No Annual Fee"],
    },
    "fair": {
        "product_name": "Standard Card",
        "interest_rate": 22.99,
        "max_amount": 5000,
        "approval_likelihood": 70,
        "requirements": ["Good Credit", "$25K+ Income"],
        "features": ["1% Cash Back"],
    },
}

PERSONAL_LOAN_TERMS: Dict[str, dict] = {
    "excellent": {"interest_rate": 5.99, "max_amount": 50000, "approval_likelihood": 90},
    "good": {"interest_rate": 8.99, "max_amount": 35000, "approval_likelihood": 80},
    "fair": {"interest_rate": 12.99, "max_amount": 20000, "approval_likelihood": 65},
}

AUTO_LOAN_TERMS: Dict[str, dict] = {
    "excellent": {"interest_rate": 3.49, "max_amount": 80000, "approval_likelihood": 95},
    "good": {"interest_rate": 4.99, "max_amount": 60000, "approval_likelihood": 85},
    "fair": {"interest_rate": 6.99, "max_amount": 40000, "approval_likelihood": 75},
}

MORTGAGE_TERMS: Dict[str, dict] = {
    "excellent": {"interest_rate": 6.25, "max_amount": 750000, "approval_likelihood": 85},
    "good": {"interest_rate": 6.75, "max_amount": 500000, "approval_likelihood": 75},
    "fair": {"interest_rate": 7.25, "max_amount": 350000, "approval_likelihood": 65},
}


def score_tier(score: int, excellent: int = 750, good: int = 700) -> str:
    if score >= excellent:
        return "excellent"
    elif score >= good:
        return "good"
    return "fair"


def _credit_card_offers(score: int) -> List[LoanOffer]:
    terms = CREDIT_CARD_TERMS[score_tier(score)]
    return [
        LoanOffer(
            bank_id=bank.id,
            bank_name=bank.name,
            loan_type="credit-card",
            product_name=terms["product_name"],
            interest_rate=terms["interest_rate"],
            max_amount=terms["max_amount"],
            terms="0% APR for 12 months, then variable APR",
            requirements=list(terms["requirements"]),
            approval_likelihood=terms["approval_likelihood"],
            features=list(terms["features"]),
        )
        for bank in BANKS
        if score >= 720 or bank.tier == "alternative"
    ]


def _personal_loan_offers(score: int) -> List[LoanOffer]:
    terms = PERSONAL_LOAN_TERMS[score_tier(score)]
    eligible = [bank for bank in BANKS if bank.tier != "premium" or score >= 700]
    return [
        LoanOffer(
            bank_id=bank.id,
            bank_name=bank.name,
            loan_type="personal",
            product_name="Personal Loan",
            interest_rate=terms["interest_rate"],
            max_amount=terms["max_amount"],
            terms="3-7 year terms available",
            requirements=["Steady Income", "Debt-to-Income < 40%"],
            approval_likelihood=terms["approval_likelihood"],
            features=["Fixed Rate", "No Prepayment Penalty", "Quick Approval"],
        )
        for bank in eligible[:4]
    ]


def _auto_loan_offers(score: int) -> List[LoanOffer]:
    terms = AUTO_LOAN_TERMS[score_tier(score)]
    return [
        LoanOffer(
            bank_id=bank.id,
            bank_name=bank.name,
            loan_type="auto",
            product_name="Auto Loan",
            interest_rate=terms["interest_rate"],
            max_amount=terms["max_amount"],
            terms="2-7 year terms available",
            requirements=["Vehicle as Collateral", "Insurance Required"],
            approval_likelihood=terms["approval_likelihood"],
            features=["Competitive Rates", "Pre-approval Available", "Online Application"],
        )
        for bank in BANKS[:5]
    ]


def _mortgage_offers(score: int) -> List[LoanOffer]:
    terms = MORTGAGE_TERMS[score_tier(score, good=720)]
    conventional = score >= 740
    eligible = [bank for bank in BANKS if bank.tier in ("premium", "traditional")]
    return [
        LoanOffer(
            bank_id=bank.id,
            bank_name=bank.name,
            loan_type="mortgage",
            product_name="Conventional Mortgage" if conventional else "FHA Mortgage",
            interest_rate=terms["interest_rate"],
            max_amount=terms["max_amount"],
            terms="15-30 year fixed rate options",
            requirements=(
                ["20% Down Payment", "Stable Income"] if conventional else ["3.5% Down Payment", "Stable Income"]
            ),
            approval_likelihood=terms["approval_likelihood"],
            features=(
                ["Best Rates", "No PMI with 20% Down", "Rate Lock"]
                if conventional
                else ["Low Down Payment", "FHA Approved", "First-time Buyer Programs"]
            ),
        )
        for bank in eligible[:3]
    ]


_GENERATORS = {
    "credit-card": _credit_card_offers,
    "personal": _personal_loan_offers,
    "auto": _auto_loan_offers,
    "mortgage": _mortgage_offers,
}


def generate_loan_offers(score: int) -> List[LoanOffer]:
    """
    Build offers for every category whose floor the score clears.

    Returned most-likely-approved first; ties keep catalog order.
    """
    offers: List[LoanOffer] = []
    for loan_type, floor in CATEGORY_FLOORS.items():
        if score >= floor:
            offers.extend(_GENERATORS[loan_type](score))
    return sorted(offers, key=lambda offer: offer.approval_likelihood, reverse=True)

"""Turn raw form payloads into typed FinancialProfile snapshots"""

import math
from typing import Any, Dict, List, Mapping, Optional

from creditbridge.domain.models import (
    CREDIT_CATEGORIES,
    EMPLOYMENT_TYPES,
    HOUSING_TYPES,
    Banking,
    Employment,
    FinancialProfile,
    Housing,
    PaymentRecord,
    TraditionalCredit,
    UtilityAccount,
)
from creditbridge.utils.date_utils import parse_date
from creditbridge.utils.numbers import clamp, round_half_up

_FINANCIAL_SECTIONS = ("employment", "housing", "utilities", "banking")


def normalize_profile(payload: Any) -> FinancialProfile:
    """
    Build a FinancialProfile from the camelCase payload posted by the web client.

    Accepts either {"financialData": {...}, "traditionalCredit": {...}} or the
    financial sections at the top level. Missing or malformed values fall back to
    defaults; this function never raises on bad content.
    """
    data = _as_mapping(payload)
    financial = _as_mapping(data.get("financialData"))
    if not financial and any(key in data for key in _FINANCIAL_SECTIONS):
        financial = data

    return FinancialProfile(
        employment=_normalize_employment(_as_mapping(financial.get("employment"))),
        housing=_normalize_housing(_as_mapping(financial.get("housing"))),
        utilities=[_normalize_utility(_as_mapping(u)) for u in _as_list(financial.get("utilities"))],
        banking=_normalize_banking(_as_mapping(financial.get("banking"))),
        traditional_credit=_normalize_traditional_credit(
            _as_mapping(data.get("traditionalCredit")),
            _as_mapping(data.get("personalInfo")),
        ),
    )


def to_number(value: Any, default: float = 0.0) -> float:
    """Coerce form input ("5,000", "$1200", 42) to a non-negative float"""
    if isinstance(value, bool) or value is None:
        return default
    if isinstance(value, str):
        cleaned = value.strip().replace(",", "").replace("$", "")
        if not cleaned:
            return default
        try:
            number = float(cleaned)
        except ValueError:
            return default
    elif isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return default
    else:
        return default

    if math.isnan(number) or math.isinf(number) or number < 0:
        return default
    return number


def normalize_choice(value: Any, allowed: Optional[frozenset] = None) -> Optional[str]:
    """Lower-case and hyphenate an enum-ish string; None if not in `allowed`"""
    if not isinstance(value, str):
        return None
    text = "-".join(value.strip().lower().replace("_", " ").split())
    if not text:
        return None
    if text == "ontime":
        text = "on-time"
    if allowed is not None and text not in allowed:
        return None
    return text


def _as_mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


def _as_list(value: Any) -> List[Any]:
    return list(value) if isinstance(value, (list, tuple)) else []


def _as_text(value: Any) -> str:
    return value.strip() if isinstance(value, str) else ""


def _normalize_payments(raw: Any) -> List[PaymentRecord]:
    payments = []
    for item in _as_list(raw):
        entry = _as_mapping(item)
        payments.append(
            PaymentRecord(
                date=parse_date(entry.get("date")),
                amount=to_number(entry.get("amount")),
                status=normalize_choice(entry.get("status")) or "unknown",
            )
        )
    return payments


def _normalize_employment(raw: Mapping[str, Any]) -> Employment:
    return Employment(
        employer_name=_as_text(raw.get("employerName")),
        job_title=_as_text(raw.get("jobTitle")),
        annual_salary=to_number(raw.get("annualSalary")),
        start_date=parse_date(raw.get("startDate")),
        employment_type=normalize_choice(raw.get("employmentType"), EMPLOYMENT_TYPES),
    )


def _normalize_housing(raw: Mapping[str, Any]) -> Housing:
    return Housing(
        housing_type=normalize_choice(raw.get("housingType"), HOUSING_TYPES),
        monthly_rent=to_number(raw.get("monthlyRent")),
        rent_payment_history=_normalize_payments(raw.get("rentPaymentHistory")),
    )


def _normalize_utility(raw: Mapping[str, Any]) -> UtilityAccount:
    return UtilityAccount(
        provider=_as_text(raw.get("provider")),
        type=normalize_choice(raw.get("type")) or "",
        monthly_amount=to_number(raw.get("monthlyAmount")),
        payment_history=_normalize_payments(raw.get("paymentHistory")),
    )


def _normalize_banking(raw: Mapping[str, Any]) -> Banking:
    return Banking(
        bank_name=_as_text(raw.get("bankName")),
        account_type=normalize_choice(raw.get("accountType")) or "",
        monthly_income=to_number(raw.get("monthlyIncome")),
        monthly_expenses=to_number(raw.get("monthlyExpenses")),
        average_balance=to_number(raw.get("averageBalance")),
    )


def _normalize_traditional_credit(
    raw: Mapping[str, Any], personal_info: Mapping[str, Any]
) -> TraditionalCredit:
    category = normalize_choice(raw.get("hasCredit"), CREDIT_CATEGORIES)
    if category is None:
        category = normalize_choice(personal_info.get("hasTraditionalCredit"), CREDIT_CATEGORIES)

    raw_score = raw.get("score")
    if raw_score in (None, ""):
        raw_score = personal_info.get("traditionalCreditScore")
    score_value = to_number(raw_score)

    score: Optional[int] = None
    if score_value > 0:
        score = int(clamp(round_half_up(score_value), 300, 850))

    return TraditionalCredit(has_credit=category or "unsure", score=score)


def profile_payload(
    financial_data: Optional[Dict[str, Any]],
    traditional_credit: Optional[Dict[str, Any]] = None,
    personal_info: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """Reassemble the payload shape normalize_profile expects from stored sections"""
    return {
        "financialData": financial_data or {},
        "traditionalCredit": traditional_credit or {},
        "personalInfo": personal_info or {},
    }

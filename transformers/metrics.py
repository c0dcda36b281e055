"""Display aggregates and formatting for the dashboard views.

Every function takes the canonical object (or one of its records) and tolerates
empty or missing sections, returning zeros rather than raising.
"""

from __future__ import annotations

ZERO_DONATION = {"year": 0, "amount": 0}
ZERO_IMPACT = {"year": 0, "nonprofitsSupported": 0, "beneficiaries": 0, "impactScore": 0}

# Risk tone thresholds, checked top-down
RISK_TONES = [
    (0.66, "bad", "High Risk"),
    (0.45, "warn", "Medium"),
    (0.0, "good", "Low"),
]

RISK_ACTIONS = {
    "Donor Concentration": "Diversify donor base; grow recurring donors.",
    "Economic Sensitivity": "Build reserves; expand multi-year commitments.",
    "Donation Volatility": "Stabilize via monthly giving campaigns.",
}
DEFAULT_RISK_ACTION = "Keep measuring outcomes + execution milestones."

SUGGESTED_DONATION = {"monthly": 25, "one-time": 100}


def _section(data: dict, name: str) -> list[dict]:
    # API payloads are passed through unchecked, so skip non-record entries
    records = data.get(name) if isinstance(data, dict) else None
    if not isinstance(records, list):
        return []
    return [r for r in records if isinstance(r, dict)]


def _to_float(value) -> float:
    try:
        return float(value or 0)
    except (TypeError, ValueError):
        return 0.0


def _number(record: dict, key: str) -> float:
    value = record.get(key) if isinstance(record, dict) else None
    if isinstance(value, bool):
        return 0
    return value if isinstance(value, (int, float)) else 0


def _ratio_change(latest: float, previous: float) -> float:
    return (latest - previous) / previous if previous else 0.0


# ── Donations ──────────────────────────────────────────────────────────

def donation_total(data: dict) -> float:
    return sum(_number(r, "amount") for r in _section(data, "donationsByYear"))


def latest_donation(data: dict) -> dict:
    records = _section(data, "donationsByYear")
    return records[-1] if records else dict(ZERO_DONATION)


def previous_donation(data: dict) -> dict:
    records = _section(data, "donationsByYear")
    return records[-2] if len(records) >= 2 else dict(ZERO_DONATION)


def yoy_growth(data: dict) -> float:
    """Latest-year donations relative to the year before; 0 without a baseline."""
    return _ratio_change(
        _number(latest_donation(data), "amount"),
        _number(previous_donation(data), "amount"),
    )


def mix_share(data: dict, label: str, section: str = "donationMix") -> float:
    for entry in _section(data, section):
        if entry.get("label") == label:
            return _number(entry, "value")
    return 0


def recurring_share(data: dict) -> float:
    return mix_share(data, "Monthly")


def suggested_donation(mode: str) -> int:
    return SUGGESTED_DONATION.get(mode, SUGGESTED_DONATION["one-time"])


# ── Expenses ───────────────────────────────────────────────────────────

def program_ratio(data: dict) -> float:
    return mix_share(data, "Programs", section="expensesByCategory")


def admin_ratio(data: dict) -> float:
    return 1 - program_ratio(data)


# ── Impact ─────────────────────────────────────────────────────────────

def latest_impact(data: dict) -> dict:
    records = _section(data, "impactByYear")
    return records[-1] if records else dict(ZERO_IMPACT)


def previous_impact(data: dict) -> dict:
    records = _section(data, "impactByYear")
    return records[-2] if len(records) >= 2 else {"impactScore": 0}


def impact_score_delta(data: dict) -> float:
    return _ratio_change(
        _number(latest_impact(data), "impactScore"),
        _number(previous_impact(data), "impactScore"),
    )


# ── Projects & partnerships ────────────────────────────────────────────

def projects_by_year(data: dict) -> list[dict]:
    """Projects newest first; ties keep their original order."""
    return sorted(_section(data, "projects"), key=lambda p: _number(p, "year"), reverse=True)


def total_projects(data: dict) -> int:
    return len(_section(data, "projects"))


def active_partnerships(data: dict) -> int:
    return sum(1 for p in _section(data, "partnerships") if p.get("active") is True)


def total_partnerships(data: dict) -> int:
    return len(_section(data, "partnerships"))


# ── Risk ───────────────────────────────────────────────────────────────

def risk_tone(score: float) -> str:
    for threshold, tone, _ in RISK_TONES:
        if score >= threshold:
            return tone
    return "good"


def risk_label(score: float) -> str:
    for threshold, _, label in RISK_TONES:
        if score >= threshold:
            return label
    return "Low"


def risk_action(area: str) -> str:
    return RISK_ACTIONS.get(area, DEFAULT_RISK_ACTION)


# ── Formatting ─────────────────────────────────────────────────────────

def format_money(value) -> str:
    """Format a number as US dollars with cents, e.g. $1,020,000.00."""
    value = _to_float(value)
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.2f}"


def format_pct(value) -> str:
    """Signed percentage with one decimal: +12.1%, -3.0%, 0.0%."""
    value = _to_float(value)
    sign = "+" if value > 0 else ""
    return f"{sign}{value * 100:.1f}%"


def format_share(value) -> str:
    """Whole-number percentage for shares and ratios: 0.78 -> 78%."""
    return f"{round(_to_float(value) * 100)}%"

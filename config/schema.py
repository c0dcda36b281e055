"""Canonical dashboard schema: the sections every data source must produce."""

import pandas as pd

# Field definitions: (section, field_name, dtype, description)
SCHEMA_FIELDS = [
    # Donations
    ("donationsByYear", "year", "int", "Calendar year of the gifts"),
    ("donationsByYear", "amount", "float", "Total gifts received that year (USD)"),

    # Donation mix
    ("donationMix", "label", "string", "Gift type (One-time, Monthly, ...)"),
    ("donationMix", "value", "float", "Share of total gifts (0-1)"),

    # Expenses
    ("expensesByCategory", "label", "string", "Spending category"),
    ("expensesByCategory", "value", "float", "Share of total spending (0-1)"),

    # Impact
    ("impactByYear", "year", "int", "Calendar year"),
    ("impactByYear", "nonprofitsSupported", "int", "Nonprofits supported that year"),
    ("impactByYear", "beneficiaries", "int", "Estimated people reached"),
    ("impactByYear", "impactScore", "float", "Composite impact index"),

    # Projects
    ("projects", "year", "int", "Year the project was funded"),
    ("projects", "name", "string", "Project name"),
    ("projects", "partner", "string", "Partner organization"),
    ("projects", "funding", "float", "Funding committed (USD)"),
    ("projects", "outcome", "string", "Headline outcome"),
    ("projects", "status", "string", "Completed or In Progress"),

    # Partnerships
    ("partnerships", "name", "string", "Partner name"),
    ("partnerships", "type", "string", "Corporate, Foundation, Academic, ..."),
    ("partnerships", "contribution", "string", "What the partner provides"),
    ("partnerships", "active", "bool", "Whether the partnership is active"),

    # Risk
    ("risk", "area", "string", "Risk area"),
    ("risk", "score", "float", "Risk score (0-1, higher is riskier)"),
    ("risk", "note", "string", "Short explanation"),
]

SECTION_NAMES = list(dict.fromkeys(f[0] for f in SCHEMA_FIELDS))
SECTION_FIELDS = {
    section: [(name, dtype) for s, name, dtype, _ in SCHEMA_FIELDS if s == section]
    for section in SECTION_NAMES
}

# The only field checked on every incoming payload
REQUIRED_SECTION = "donationsByYear"

PROJECT_STATUSES = ("Completed", "In Progress")

_PANDAS_DTYPES = {
    "int": "Int64",
    "float": "Float64",
    "string": "string",
    "bool": "boolean",
}


def empty_shape() -> dict:
    """Return the placeholder shape used when only donations are supplied."""
    return {
        "donationsByYear": [],
        "donationMix": [
            {"label": "One-time", "value": 0.70},
            {"label": "Monthly", "value": 0.20},
            {"label": "Employer Match", "value": 0.10},
        ],
        "expensesByCategory": [
            {"label": "Programs", "value": 0.75},
            {"label": "Operations", "value": 0.15},
            {"label": "Fundraising", "value": 0.10},
        ],
        "impactByYear": [],
        "projects": [],
        "partnerships": [],
        "risk": [],
    }


def has_required_section(data) -> bool:
    """True if the payload carries a list under the required section."""
    return isinstance(data, dict) and isinstance(data.get(REQUIRED_SECTION), list)


def section_frame(data: dict, section: str) -> pd.DataFrame:
    """Coerce one section of a canonical object to a typed DataFrame.

    Missing sections and missing columns come back empty rather than raising,
    so views can render partial payloads from the API source.
    """
    if section not in SECTION_FIELDS:
        raise KeyError(f"Unknown section: {section}")

    records = data.get(section) if isinstance(data, dict) else None
    if not isinstance(records, list):
        records = []
    rows = [r for r in records if isinstance(r, dict)]
    df = pd.DataFrame(rows)

    for col, dtype in SECTION_FIELDS[section]:
        target = _PANDAS_DTYPES[dtype]
        if col not in df.columns:
            df[col] = pd.array([pd.NA] * len(df), dtype=target)
        elif dtype == "int":
            df[col] = pd.to_numeric(df[col], errors="coerce").round().astype("Int64")
        elif dtype == "float":
            df[col] = pd.to_numeric(df[col], errors="coerce").astype("Float64")
        elif dtype == "bool":
            df[col] = df[col].map(lambda v: v if isinstance(v, bool) else pd.NA).astype("boolean")
        else:
            df[col] = df[col].astype("string")
    return df[[col for col, _ in SECTION_FIELDS[section]]]

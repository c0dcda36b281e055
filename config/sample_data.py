"""Built-in sample dataset: served by the mock source and used as the fallback."""

import copy

DEFAULT_DATA = {
    "donationsByYear": [
        {"year": 2019, "amount": 520000},
        {"year": 2020, "amount": 610000},
        {"year": 2021, "amount": 740000},
        {"year": 2022, "amount": 820000},
        {"year": 2023, "amount": 910000},
        {"year": 2024, "amount": 1020000},
    ],
    "donationMix": [
        {"label": "One-time", "value": 0.62},
        {"label": "Monthly", "value": 0.28},
        {"label": "Employer Match", "value": 0.10},
    ],
    "expensesByCategory": [
        {"label": "Programs", "value": 0.78},
        {"label": "Operations", "value": 0.14},
        {"label": "Fundraising", "value": 0.08},
    ],
    "impactByYear": [
        {"year": 2019, "nonprofitsSupported": 16, "beneficiaries": 24000, "impactScore": 61},
        {"year": 2020, "nonprofitsSupported": 19, "beneficiaries": 31000, "impactScore": 66},
        {"year": 2021, "nonprofitsSupported": 22, "beneficiaries": 38000, "impactScore": 70},
        {"year": 2022, "nonprofitsSupported": 25, "beneficiaries": 47000, "impactScore": 74},
        {"year": 2023, "nonprofitsSupported": 27, "beneficiaries": 52000, "impactScore": 78},
        {"year": 2024, "nonprofitsSupported": 30, "beneficiaries": 60000, "impactScore": 82},
    ],
    "projects": [
        {"year": 2024, "name": "Workforce Upskilling Cohort", "partner": "Neighborhood Skills Lab",
         "funding": 120000, "outcome": "Job placements +18%", "status": "Completed"},
        {"year": 2023, "name": "Youth Mentorship Expansion", "partner": "Bridge Futures",
         "funding": 85000, "outcome": "Students served +1,200", "status": "Completed"},
        {"year": 2023, "name": "Food Access Logistics", "partner": "Community Pantry Network",
         "funding": 70000, "outcome": "Delivery reliability +22%", "status": "Completed"},
        {"year": 2022, "name": "Housing Navigation Pilot", "partner": "HomePath",
         "funding": 95000, "outcome": "Stable housing +140", "status": "Completed"},
        {"year": 2024, "name": "Nonprofit Finance Toolkit", "partner": "Civic Growth Studio",
         "funding": 60000, "outcome": "Runway +4.5 months avg", "status": "In Progress"},
    ],
    "partnerships": [
        {"name": "Corporate Partner A", "type": "Corporate", "contribution": "Matching Gifts", "active": True},
        {"name": "Foundation B", "type": "Foundation", "contribution": "Multi-year Grant", "active": True},
        {"name": "University C", "type": "Academic", "contribution": "Pro Bono Fellows", "active": True},
        {"name": "Consulting D", "type": "Pro Bono", "contribution": "Strategy & Ops", "active": False},
    ],
    "risk": [
        {"area": "Donor Concentration", "score": 0.72, "note": "Top donors contribute large share."},
        {"area": "Donation Volatility", "score": 0.48, "note": "Yearly variance moderate."},
        {"area": "Program Execution", "score": 0.38, "note": "Delivery stable across projects."},
        {"area": "Economic Sensitivity", "score": 0.64, "note": "Downturn could reduce giving."},
    ],
}


def default_dataset() -> dict:
    """Return an independent copy of the sample dataset."""
    return copy.deepcopy(DEFAULT_DATA)

"""Global settings: data source defaults, export paths, HTTP behaviour, logging."""

import os
from pathlib import Path

try:
    from dotenv import load_dotenv
    load_dotenv()
except ImportError:
    pass

# ── Paths ──────────────────────────────────────────────────────────────
PROJECT_ROOT = Path(__file__).resolve().parent.parent
DATA_DIR = PROJECT_ROOT / "data"
OUTPUT_DIR = DATA_DIR / "output"

# ── API source ─────────────────────────────────────────────────────────
DEFAULT_API_URL = os.getenv(
    "DASHBOARD_API_URL", "https://api.example.com/dashboard-data"
)
DEFAULT_API_KEY = os.getenv("DASHBOARD_API_KEY", "")


def _parse_timeout(raw: str | None) -> float | None:
    """Blank or missing means no timeout on the API call."""
    if raw is None or not raw.strip():
        return None
    try:
        value = float(raw)
    except ValueError as e:
        raise ValueError(
            f"Invalid DASHBOARD_API_TIMEOUT value: expected seconds, got '{raw}'"
        ) from e
    return value if value > 0 else None


# seconds; None waits for the server indefinitely
API_TIMEOUT = _parse_timeout(os.getenv("DASHBOARD_API_TIMEOUT"))

# ── HTTP defaults ──────────────────────────────────────────────────────
DEFAULT_RETRIES = 0  # a failed fetch is re-run by the user, never automatically
USER_AGENT = "SVPTransparencyDashboard/1.0"

# ── CSV source ─────────────────────────────────────────────────────────
CSV_YEAR_COLUMN = "year"
CSV_DONATIONS_COLUMN = "donations"
PLACEHOLDER_START_YEAR = 2023  # placeholder rows cover this year and the next

# ── Export ─────────────────────────────────────────────────────────────
EXPORT_FILENAME = "svp_dashboard_data.json"

# ── Logging ────────────────────────────────────────────────────────────
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

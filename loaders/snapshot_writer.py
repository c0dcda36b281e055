"""JSON snapshot export and a plain-text summary of the current dashboard data."""

import json
import logging
from datetime import datetime, timezone
from pathlib import Path

from config.schema import SECTION_NAMES
from config.settings import EXPORT_FILENAME, OUTPUT_DIR
from loaders.dashboard_state import DashboardState
from transformers.metrics import (
    active_partnerships,
    admin_ratio,
    donation_total,
    format_money,
    format_pct,
    format_share,
    latest_donation,
    program_ratio,
    total_partnerships,
    yoy_growth,
)

logger = logging.getLogger(__name__)


def _iso(ts: datetime) -> str:
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    return ts.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def build_snapshot(state: DashboardState, generated_at: datetime | None = None) -> dict:
    """Timestamps plus every canonical section at the top level.

    Keys the payload carries beyond the canonical sections (API sources may send
    extras) are exported too, but never override the two timestamps.
    """
    generated_at = generated_at or datetime.now(timezone.utc)
    payload = {
        "generatedAt": _iso(generated_at),
        "lastFetched": _iso(state.last_fetched),
    }
    for key, value in state.data.items():
        if key not in payload:
            payload[key] = value
    return payload


def snapshot_json(state: DashboardState, generated_at: datetime | None = None) -> str:
    return json.dumps(build_snapshot(state, generated_at), indent=2, default=str)


def write_snapshot(state: DashboardState, path: Path | None = None) -> Path:
    """Write the snapshot to disk. Returns the path written."""
    if path is None:
        OUTPUT_DIR.mkdir(parents=True, exist_ok=True)
        path = OUTPUT_DIR / EXPORT_FILENAME
    else:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

    path.write_text(snapshot_json(state), encoding="utf-8")
    logger.info(f"Wrote dashboard snapshot to {path}")
    return path


def summary_report(state: DashboardState) -> str:
    """Generate a text summary of the dashboard data."""
    data = state.data
    donations = data.get("donationsByYear") or []
    years = [
        r["year"] for r in donations
        if isinstance(r, dict) and isinstance(r.get("year"), int)
    ]
    latest = latest_donation(data)

    lines = [
        "=" * 70,
        "SVP TRANSPARENCY DASHBOARD — DATA SUMMARY",
        f"Generated: {datetime.now().isoformat(timespec='seconds')}",
        f"Last fetched: {state.last_fetched.isoformat(timespec='seconds')}",
        f"Source: {state.source}",
        "=" * 70,
        "",
    ]
    if state.error:
        lines.extend([f"Fetch error (sample data shown): {state.error}", ""])

    lines.extend([
        "── Donations ──",
        f"Years covered: {min(years)}–{max(years)}" if years else "Years covered: none",
        f"Lifetime total: {format_money(donation_total(data))}",
        f"Latest year ({latest.get('year')}): {format_money(latest.get('amount'))}",
        f"YoY growth: {format_pct(yoy_growth(data))}",
        "",
        "── Expenses ──",
        f"Program spend: {format_share(program_ratio(data))}",
        f"Admin + fundraising: {format_share(admin_ratio(data))}",
        "",
        "── Sections ──",
    ])
    for section in SECTION_NAMES:
        records = data.get(section)
        count = len(records) if isinstance(records, list) else 0
        lines.append(f"  {section}: {count:,}")

    lines.extend([
        "",
        f"Partnerships: {active_partnerships(data)} active of {total_partnerships(data)}",
        "",
        "=" * 70,
    ])
    return "\n".join(lines)

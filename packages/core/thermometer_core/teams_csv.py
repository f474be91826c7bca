"""Team totals CSV import."""

from __future__ import annotations

import csv
import io
from dataclasses import replace
from datetime import datetime, timezone
from typing import Iterable

from thermometer_renderer.models import DonationConfig, Team


REQUIRED_COLUMNS = ("name", "image_url", "total_raised")

SAMPLE_CSV = """name,image_url,total_raised
Team Alpha,https://example.com/alpha.jpg,2500.00
Team Beta,https://example.com/beta.jpg,3200.50
Team Gamma,,1800.00
PUP ALL NIGHT: THE PM PACK,,6987.00
UnderDogs,https://example.com/underdogs.png,5010.00
Hairball Wizards,,4101.25"""


class TeamsCsvError(ValueError):
    pass


def parse_teams_csv(text: str) -> list[Team]:
    reader = csv.DictReader(io.StringIO(text))
    missing = [c for c in REQUIRED_COLUMNS if c not in (reader.fieldnames or [])]
    if missing:
        raise TeamsCsvError(f"Missing CSV column(s): {', '.join(missing)}")

    teams: list[Team] = []
    for row in reader:
        raw_total = (row.get("total_raised") or "").strip()
        try:
            total = float(raw_total)
        except ValueError:
            raise TeamsCsvError(f"Line {reader.line_num}: invalid total_raised {raw_total!r}") from None
        teams.append(
            Team(
                name=(row.get("name") or "").strip(),
                image_url=(row.get("image_url") or "").strip() or None,
                total_raised=total,
            )
        )
    return teams


def apply_teams(config: DonationConfig, teams: Iterable[Team]) -> DonationConfig:
    return replace(config, teams=tuple(teams), last_updated=datetime.now(timezone.utc).isoformat())

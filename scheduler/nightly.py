"""Nightly scheduler: precomputes tomorrow's workout suggestion per profile.

Usage:
    python -m scheduler.nightly --once      # single run (for cron)
    python -m scheduler.nightly --daemon    # APScheduler loop
"""

from __future__ import annotations

import argparse
import json
import logging
from datetime import date, timedelta
from pathlib import Path

from workout_engine.exceptions import ValidationError
from workout_engine.models.enums import Focus
from workout_engine.serialization.plan_json import suggestion_to_dict
from workout_engine.suggest.daily import HealthSnapshot, HistoryEntry, suggest_today

from scheduler.config import NIGHTLY_HOUR, NIGHTLY_MINUTE, OUTPUT_PATH, PROFILES_PATH

logger = logging.getLogger(__name__)


def _load_profiles(path: Path) -> list[dict]:
    """Load user profiles from disk."""
    with open(path) as f:
        data = json.load(f)
    return data.get("profiles", []) if isinstance(data, dict) else data


def parse_history(raw: list[dict]) -> list[HistoryEntry]:
    return [
        HistoryEntry(
            day=date.fromisoformat(entry["date"]),
            focus=Focus(entry["focus"]),
            duration_minutes=int(entry["durationMinutes"]),
            intensity=int(entry["intensity"]),
        )
        for entry in raw
    ]


def parse_health(raw: dict | None) -> HealthSnapshot | None:
    if not raw:
        return None
    return HealthSnapshot(
        sleep_score=raw.get("sleepScore"),
        stress=raw.get("stress"),
        hrv=raw.get("hrv"),
        resting_hr=raw.get("restingHr"),
        hrv_baseline=tuple(raw.get("hrvBaseline", ())),
        resting_hr_baseline=tuple(raw.get("restingHrBaseline", ())),
    )


def nightly_job(
    target_day: date | None = None,
    profiles_path: Path = PROFILES_PATH,
    output_path: Path = OUTPUT_PATH,
) -> dict | None:
    """Execute one nightly cycle: load profiles, suggest, write results.

    Args:
        target_day: Day to suggest for; defaults to tomorrow.
        profiles_path: JSON file with the user profiles.
        output_path: Where the suggestions are written.

    Returns:
        The written payload, or None when no profiles could be loaded.
    """
    target_day = target_day or date.today() + timedelta(days=1)
    logger.info("Starting nightly job for %s", target_day.isoformat())

    try:
        profiles = _load_profiles(profiles_path)
    except FileNotFoundError:
        logger.error("Profiles not found at %s", profiles_path)
        return None

    suggestions = []
    for profile in profiles:
        if not isinstance(profile, dict):
            logger.warning("Skipping profile that is not an object: %r", profile)
            continue
        user_id = profile.get("userId", "")
        try:
            suggestion = suggest_today(
                user_id,
                parse_history(profile.get("history", [])),
                target_day,
                health=parse_health(profile.get("health")),
                equipment=profile.get("equipment"),
                constraints=profile.get("constraints"),
            )
        except (KeyError, TypeError, AttributeError, ValueError, ValidationError) as exc:
            logger.warning("Skipping profile %r: %s", user_id, exc)
            continue
        suggestions.append({"userId": user_id, **suggestion_to_dict(suggestion)})
        logger.info(
            "Suggested %s for %s (%d min, intensity %d)",
            suggestion.config.focus.value,
            user_id,
            suggestion.config.duration_minutes,
            suggestion.config.intensity,
        )

    payload = {"date": target_day.isoformat(), "suggestions": suggestions}
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w") as f:
        json.dump(payload, f, indent=2)
    logger.info("Nightly job complete: %d suggestion(s) written to %s", len(suggestions), output_path)
    return payload


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    parser = argparse.ArgumentParser(description="Nightly workout suggestion scheduler")
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("--once", action="store_true", help="Run once and exit")
    group.add_argument("--daemon", action="store_true", help="Run as APScheduler daemon")
    args = parser.parse_args()

    if args.once:
        nightly_job()
    else:
        from apscheduler.schedulers.blocking import BlockingScheduler

        scheduler = BlockingScheduler()
        scheduler.add_job(
            nightly_job,
            "cron",
            hour=NIGHTLY_HOUR,
            minute=NIGHTLY_MINUTE,
            id="nightly_job",
        )
        logger.info(
            "Scheduler started, nightly job at %02d:%02d",
            NIGHTLY_HOUR,
            NIGHTLY_MINUTE,
        )
        try:
            scheduler.start()
        except (KeyboardInterrupt, SystemExit):
            logger.info("Scheduler stopped")


if __name__ == "__main__":
    main()

"""Activity test data builders.

Generates a few weeks of plausible infant-care logs:
- Overnight sleep starting late evening and running past midnight
- Daytime naps
- Nursing roughly every three hours
- A morning pumping session
- Diaper changes and occasional bottle feeds
"""

import random
from datetime import date, datetime, timedelta

from care_rhythm_server.models.activity import ActivityKind, ActivityRecord

# Seed for reproducible tests
random.seed(7)


def at(day: date, minute: int) -> datetime:
    """Timestamp ``minute`` minutes after midnight on ``day``."""
    return datetime(day.year, day.month, day.day) + timedelta(minutes=minute)


def interval(kind: ActivityKind, day: date, minute: int, duration: int) -> ActivityRecord:
    """Interval record starting at ``minute`` on ``day``."""
    return ActivityRecord(kind=kind, timestamp=at(day, minute), duration_minutes=duration)


def instant(kind: ActivityKind, day: date, minute: int) -> ActivityRecord:
    """Instant record occurring at ``minute`` on ``day``."""
    return ActivityRecord(kind=kind, timestamp=at(day, minute))


def seed_activity_log(
    first_day: date,
    days: int = 21,
) -> dict[ActivityKind, list[ActivityRecord]]:
    """Generate ``days`` days of logs starting at ``first_day``."""
    log: dict[ActivityKind, list[ActivityRecord]] = {kind: [] for kind in ActivityKind}

    for offset in range(days):
        day = first_day + timedelta(days=offset)

        # Night sleep from ~20:00 for 6-9 hours (crosses midnight)
        bedtime = 1200 + random.randint(-30, 30)
        log[ActivityKind.SLEEP].append(
            interval(ActivityKind.SLEEP, day, bedtime, random.randint(360, 540))
        )
        # Two naps
        for nap_start in (600, 900):
            start = nap_start + random.randint(-20, 20)
            log[ActivityKind.SLEEP].append(
                interval(ActivityKind.SLEEP, day, start, random.randint(30, 90))
            )

        # Nursing every ~3 hours
        for feed_start in range(60, 1440, 180):
            start = feed_start + random.randint(-15, 15)
            log[ActivityKind.NURSING].append(
                interval(ActivityKind.NURSING, day, start, random.randint(10, 25))
            )

        # Morning pumping session
        log[ActivityKind.PUMPING].append(
            interval(ActivityKind.PUMPING, day, 420, random.randint(15, 20))
        )

        # Diapers after most feeds
        for change in range(90, 1440, 180):
            log[ActivityKind.DIAPER].append(instant(ActivityKind.DIAPER, day, change))

        # Bottle every other day
        if offset % 2 == 0:
            log[ActivityKind.BOTTLE].append(instant(ActivityKind.BOTTLE, day, 1080))

    return log

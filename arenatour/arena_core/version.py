"""
Scoring rule generations.

Arena sheets built from games played before the cutover follow the V1 rules,
which never nulled repeated draws. Everything on or after the cutover is V2.
"""

from datetime import datetime, timezone as dt_timezone
from enum import Enum

from django.utils import timezone


V2_CUTOVER = datetime(2020, 4, 21, 0, 0, 0, tzinfo=dt_timezone.utc)


class Version(Enum):
    V1 = 1
    V2 = 2

    @classmethod
    def of(cls, date: datetime) -> "Version":
        """Select the rule generation in force at `date`.

        Naive datetimes are read as UTC.
        """
        if timezone.is_naive(date):
            date = timezone.make_aware(date, dt_timezone.utc)
        return cls.V1 if date < V2_CUTOVER else cls.V2

from datetime import UTC, date, datetime


class SystemClock:
    def today(self) -> date:
        """Current UTC calendar date."""
        return self.now_utc().date()

    def now_utc(self) -> datetime:
        return datetime.now(UTC)

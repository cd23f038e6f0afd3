"""Calendar and curve defaults."""

# Day-count base applied when a caller does not specify one.
DEFAULT_DAYCOUNT_BASE: str = "ACT/365"

# Zone used to resolve civil dates (weekday, holiday checks).
# None means the platform local time zone (dateutil.tz.gettz(None)).
CIVIL_TIMEZONE: str | None = None

# Column names of the canonical long curve table.
COL_INDEX: str = "IndexName"
COL_TENOR: str = "Tenor"
COL_X: str = "YearFrac"
COL_Y: str = "Rate"

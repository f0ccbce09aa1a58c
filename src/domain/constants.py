"""Domain constants for calendar allocation."""

DAYS_PER_WEEK = 7

# Every normalized date carries this hour so day differences never straddle
# a midnight shifted by a daylight-saving transition.
NORMALIZED_HOUR = 12

DATE_FORMAT = "%Y-%m-%d"

MONTH_LABELS = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)

MISSING_DATES_ERROR = "Start and end dates are required."
INVERTED_RANGE_ERROR = "Start date must be on/before end date."


__all__ = [
    "DAYS_PER_WEEK",
    "NORMALIZED_HOUR",
    "DATE_FORMAT",
    "MONTH_LABELS",
    "MISSING_DATES_ERROR",
    "INVERTED_RANGE_ERROR",
]

"""Date parsing utilities."""

from datetime import date, timedelta
from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta, weekday, MO, TU, WE, TH, FR, SA, SU

WEEKDAYS: dict[str, weekday] = {
    "monday": MO,
    "tuesday": TU,
    "wednesday": WE,
    "thursday": TH,
    "friday": FR,
    "saturday": SA,
    "sunday": SU,
}


def parse_date(date_str: str, today: date | None = None) -> date:
    """Parse a date string into a date object.

    Supports:
    - ISO dates: "2024-01-15"
    - Other absolute dates, day first: "15/01/2024", "15 Jan 2024"
    - Relative days: "today", "yesterday", "tomorrow", "3 days ago"
    - Weekdays: "last friday" (the most recent Friday before today)

    Args:
        date_str: Date string
        today: Reference day for relative dates (defaults to date.today())

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    text = date_str.strip().lower()
    today = today or date.today()

    relative_days = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
    }
    if text in relative_days:
        return relative_days[text]

    if text.endswith(" days ago") or text.endswith(" day ago"):
        count = text.split(" ", 1)[0]
        if count.isdigit():
            return today - timedelta(days=int(count))

    if text.startswith("last ") and text[5:] in WEEKDAYS:
        # relativedelta(weekday=FR(-1)) keeps today if it is a Friday
        return today - timedelta(days=1) + relativedelta(weekday=WEEKDAYS[text[5:]](-1))

    try:
        return date.fromisoformat(text)
    except ValueError:
        pass

    try:
        return date_parser.parse(text, dayfirst=True).date()
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")

from datetime import date, datetime

import pytz


def to_date(value) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


def to_local_datetime(value, time_zone: str) -> datetime:
    """Parse a Todoist timestamp and convert it to the given time zone. Naive values are treated as UTC."""
    if not isinstance(value, datetime):
        value = datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    if value.tzinfo is None:
        value = pytz.utc.localize(value)
    return value.astimezone(pytz.timezone(time_zone))


def get_scheduled_date_day(value) -> str:
    """e.g. 'SCHEDULED: <2024-01-15 Mon>'"""
    day = to_date(value)
    return f"SCHEDULED: <{day.strftime('%Y-%m-%d %a')}>"


def get_date_for_page(value: datetime, page_date_format: str) -> str:
    return f"[[{get_date_for_page_without_brackets(value, page_date_format)}]]"


def get_date_for_page_without_brackets(value: datetime, page_date_format: str) -> str:
    return value.strftime(page_date_format)

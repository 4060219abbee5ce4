from todoist_api_python.models import Task, Due

from config import Settings
from logseq_dates import (get_date_for_page, get_date_for_page_without_brackets, get_scheduled_date_day,
                          to_local_datetime)

TODO_MARKER = "TODO"


def format_content(content: str, url: str, due: Due | None, created_at, settings: Settings) -> str:
    """
    Decorate task text according to the retrieve settings.
    Steps are applied in order: url link, due date, creation date/time prefix, TODO marker.
    """
    treated_content = content
    if settings.retrieve_append_url:
        treated_content = f"[{treated_content}]({url})"
    if due is not None and due.date:
        treated_content = f"{treated_content}\n{get_scheduled_date_day(due.date)}"
    if settings.retrieve_append_creation_date_time:
        creation_date = to_local_datetime(created_at, settings.time_zone)
        date_part = get_date_for_page(creation_date, settings.page_date_format)
        time_part = get_date_for_page_without_brackets(creation_date, "%H:%M")
        treated_content = f"{date_part} **{time_part}** {treated_content}"
    if settings.retrieve_append_todo:
        # Logseq only recognises the marker at the very start of the block
        treated_content = f"{TODO_MARKER} {treated_content}"
    return treated_content


def format_task(task: Task, settings: Settings) -> str:
    content = format_content(task.content, task.url, task.due, task.created_at, settings)
    if task.description:
        content += f": {task.description}"
    return content

import logging
import re

from todoist_api_python.api import TodoistAPI
from todoist_api_python.models import Task, Comment

_LOG = logging.getLogger(__name__)

# Project settings are stored as "<name> (<id>)", e.g. "Inbox (2203306141)"
PROJECT_STRING_PATTERN = re.compile(r"^(?P<name>.*?)\s*\((?P<id>[^()]+)\)\s*$")


def get_id_from_string(project: str) -> str:
    match = PROJECT_STRING_PATTERN.match(project)
    return match.group('id') if match else project.strip()


def get_name_from_string(project: str) -> str:
    match = PROJECT_STRING_PATTERN.match(project)
    return match.group('name') if match else project.strip()


class TodoistFetcher:
    def __init__(self, api_token: str):
        self.todoist_api = TodoistAPI(token=api_token)

    def get_project_tasks(self, project_id: str) -> list[Task]:
        tasks = [task for page in self.todoist_api.get_tasks(project_id=project_id) for task in page]
        _LOG.debug(f"Received {len(tasks)} tasks for {project_id=}")
        return tasks

    def get_filtered_tasks(self, query: str) -> list[Task]:
        tasks = [task for page in self.todoist_api.filter_tasks(query=query) for task in page]
        _LOG.debug(f"Received {len(tasks)} tasks for filter '{query}'")
        return tasks

    def get_comments(self, task_id: str) -> list[Comment]:
        return [comment for page in self.todoist_api.get_comments(task_id=task_id) for comment in page]

    def delete_task(self, task_id: str) -> bool:
        return self.todoist_api.delete_task(task_id)

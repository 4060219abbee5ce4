"""
Pytest configuration and shared fixtures for Todoist -> Logseq retrieve tests.
"""

from datetime import datetime, date, timezone
from typing import List, Optional
from unittest.mock import MagicMock

import pytest
from todoist_api_python.models import Task, Comment, Due, Attachment

from config import Settings


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: mark test as integration test"
    )


@pytest.fixture
def settings():
    """Settings with every content decoration switched off."""
    return Settings(api_token="token", retrieve_default_project="Inbox (2203306141)",
                    retrieve_append_todo=False)


@pytest.fixture
def mock_task_factory():
    """Factory for creating mock Todoist Task objects."""
    def _create_mock_task(task_id: str, parent_id: Optional[str] = None,
                          content: str = None, **kwargs) -> Task:
        mock_task = MagicMock(spec=Task)
        mock_task.id = task_id
        mock_task.parent_id = parent_id
        mock_task.content = content or f"Task {task_id}"
        mock_task.description = ""
        mock_task.url = f"https://app.todoist.com/app/task/{task_id}"
        mock_task.due = None
        mock_task.created_at = datetime(2024, 1, 15, 9, 30, tzinfo=timezone.utc)

        # Set additional attributes
        for key, value in kwargs.items():
            setattr(mock_task, key, value)

        return mock_task
    return _create_mock_task


@pytest.fixture
def due_factory():
    def _create_due(day: date) -> Due:
        mock_due = MagicMock(spec=Due)
        mock_due.date = day
        return mock_due
    return _create_due


@pytest.fixture
def comment_factory():
    """Factory for creating mock Todoist Comment objects."""
    def _create_comment(content: str = "", file_name: str = None, file_url: str = None,
                        has_attachment: bool = None) -> Comment:
        mock_comment = MagicMock(spec=Comment)
        mock_comment.content = content
        if has_attachment is None:
            has_attachment = bool(file_name or file_url)
        if has_attachment:
            mock_comment.attachment = MagicMock(spec=Attachment)
            mock_comment.attachment.file_name = file_name
            mock_comment.attachment.file_url = file_url
        else:
            mock_comment.attachment = None
        return mock_comment
    return _create_comment


@pytest.fixture
def hierarchy_builder(mock_task_factory):
    """Builder for flat task lists from (task_id, parent_id) pairs, keeping the given order."""
    def _build_hierarchy(pairs: List[tuple]) -> List[Task]:
        return [mock_task_factory(task_id, parent_id) for task_id, parent_id in pairs]

    return _build_hierarchy


@pytest.fixture
def todoist_fetcher():
    fetcher = MagicMock()
    fetcher.get_comments.return_value = []
    return fetcher


@pytest.fixture
def ui():
    return MagicMock()

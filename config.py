import os
from dataclasses import dataclass
from enum import Enum

from dotenv import load_dotenv

load_dotenv()

NO_PROJECT_SELECTED = "--- ---"
DEFAULT_PAGE_DATE_FORMAT = "%A, %d.%m.%Y"


class CommentFailurePolicy(Enum):
    PLACEHOLDER = 'placeholder'  # Keep the block without comment metadata
    SKIP = 'skip'  # Drop the block together with its subtasks
    ABORT = 'abort'  # Stop building the tree


@dataclass(frozen=True)
class Settings:
    api_token: str | None = None
    retrieve_default_project: str = NO_PROJECT_SELECTED
    retrieve_clear_tasks: bool = False
    project_name_as_parent_blk: bool = False
    retrieve_append_url: bool = False
    retrieve_append_todo: bool = True
    retrieve_append_creation_date_time: bool = False
    comment_failure_policy: CommentFailurePolicy = CommentFailurePolicy.PLACEHOLDER
    page_date_format: str = DEFAULT_PAGE_DATE_FORMAT
    time_zone: str = "UTC"
    logseq_api_url: str = "http://127.0.0.1:12315"
    logseq_token: str = ""


def _get_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


def load_settings() -> Settings:
    """Read settings from the environment at invocation time."""
    return Settings(
        api_token=os.getenv("TODOIST_TOKEN"),
        retrieve_default_project=os.getenv("RETRIEVE_DEFAULT_PROJECT", NO_PROJECT_SELECTED),
        retrieve_clear_tasks=_get_bool("RETRIEVE_CLEAR_TASKS", False),
        project_name_as_parent_blk=_get_bool("PROJECT_NAME_AS_PARENT_BLK", False),
        retrieve_append_url=_get_bool("RETRIEVE_APPEND_URL", False),
        retrieve_append_todo=_get_bool("RETRIEVE_APPEND_TODO", True),
        retrieve_append_creation_date_time=_get_bool("RETRIEVE_APPEND_CREATION_DATE_TIME", False),
        comment_failure_policy=CommentFailurePolicy(
            os.getenv("COMMENT_FAILURE_POLICY", CommentFailurePolicy.PLACEHOLDER.value).lower()),
        page_date_format=os.getenv("PAGE_DATE_FORMAT", DEFAULT_PAGE_DATE_FORMAT),
        time_zone=os.getenv("T_ZONE", "UTC"),
        logseq_api_url=os.getenv("LOGSEQ_API_URL", "http://127.0.0.1:12315"),
        logseq_token=os.getenv("LOGSEQ_TOKEN", ""),
    )

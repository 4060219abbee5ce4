import logging

from todoist_api_python.models import Task
from tqdm import tqdm

from config import Settings, NO_PROJECT_SELECTED
from logseq_api import LogseqApi
from models import BlockToInsert
from task_tree import CommentEnricher, TaskTreeBuilder
from todoist_utils import TodoistFetcher, get_id_from_string, get_name_from_string

_LOG = logging.getLogger(__name__)


class TodoistRetrieveManager:
    def __init__(self, settings: Settings, todoist_fetcher: TodoistFetcher = None, logseq: LogseqApi = None):
        self.settings = settings
        self.todoist_fetcher = todoist_fetcher or TodoistFetcher(settings.api_token)
        self.logseq = logseq or LogseqApi(token=settings.logseq_token, api_endpoint=settings.logseq_api_url)
        self.tree_builder = TaskTreeBuilder(settings, CommentEnricher(self.todoist_fetcher, self.logseq.ui))

    def retrieve_tasks(self, uuid: str, task_params: str = None) -> None:
        """Insert Todoist tasks as blocks in place of the block with the given uuid."""
        msg_key = self.logseq.ui.show_msg("Loading tasks...")
        try:
            all_tasks = self._insert_tasks(uuid, task_params)
        finally:
            if msg_key:
                self.logseq.ui.close_msg(msg_key)

        # 3. Clear retrieved tasks in Todoist
        if all_tasks and self.settings.retrieve_clear_tasks:
            self.delete_all_tasks(all_tasks)

    def _insert_tasks(self, uuid: str, task_params: str = None) -> list[Task]:
        """Returns the inserted tasks, or an empty list when nothing was inserted."""
        # 1. Get tasks from Todoist
        if not task_params:
            if self.settings.retrieve_default_project == NO_PROJECT_SELECTED:
                _LOG.error("No default project selected")
                self.logseq.ui.show_msg("Please select a default project", 'error')
                return []
            all_tasks = self.todoist_fetcher.get_project_tasks(
                get_id_from_string(self.settings.retrieve_default_project))
        else:
            all_tasks = self.todoist_fetcher.get_filtered_tasks(task_params)
        _LOG.info(f"Fetched {len(all_tasks)} tasks from Todoist.")

        if not all_tasks:
            self.logseq.ui.show_msg("There are no tasks")
            return []

        # 2. Build the block tree and insert it
        batch = self.tree_builder.build_tree(all_tasks)
        self._insert_blocks(uuid, batch, task_params)
        return all_tasks

    def _insert_blocks(self, uuid: str, batch: list[BlockToInsert], task_params: str = None) -> None:
        if self.settings.project_name_as_parent_blk:
            self.logseq.editor.update_block(uuid, f"[[{self._parent_block_name(task_params)}]]")
            self.logseq.editor.insert_batch_block(uuid, batch, sibling=False)
        else:
            self.logseq.editor.insert_batch_block(uuid, batch)
            self.logseq.editor.remove_block(uuid)
        self.logseq.editor.exit_editing_mode(True)
        _LOG.info(f"Inserted {len(batch)} top level blocks into {uuid}")

    def _parent_block_name(self, task_params: str = None) -> str:
        if self.settings.retrieve_default_project == NO_PROJECT_SELECTED and task_params:
            return task_params
        return get_name_from_string(self.settings.retrieve_default_project)

    def delete_all_tasks(self, tasks: list[Task]) -> int:
        """Delete tasks one by one, stopping at the first failure. Returns the number of deleted tasks."""
        deleted = 0
        for task in tqdm(tasks, desc="Deleting tasks", unit="task"):
            try:
                self.todoist_fetcher.delete_task(task.id)
            except Exception as e:
                _LOG.error(f"Failed to delete task {task.id} after {deleted} deletions: {e}")
                self.logseq.ui.show_msg(f"Error deleting tasks: {e}", 'error')
                return deleted
            deleted += 1
        _LOG.info(f"Deleted {deleted} tasks from Todoist.")
        return deleted

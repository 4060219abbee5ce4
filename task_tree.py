import logging
from collections import defaultdict

from todoist_api_python.models import Task
from tqdm import tqdm

from block_formatter import format_task
from config import Settings, CommentFailurePolicy
from models import BlockProperties, BlockToInsert, EnrichmentResult
from todoist_utils import TodoistFetcher
from logseq_api.ui import UIManager

_LOG = logging.getLogger(__name__)

COMMENTS_SEPARATOR = ", "


class CommentFetchError(Exception):
    def __init__(self, task_id: str, cause: Exception):
        super().__init__(f"Unable to retrieve comments for task {task_id}: {cause}")
        self.task_id = task_id
        self.cause = cause


class CommentEnricher:
    def __init__(self, todoist_fetcher: TodoistFetcher, ui: UIManager):
        self.todoist_fetcher = todoist_fetcher
        self.ui = ui

    def enrich(self, task_id: str, block: BlockToInsert) -> EnrichmentResult:
        """Merge comments and attachments of the task into the block properties."""
        try:
            comments = self.todoist_fetcher.get_comments(task_id)
        except Exception as e:
            _LOG.error(f"Failed to fetch comments for task {task_id}: {e}")
            self.ui.show_msg(f"Unable to retrieve comments: {e}", 'error')
            return EnrichmentResult(block=block, error=e)

        for comment in comments:
            attachment = comment.attachment
            if attachment and attachment.file_url:
                block.properties.attachments = f"[{attachment.file_name or attachment.file_url}]({attachment.file_url})"
            if comment.content:
                append_comment(block.properties, comment.content)
        return EnrichmentResult(block=block)


def append_comment(properties: BlockProperties, content: str) -> None:
    if properties.comments:
        properties.comments = f"{properties.comments}{COMMENTS_SEPARATOR}{content}"
    else:
        properties.comments = content


class TaskTreeBuilder:
    """
    Turns the flat task list returned by Todoist into nested Logseq blocks.

    Children are grouped by parent id in one pass and the tree is assembled by a
    single walk from the roots, so sibling order always follows the input order.
    Tasks whose parent is not part of the input are dropped. Self-parented or cyclic
    tasks are never reachable from a root and are dropped as well.
    """

    def __init__(self, settings: Settings, enricher: CommentEnricher):
        self.settings = settings
        self.enricher = enricher

    def build_tree(self, tasks: list[Task]) -> list[BlockToInsert]:
        known_ids = {task.id for task in tasks}
        children_by_parent: dict[str, list[Task]] = defaultdict(list)
        roots = []
        for task in tasks:
            if not task.parent_id:
                roots.append(task)
            elif task.parent_id in known_ids:
                children_by_parent[task.parent_id].append(task)
            else:
                _LOG.warning(f"Task '{task.content}' ({task.id}) references unknown parent {task.parent_id}, skipping")

        total = sum(count_subtree(root, children_by_parent) for root in roots)
        with tqdm(total=total, desc="Fetching comments", unit="task") as progress:
            return self._build_blocks(roots, children_by_parent, progress)

    def _build_blocks(self, tasks: list[Task], children_by_parent: dict[str, list[Task]],
                      progress: tqdm) -> list[BlockToInsert]:
        blocks = []
        for task in tasks:
            block = self._create_block(task)
            if block is None:
                progress.update(count_subtree(task, children_by_parent))
                continue
            progress.update()
            block.children = self._build_blocks(children_by_parent.get(task.id, []), children_by_parent, progress)
            blocks.append(block)
        return blocks

    def _create_block(self, task: Task) -> BlockToInsert | None:
        block = BlockToInsert(content=format_task(task, self.settings),
                              properties=BlockProperties(todoistid=task.id))
        result = self.enricher.enrich(task.id, block)
        if result.ok:
            return result.block

        policy = self.settings.comment_failure_policy
        if policy == CommentFailurePolicy.ABORT:
            raise CommentFetchError(task.id, result.error)
        if policy == CommentFailurePolicy.SKIP:
            _LOG.warning(f"Skipping task '{task.content}' ({task.id}) and its subtasks")
            return None
        return result.block


def count_subtree(task: Task, children_by_parent: dict[str, list[Task]]) -> int:
    """Number of tasks in the subtree rooted at the given task, itself included."""
    return 1 + sum(count_subtree(child, children_by_parent) for child in children_by_parent.get(task.id, []))

# todo_state.py

import functools
from datetime import datetime

import config
from logging_utils import get_logger
from persistence import PersistenceError
from task_model import Filter, Importance, SavedState, Task

logger = get_logger()


def message(handler):
    """
    Wraps a UI message handler: ignored while the saved tasks are still loading,
    and followed by the autosave bookkeeping. The wrapped call returns a
    SavedState snapshot when a save should be started, otherwise None.
    """
    @functools.wraps(handler)
    def wrapper(self, *args, **kwargs):
        if self.loading:
            return None
        handler(self, *args, **kwargs)
        return self._after_message(saved=False)
    return wrapper


class TodoState:
    """
    In-memory application state plus the dirty/saving flag pair behind autosave.
    At most one save is in flight; changes made meanwhile are picked up by a single
    follow-up save once the in-flight one reports back through `saved()`.
    """
    def __init__(self, clock=None):
        self.clock = clock or datetime.now
        self.loading = True
        self.tasks = []
        self.input_value = ""
        self.filter = Filter.ALL
        self.filter_text = ""
        self.selected_importance = None
        self.dirty = False
        self.saving = False
        self.focus_request = None

    def title(self):
        return f"{config.APPLICATION_NAME}{'*' if self.dirty else ''} - PyQt5"

    def snapshot(self):
        return SavedState(
            self.input_value,
            self.filter,
            [Task.from_dict(task.to_dict()) for task in self.tasks],
        )

    def task(self, index):
        if 0 <= index < len(self.tasks):
            return self.tasks[index]
        return None

    def take_focus_request(self):
        """
        Index of the task that was just put into edit mode, or None. Cleared on read
        so later redraws do not move keyboard focus back to that row.
        """
        index, self.focus_request = self.focus_request, None
        return index

    def loaded(self, result):
        """
        Leaves the loading phase. Any load error means starting with an empty list.
        """
        if not self.loading:
            return
        self.loading = False
        if isinstance(result, SavedState):
            self.input_value = result.input_value
            self.filter = result.filter
            self.tasks = list(result.tasks)
        else:
            if isinstance(result, PersistenceError):
                logger.info("Starting with an empty task list (%s)", result.kind.value)
            self.tasks = []
            self.input_value = ""
            self.filter = Filter.ALL

    def saved(self, result):
        if self.loading:
            return None
        self.saving = False
        if isinstance(result, PersistenceError):
            logger.warning("Tasks kept in memory only, save failed: %s", result.message)
        return self._after_message(saved=True)

    def _after_message(self, saved):
        if not saved:
            self.dirty = True
        if self.dirty and not self.saving:
            self.dirty = False
            self.saving = True
            return self.snapshot()
        return None

    def _new_task(self, description, file_path):
        self.tasks.append(Task(
            description,
            file_path,
            self.clock().strftime(config.TASK_DATE_FORMAT),
            self.selected_importance or Importance.NORMAL,
        ))
        self.input_value = ""

    @message
    def input_changed(self, value):
        self.input_value = value

    @message
    def create_task(self):
        if self.input_value:
            self._new_task(self.input_value, "")

    @message
    def file_dropped(self, path):
        logger.info("File dropped: %s", path)
        self._new_task(self.input_value, str(path))

    @message
    def filter_changed(self, new_filter):
        self.filter = Filter(new_filter)

    @message
    def filter_text_changed(self, value):
        self.filter_text = value

    @message
    def importance_changed(self, importance):
        self.selected_importance = Importance(importance)

    @message
    def task_completed(self, index, completed):
        task = self.task(index)
        if task:
            task.set_completed(completed)

    @message
    def edit_task(self, index):
        task = self.task(index)
        if task:
            task.start_editing()
            self.focus_request = index

    @message
    def description_edited(self, index, new_description):
        task = self.task(index)
        if task:
            task.edit_description(new_description)

    @message
    def finish_edition(self, index):
        task = self.task(index)
        if task:
            task.finish_editing()

    @message
    def delete_task(self, index):
        if self.task(index):
            del self.tasks[index]

    @message
    def open_file(self, index, opener):
        task = self.task(index)
        if task and task.file_path:
            opener(task.file_path)

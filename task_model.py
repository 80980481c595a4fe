# task_model.py

from enum import Enum


class Importance(str, Enum):
    LOW = "Low"
    NORMAL = "Normal"
    HIGH = "High"

    @classmethod
    def all(cls):
        return [cls.LOW, cls.NORMAL, cls.HIGH]

    def __str__(self):
        return self.value


class Filter(str, Enum):
    ALL = "All"
    ACTIVE = "Active"
    COMPLETED = "Completed"

    def matches(self, task):
        """
        True if the task belongs in this status view.
        """
        if self is Filter.ACTIVE:
            return not task.completed
        if self is Filter.COMPLETED:
            return task.completed
        return True

    def word_matches(self, task, text):
        """
        True if `text` appears in the task description. Case-sensitive; an empty
        filter text matches every task.
        """
        return text in task.description

    def empty_message(self):
        return EMPTY_MESSAGES[self]


EMPTY_MESSAGES = {
    Filter.ALL: "You do not have any tasks yet...",
    Filter.ACTIVE: "All your tasks are done! :D",
    Filter.COMPLETED: "You have not completed a task yet...",
}


class TaskState(Enum):
    # UI-only, never written to disk
    IDLE = "idle"
    EDITING = "editing"


class Task:
    """
    Represents a single to-do entry.
    Holds the description, an optional attached file path ("" when nothing is attached),
    the completion flag, the creation timestamp text and the importance level.
    """
    def __init__(self, description, file_path="", date="", importance=Importance.NORMAL, completed=False):
        self.description = description
        self.file_path = file_path
        self.completed = completed
        self.date = date
        self.importance = Importance(importance)
        self.state = TaskState.IDLE

    def __eq__(self, other):
        if not isinstance(other, Task):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self):
        return (f"Task(description={self.description!r}, file_path={self.file_path!r}, "
                f"completed={self.completed!r}, date={self.date!r}, importance={self.importance.value!r})")

    @property
    def is_editing(self):
        return self.state is TaskState.EDITING

    def set_completed(self, completed):
        self.completed = bool(completed)

    def start_editing(self):
        self.state = TaskState.EDITING

    def edit_description(self, new_description):
        self.description = new_description

    def finish_editing(self):
        """
        Leaves edit mode. A task cannot go back to idle with an empty description.
        Returns True if the task is idle afterwards.
        """
        if self.description:
            self.state = TaskState.IDLE
        return self.state is TaskState.IDLE

    def file_name(self):
        if not self.file_path:
            return ""
        return self.file_path.replace("\\", "/").rstrip("/").rsplit("/", 1)[-1]

    def file_extension(self):
        name = self.file_name()
        stem, dot, extension = name.rpartition(".")
        if not dot or not stem:
            return ""
        return extension

    def to_dict(self):
        """
        Converts the task to a dictionary for JSON serialization.
        The editing state is not persisted.
        """
        return {
            "description": self.description,
            "file_path": self.file_path,
            "completed": self.completed,
            "date": self.date,
            "importance": self.importance.value,
        }

    @classmethod
    def from_dict(cls, data):
        """
        Creates a Task from a dictionary loaded from JSON.
        Uses .get() for optional fields to handle older data gracefully;
        raises KeyError, TypeError or ValueError on data that is not a task.
        """
        if not isinstance(data, dict):
            raise TypeError(f"Task entry must be an object, got {type(data).__name__}")
        description = data["description"]
        file_path = data.get("file_path", "")
        completed = data.get("completed", False)
        date = data.get("date", "")
        if not isinstance(description, str) or not isinstance(file_path, str) or not isinstance(date, str):
            raise TypeError("Task description, file_path and date must be strings")
        if not isinstance(completed, bool):
            raise TypeError("Task completed flag must be a boolean")
        return cls(
            description,
            file_path,
            date,
            Importance(data.get("importance", Importance.NORMAL.value)),
            completed,
        )


class SavedState:
    """
    Everything that survives a restart: the task list, the last input text and the filter.
    """
    def __init__(self, input_value="", current_filter=Filter.ALL, tasks=None):
        self.input_value = input_value
        self.filter = Filter(current_filter)
        self.tasks = tasks if tasks is not None else []

    def __eq__(self, other):
        if not isinstance(other, SavedState):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self):
        return f"SavedState(input_value={self.input_value!r}, filter={self.filter.value!r}, tasks={self.tasks!r})"

    def to_dict(self):
        return {
            "input_value": self.input_value,
            "filter": self.filter.value,
            "tasks": [task.to_dict() for task in self.tasks],
        }

    @classmethod
    def from_dict(cls, data):
        if not isinstance(data, dict):
            raise TypeError(f"Saved state must be an object, got {type(data).__name__}")
        input_value = data.get("input_value", "")
        tasks_data = data.get("tasks", [])
        if not isinstance(input_value, str):
            raise TypeError("input_value must be a string")
        if not isinstance(tasks_data, list):
            raise TypeError("tasks must be a list")
        return cls(
            input_value,
            Filter(data.get("filter", Filter.ALL.value)),
            [Task.from_dict(task_dict) for task_dict in tasks_data],
        )


def visible_tasks(tasks, current_filter, filter_text):
    """
    Returns (index, task) pairs for the tasks shown under the status filter and keyword.
    Indexes refer to positions in the full task list.
    """
    return [
        (i, task) for i, task in enumerate(tasks)
        if current_filter.matches(task) and current_filter.word_matches(task, filter_text)
    ]


def tasks_left_label(tasks):
    tasks_left = sum(1 for task in tasks if not task.completed)
    return f"{tasks_left} {'task' if tasks_left == 1 else 'tasks'} left"

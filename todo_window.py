# todo_window.py
import os

# PyQt5 imports
from PyQt5.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLineEdit, QPushButton, QLabel,
    QCheckBox, QRadioButton, QButtonGroup, QScrollArea, QFrame, QStackedWidget,
    QSizePolicy
)
from PyQt5.QtCore import Qt, QSize

# Local module imports
import config
import persistence
from logging_utils import get_logger
from persistence import SaveError
from task_model import Filter, Importance, tasks_left_label, visible_tasks
from todo_state import TodoState
from ui_components import STYLESHEET, create_label, file_icon, open_with_default_app
from workers import LoadWorker, SaveWorker

logger = get_logger()


class TaskWidget(QFrame):
    """
    One row of the task list. Built from a Task and its index in the full list;
    every user action is forwarded to the window as a message for that index.
    """
    def __init__(self, index, task, todo_window):
        super().__init__()
        self.index = index
        self.task = task
        self.todo_window = todo_window
        self.setObjectName("taskRow")

        if task.is_editing:
            self.init_editing_ui()
        else:
            self.init_idle_ui()

    def init_idle_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(10, 10, 10, 10)
        layout.setSpacing(5)

        top_row = QHBoxLayout()
        top_row.setSpacing(20)
        self.checkbox = QCheckBox(self.task.description)
        self.checkbox.setChecked(self.task.completed)
        self.checkbox.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        self.checkbox.toggled.connect(lambda checked: self.todo_window.dispatch(
            self.todo_window.state.task_completed(self.index, checked)))
        top_row.addWidget(self.checkbox)

        self.edit_button = QPushButton("Edit")
        self.edit_button.setObjectName("iconButton")
        self.edit_button.clicked.connect(lambda: self.todo_window.dispatch(
            self.todo_window.state.edit_task(self.index)))
        top_row.addWidget(self.edit_button)
        layout.addLayout(top_row)

        file_row = QHBoxLayout()
        file_row.setSpacing(5)
        self.open_file_button = QPushButton()
        self.open_file_button.setObjectName("iconButton")
        self.open_file_button.setIcon(file_icon(self.task.file_extension()))
        self.open_file_button.setIconSize(QSize(config.FILE_ICON_SIZE, config.FILE_ICON_SIZE))
        self.open_file_button.setFixedSize(config.FILE_ICON_SIZE + 10, config.FILE_ICON_SIZE + 10)
        self.open_file_button.setEnabled(bool(self.task.file_path))
        self.open_file_button.clicked.connect(lambda: self.todo_window.dispatch(
            self.todo_window.state.open_file(self.index, open_with_default_app)))
        file_row.addWidget(self.open_file_button)
        self.file_name_label = create_label(self.task.file_name(), "fileNameLabel")
        file_row.addWidget(self.file_name_label)
        file_row.addStretch()
        layout.addLayout(file_row)

        self.importance_label = create_label(str(self.task.importance), f"importance_{self.task.importance}")
        layout.addWidget(self.importance_label)

        self.date_label = create_label(self.task.date, "dateLabel")
        layout.addWidget(self.date_label, alignment=Qt.AlignRight)

    def init_editing_ui(self):
        layout = QHBoxLayout(self)
        layout.setContentsMargins(10, 10, 10, 10)
        layout.setSpacing(20)

        self.description_input = QLineEdit(self.task.description)
        self.description_input.setPlaceholderText(config.EDIT_PLACEHOLDER)
        self.description_input.textEdited.connect(lambda text: self.todo_window.dispatch(
            self.todo_window.state.description_edited(self.index, text), rebuild_rows=False))
        self.description_input.returnPressed.connect(lambda: self.todo_window.dispatch(
            self.todo_window.state.finish_edition(self.index)))
        layout.addWidget(self.description_input)

        self.delete_button = QPushButton("Delete")
        self.delete_button.setObjectName("dangerButton")
        self.delete_button.clicked.connect(lambda: self.todo_window.dispatch(
            self.todo_window.state.delete_task(self.index)))
        layout.addWidget(self.delete_button)


class TodoWindow(QWidget):
    """
    Main window: task input, importance selector, keyword filter, status filter
    buttons and the task list. Files dropped on the window become tasks.
    The widgets are rebuilt from TodoState after each message.
    """
    def __init__(self, data_path=None, save_cooldown=config.SAVE_COOLDOWN_SECONDS, clock=None, autoload=True):
        super().__init__()
        self.data_path = data_path
        self.save_cooldown = save_cooldown
        self.state = TodoState(clock)
        self.workers = []

        self.setWindowTitle(self.state.title())
        self.setGeometry(*config.WINDOW_GEOMETRY)
        self.setAcceptDrops(True)

        self.init_ui()
        self.apply_stylesheet()
        if autoload:
            self.start_loading()

    def init_ui(self):
        main_layout = QVBoxLayout()
        main_layout.setContentsMargins(0, 0, 0, 0)
        self.setLayout(main_layout)

        self.pages = QStackedWidget()
        main_layout.addWidget(self.pages)

        # --- Loading page ---
        self.loading_label = create_label("Loading...", "loadingMessage")
        self.loading_label.setAlignment(Qt.AlignCenter)
        self.pages.addWidget(self.loading_label)

        # --- Task page ---
        self.scroll_area = QScrollArea()
        self.scroll_area.setWidgetResizable(True)
        self.pages.addWidget(self.scroll_area)

        scroll_content = QWidget()
        outer_layout = QHBoxLayout(scroll_content)
        outer_layout.setContentsMargins(40, 40, 40, 40)
        self.scroll_area.setWidget(scroll_content)

        self.content_frame = QFrame()
        self.content_frame.setObjectName("content")
        self.content_frame.setMaximumWidth(config.CONTENT_MAX_WIDTH)
        outer_layout.addWidget(self.content_frame)

        content_layout = QVBoxLayout(self.content_frame)
        content_layout.setContentsMargins(20, 20, 20, 20)
        content_layout.setSpacing(20)

        content_layout.addWidget(create_label("todos", "h1"), alignment=Qt.AlignCenter)

        self.task_input = QLineEdit()
        self.task_input.setObjectName("taskInput")
        self.task_input.setPlaceholderText(config.INPUT_PLACEHOLDER)
        self.task_input.textEdited.connect(lambda text: self.dispatch(
            self.state.input_changed(text), rebuild_rows=False))
        self.task_input.returnPressed.connect(lambda: self.dispatch(self.state.create_task()))
        content_layout.addWidget(self.task_input)

        # Importance selector
        importance_layout = QHBoxLayout()
        importance_layout.setSpacing(5)
        self.importance_group = QButtonGroup(self)
        self.importance_buttons = {}
        for importance in Importance.all():
            button = QRadioButton(importance.value)
            button.clicked.connect(lambda _checked, value=importance: self.dispatch(
                self.state.importance_changed(value), rebuild_rows=False))
            self.importance_group.addButton(button)
            self.importance_buttons[importance] = button
            importance_layout.addWidget(button)
        importance_layout.addStretch()
        content_layout.addLayout(importance_layout)

        self.filter_input = QLineEdit()
        self.filter_input.setPlaceholderText(config.FILTER_PLACEHOLDER)
        self.filter_input.textEdited.connect(lambda text: self.dispatch(self.state.filter_text_changed(text)))
        content_layout.addWidget(self.filter_input)

        # Controls: tasks left and status filter buttons
        controls_layout = QHBoxLayout()
        controls_layout.setSpacing(20)
        self.tasks_left_label = QLabel("")
        controls_layout.addWidget(self.tasks_left_label, 1)
        self.filter_buttons = {}
        for task_filter in Filter:
            button = QPushButton(task_filter.value)
            button.setObjectName("filterButton")
            button.clicked.connect(lambda _checked, value=task_filter: self.dispatch(
                self.state.filter_changed(value)))
            self.filter_buttons[task_filter] = button
            controls_layout.addWidget(button)
        content_layout.addLayout(controls_layout)

        # Task list
        self.task_list_layout = QVBoxLayout()
        self.task_list_layout.setSpacing(20)
        content_layout.addLayout(self.task_list_layout)
        content_layout.addStretch()

    def apply_stylesheet(self):
        self.setStyleSheet(STYLESHEET)

    def start_loading(self):
        worker = LoadWorker(self.data_path, parent=self)
        worker.loaded.connect(self.on_loaded)
        self._track(worker)
        worker.start()

    def on_loaded(self, result):
        self.state.loaded(result)
        self.display_tasks()

    def on_saved(self, result):
        self.dispatch(self.state.saved(result), rebuild_rows=False)

    def dispatch(self, snapshot, rebuild_rows=True):
        """
        Called after every state message: starts a save for the returned snapshot, if any,
        and refreshes the widgets. Task rows are only rebuilt for messages that can change them.
        """
        if snapshot is not None:
            worker = SaveWorker(snapshot, self.data_path, self.save_cooldown, parent=self)
            worker.saved.connect(self.on_saved)
            self._track(worker)
            worker.start()
        self.display_tasks(rebuild_rows)

    def _track(self, worker):
        self.workers.append(worker)
        worker.finished.connect(lambda: self._untrack(worker))

    def _untrack(self, worker):
        if worker in self.workers:
            self.workers.remove(worker)
        worker.deleteLater()

    def display_tasks(self, rebuild_rows=True):
        self.setWindowTitle(self.state.title())
        if self.state.loading:
            self.pages.setCurrentWidget(self.loading_label)
            return
        self.pages.setCurrentWidget(self.scroll_area)

        if self.task_input.text() != self.state.input_value:
            self.task_input.setText(self.state.input_value)
        if self.filter_input.text() != self.state.filter_text:
            self.filter_input.setText(self.state.filter_text)
        for importance, button in self.importance_buttons.items():
            button.setChecked(importance == self.state.selected_importance)

        self.tasks_left_label.setText(tasks_left_label(self.state.tasks))
        for task_filter, button in self.filter_buttons.items():
            button.setProperty("selected", "true" if task_filter == self.state.filter else "false")
            button.style().unpolish(button)
            button.style().polish(button)

        if not rebuild_rows:
            return
        self.clear_task_list()
        focus_index = self.state.take_focus_request()
        shown = visible_tasks(self.state.tasks, self.state.filter, self.state.filter_text)
        if not shown:
            empty_label = create_label(self.state.filter.empty_message(), "emptyMessage")
            empty_label.setAlignment(Qt.AlignCenter)
            self.task_list_layout.addWidget(empty_label)
            return

        for index, task in shown:
            task_widget = TaskWidget(index, task, self)
            self.task_list_layout.addWidget(task_widget)
            if task.is_editing and index == focus_index:
                self.focus_editing_row(task_widget)

    def focus_editing_row(self, task_widget):
        task_widget.description_input.setFocus()

    def clear_task_list(self):
        while self.task_list_layout.count():
            item = self.task_list_layout.takeAt(0)
            widget = item.widget()
            if widget is not None:
                widget.hide()
                widget.deleteLater()

    def task_widgets(self):
        widgets = []
        for i in range(self.task_list_layout.count()):
            widget = self.task_list_layout.itemAt(i).widget()
            if isinstance(widget, TaskWidget):
                widgets.append(widget)
        return widgets

    def dragEnterEvent(self, event):
        if event.mimeData().hasUrls():
            event.acceptProposedAction()
        else:
            event.ignore()

    def dropEvent(self, event):
        paths = [url.toLocalFile() for url in event.mimeData().urls() if url.isLocalFile()]
        if not paths:
            event.ignore()
            return
        for path in paths:
            self.dispatch(self.state.file_dropped(os.path.normpath(path)))
        event.acceptProposedAction()

    def closeEvent(self, event):
        for worker in list(self.workers):
            worker.wait()
        # Changes made during the last in-flight save have not been written yet
        if self.state.dirty:
            try:
                persistence.save(self.state.snapshot(), self.data_path, cooldown=0)
            except SaveError as e:
                logger.error("Final save failed (%s): %s", e.kind.value, e.message)
        super().closeEvent(event)

"""Main window rendering and drag-and-drop, run on the offscreen Qt platform"""

import pytest
from PyQt5.QtCore import QMimeData, QPointF, Qt, QUrl
from PyQt5.QtGui import QCloseEvent, QDropEvent

import persistence
from persistence import ErrorKind, LoadError
from task_model import Filter
from todo_window import TaskWidget, TodoWindow


@pytest.fixture
def window(qapp, tmp_path, fixed_clock):
    win = TodoWindow(data_path=str(tmp_path / "todos.json"), save_cooldown=0, clock=fixed_clock, autoload=False)
    win.on_loaded(LoadError(ErrorKind.FILE, "missing"))
    yield win
    for worker in list(win.workers):
        worker.wait()
    win.close()
    win.deleteLater()


def add_task(win, text):
    win.task_input.textEdited.emit(text)
    win.task_input.returnPressed.emit()


def descriptions(win):
    return [widget.task.description for widget in win.task_widgets()]


class TestRendering:
    def test_loading_page_until_loaded(self, qapp, tmp_path):
        win = TodoWindow(data_path=str(tmp_path / "todos.json"), autoload=False)
        assert win.pages.currentWidget() is win.loading_label
        win.on_loaded(LoadError(ErrorKind.FORMAT, "corrupted"))
        assert win.pages.currentWidget() is win.scroll_area
        win.deleteLater()

    def test_empty_message(self, window):
        assert window.task_widgets() == []
        assert window.tasks_left_label.text() == "0 tasks left"

    def test_add_task_renders_row(self, window):
        add_task(window, "Buy milk")
        assert descriptions(window) == ["Buy milk"]
        assert window.task_input.text() == ""
        assert window.tasks_left_label.text() == "1 task left"
        assert window.task_widgets()[0].date_label.text() == " Added 2024/01/02 09:30"

    def test_status_filter_buttons(self, window):
        add_task(window, "Buy milk")
        add_task(window, "Write report")
        window.task_widgets()[1].checkbox.setChecked(True)

        window.filter_buttons[Filter.ACTIVE].click()
        assert descriptions(window) == ["Buy milk"]
        window.filter_buttons[Filter.COMPLETED].click()
        assert descriptions(window) == ["Write report"]
        assert window.filter_buttons[Filter.COMPLETED].property("selected") == "true"

    def test_keyword_filter_keeps_indexes(self, window):
        add_task(window, "Buy milk")
        add_task(window, "Write report")
        window.filter_input.textEdited.emit("report")
        widgets = window.task_widgets()
        assert [w.index for w in widgets] == [1]

    def test_edit_and_delete(self, window):
        add_task(window, "Buy milk")
        add_task(window, "Write report")
        window.task_widgets()[0].edit_button.click()
        editing = window.task_widgets()[0]
        assert editing.task.is_editing
        editing.delete_button.click()
        assert descriptions(window) == ["Write report"]

    def test_importance_label_shows_name(self, window):
        add_task(window, "Buy milk")
        assert window.task_widgets()[0].importance_label.text() == "Normal"


class TestFocus:
    def test_edit_row_focused_once(self, window, monkeypatch):
        focused = []
        monkeypatch.setattr(window, "focus_editing_row", lambda task_widget: focused.append(task_widget.index))
        add_task(window, "Buy milk")
        add_task(window, "Write report")

        window.task_widgets()[1].edit_button.click()
        assert focused == [1]

        window.filter_input.textEdited.emit("r")
        window.filter_input.textEdited.emit("re")
        window.task_input.textEdited.emit("next")
        window.on_saved(None)
        assert focused == [1]
        assert window.task_widgets()[0].task.is_editing

    def test_typing_in_edit_row_keeps_widget(self, window):
        add_task(window, "Buy milk")
        window.task_widgets()[0].edit_button.click()
        editing = window.task_widgets()[0]
        editing.description_input.textEdited.emit("Buy oat milk")
        assert window.task_widgets()[0] is editing
        assert editing.task.description == "Buy oat milk"


class TestPersistence:
    def test_changes_are_saved(self, window):
        add_task(window, "Buy milk")
        window.closeEvent(QCloseEvent())
        assert [t.description for t in persistence.load(window.data_path).tasks] == ["Buy milk"]


class TestDrop:
    def test_dropped_file_becomes_task(self, window, tmp_path):
        dropped = tmp_path / "notes.txt"
        dropped.write_text("hello", encoding="utf-8")
        mime = QMimeData()
        mime.setUrls([QUrl.fromLocalFile(str(dropped))])
        event = QDropEvent(QPointF(10, 10), Qt.CopyAction, mime, Qt.LeftButton, Qt.NoModifier)

        window.dropEvent(event)

        widget = window.task_widgets()[0]
        assert isinstance(widget, TaskWidget)
        assert widget.task.file_path == str(dropped)
        assert widget.file_name_label.text() == "notes.txt"
        assert widget.open_file_button.isEnabled()

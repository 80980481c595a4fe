"""Shared fixtures for the todos test suite"""

import os
from datetime import datetime

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest  # noqa: E402
from PyQt5.QtWidgets import QApplication  # noqa: E402

from task_model import Filter, Importance, SavedState, Task  # noqa: E402


@pytest.fixture(scope="session")
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def fixed_clock():
    return lambda: datetime(2024, 1, 2, 9, 30)


@pytest.fixture
def sample_tasks():
    return [
        Task("Buy milk", "", " Added 2024/01/01 10:00", Importance.LOW),
        Task("Write report", "/home/user/report.txt", " Added 2024/01/01 11:00", Importance.HIGH, completed=True),
        Task("Call the bank", "", " Added 2024/01/01 12:00"),
    ]


@pytest.fixture
def sample_state(sample_tasks):
    return SavedState("draft", Filter.ACTIVE, sample_tasks)

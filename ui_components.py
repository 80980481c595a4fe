# ui_components.py

import os
import subprocess
import sys

from PyQt5.QtGui import QIcon
from PyQt5.QtWidgets import QLabel

import config
from logging_utils import get_logger

logger = get_logger()

STYLESHEET = """
    QWidget {
        background-color: #f0f2f5;
        color: #333333;
        font-family: "Noto Sans JP", "Segoe UI", "Helvetica Neue", Arial, sans-serif;
        font-size: 14px;
    }
    QFrame#content {
        background-color: #ffffff;
        border: 1px solid #e0e0e0;
        border-radius: 12px;
    }
    QFrame#taskRow {
        background-color: #f7f9fc;
        border: 1px solid #f0f0f0;
        border-radius: 8px;
    }
    QLabel#h1 {
        font-size: 64px;
        color: #808080;
    }
    QLabel#emptyMessage {
        font-size: 25px;
        color: #b3b3b3;
        min-height: 200px;
    }
    QLabel#loadingMessage {
        font-size: 50px;
    }
    QLabel#dateLabel, QLabel#fileNameLabel {
        color: #6c757d;
        font-size: 12px;
    }
    QLabel#importance_High {
        color: #dc3545;
        font-weight: bold;
    }
    QLabel#importance_Normal {
        color: #ff8c00;
    }
    QLabel#importance_Low {
        color: #6c757d;
    }
    QLineEdit {
        background-color: #f8f8f8;
        border: 1px solid #cccccc;
        border-radius: 8px;
        padding: 10px;
        color: #333333;
    }
    QLineEdit#taskInput {
        font-size: 30px;
        padding: 15px;
    }
    QLineEdit:focus {
        border: 1px solid #3a7fe0;
        background-color: #ffffff;
    }
    QPushButton {
        border: none;
        border-radius: 10px;
        padding: 8px;
    }
    QPushButton#filterButton:hover, QPushButton#iconButton:hover {
        color: #3333b3;
    }
    QPushButton#filterButton[selected="true"] {
        background-color: #3333b3;
        color: #ffffff;
    }
    QPushButton#iconButton {
        color: #808080;
        background-color: transparent;
    }
    QPushButton#dangerButton {
        background-color: #cc3333;
        border-radius: 5px;
        padding: 10px;
        color: #ffffff;
    }
    QPushButton#dangerButton:hover {
        background-color: #c82333;
    }
"""


def create_label(text, style_class=""):
    label = QLabel(text)
    if style_class:
        label.setObjectName(style_class)
    return label


def file_icon(extension):
    """
    Icon for an attachment, looked up by its file extension. Unknown extensions
    and missing icon files give an empty icon.
    """
    icon_name = config.FILE_ICONS.get(extension.lower())
    if not icon_name:
        return QIcon()
    return QIcon(os.path.join(config.ICONS_DIR, icon_name))


def open_with_default_app(file_path):
    """
    Opens a file with the application registered for it by the operating system.
    Returns False (and logs why) when the file is missing or cannot be launched.
    """
    if not file_path or not os.path.exists(file_path):
        logger.warning("File not found or path is invalid: %s", file_path)
        return False

    try:
        if sys.platform == "win32":
            os.startfile(file_path)
        elif sys.platform == "darwin": # macOS
            subprocess.Popen(["open", file_path])
        else: # linux
            subprocess.Popen(["xdg-open", file_path])
    except OSError as e:
        logger.error("Could not open file %s: %s", file_path, e)
        return False
    logger.info("Opened %s", file_path)
    return True

# persistence.py

import json
import os
import sys
import time
from enum import Enum

from PyQt5.QtCore import QStandardPaths

import config
from logging_utils import get_logger
from task_model import SavedState

logger = get_logger()


class ErrorKind(str, Enum):
    FILE = "FileError"
    WRITE = "WriteError"
    FORMAT = "FormatError"


class PersistenceError(Exception):
    """
    Base class for load and save failures. `kind` tells the caller what went wrong.
    """
    def __init__(self, kind, message, detail=""):
        self.kind = ErrorKind(kind)
        self.message = message
        self.detail = detail
        super().__init__(message)

    def to_dict(self):
        return {
            "kind": self.kind.value,
            "message": self.message,
            "detail": self.detail,
        }


class LoadError(PersistenceError):
    pass


class SaveError(PersistenceError):
    pass


def data_dir():
    """
    Per-user data directory, laid out the way earlier releases stored todos.json:
      linux    $XDG_DATA_HOME/todos
      macOS    ~/Library/Application Support/rs.Iced.Todos
      windows  %APPDATA%/Iced/Todos/data
    Falls back to the current working directory when no data directory can be resolved.
    """
    if sys.platform == "win32":
        base_dir = os.environ.get("APPDATA") or QStandardPaths.writableLocation(QStandardPaths.GenericDataLocation)
        if base_dir:
            return os.path.join(base_dir, config.ORGANIZATION_NAME, config.APPLICATION_NAME, "data")
        return os.getcwd()

    base_dir = QStandardPaths.writableLocation(QStandardPaths.GenericDataLocation)
    if not base_dir:
        return os.getcwd()
    if sys.platform == "darwin":
        return os.path.join(base_dir, f"{config.PROJECT_QUALIFIER}.{config.ORGANIZATION_NAME}.{config.APPLICATION_NAME}")
    return os.path.join(base_dir, config.APPLICATION_NAME.lower().replace(" ", ""))


def data_path():
    return os.path.join(data_dir(), config.DATA_FILENAME)


def load(path=None):
    """
    Reads and deserializes the saved state.
    Raises LoadError(FILE) if the file cannot be read and LoadError(FORMAT) if it is not a saved state.
    """
    path = path or data_path()
    try:
        with open(path, "r", encoding="utf-8") as f:
            contents = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise LoadError(ErrorKind.FILE, f"Could not read {path}", str(e)) from e

    try:
        state = SavedState.from_dict(json.loads(contents))
    except (json.JSONDecodeError, RecursionError, KeyError, TypeError, ValueError) as e:
        raise LoadError(ErrorKind.FORMAT, f"Could not decode {path}. File might be corrupted.", str(e)) from e

    logger.info("Loaded %d task(s) from %s", len(state.tasks), path)
    return state


def save(state, path=None, cooldown=config.SAVE_COOLDOWN_SECONDS):
    """
    Writes the whole state as pretty-printed JSON, replacing the previous file,
    then blocks for `cooldown` seconds so bursts of edits are saved at most once per window.
    Raises SaveError with kind FORMAT, FILE or WRITE. Nothing is retried.
    """
    try:
        contents = json.dumps(state.to_dict(), ensure_ascii=False, indent=2)
    except (TypeError, ValueError) as e:
        raise SaveError(ErrorKind.FORMAT, "Could not serialize tasks", str(e)) from e

    path = path or data_path()
    directory = os.path.dirname(path)
    if directory:
        try:
            os.makedirs(directory, exist_ok=True)
        except OSError as e:
            raise SaveError(ErrorKind.FILE, f"Could not create {directory}", str(e)) from e

    try:
        f = open(path, "w", encoding="utf-8")
    except OSError as e:
        raise SaveError(ErrorKind.FILE, f"Could not open {path} for writing", str(e)) from e
    try:
        with f:
            f.write(contents)
    except OSError as e:
        raise SaveError(ErrorKind.WRITE, f"Could not write {path}", str(e)) from e

    logger.debug("Saved %d task(s) to %s", len(state.tasks), path)

    if cooldown > 0:
        time.sleep(cooldown)

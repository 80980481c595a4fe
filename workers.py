# workers.py
"""QThread workers that keep disk I/O off the GUI thread."""

from PyQt5.QtCore import QThread, pyqtSignal

import config
import persistence
from logging_utils import get_logger
from persistence import ErrorKind, LoadError, SaveError

logger = get_logger()


class LoadWorker(QThread):
    """
    Loads the saved state in the background.
    Emits `loaded` with either a SavedState or a LoadError.
    """
    loaded = pyqtSignal(object)

    def __init__(self, path=None, parent=None):
        super().__init__(parent)
        self.path = path

    def run(self):
        try:
            result = persistence.load(self.path)
        except LoadError as e:
            logger.info("No saved tasks loaded (%s): %s", e.kind.value, e.message)
            result = e
        except Exception as e:
            logger.exception("Unexpected error while loading tasks")
            result = LoadError(ErrorKind.FILE, f"{type(e).__name__}: {e}")
        self.loaded.emit(result)


class SaveWorker(QThread):
    """
    Saves one snapshot of the state, including the post-write cooldown.
    Emits `saved` with None on success or a SaveError.
    """
    saved = pyqtSignal(object)

    def __init__(self, state, path=None, cooldown=config.SAVE_COOLDOWN_SECONDS, parent=None):
        super().__init__(parent)
        self.state = state
        self.path = path
        self.cooldown = cooldown

    def run(self):
        try:
            persistence.save(self.state, self.path, self.cooldown)
            result = None
        except SaveError as e:
            logger.error("Saving tasks failed (%s): %s %s", e.kind.value, e.message, e.detail)
            result = e
        except Exception as e:
            logger.exception("Unexpected error while saving tasks")
            result = SaveError(ErrorKind.WRITE, f"{type(e).__name__}: {e}")
        self.saved.emit(result)

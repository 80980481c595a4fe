# main.py
import os
import sys

from PyQt5.QtWidgets import QApplication
from PyQt5.QtGui import QFont, QFontDatabase, QIcon

import config
from logging_utils import get_logger
from todo_window import TodoWindow

logger = get_logger()


def load_default_font(app):
    """
    Registers the bundled font and makes it the application default, if it ships with the app.
    """
    if not os.path.exists(config.FONT_PATH):
        logger.warning("Font file not found at %s. Using the system default font.", config.FONT_PATH)
        return
    font_id = QFontDatabase.addApplicationFont(config.FONT_PATH)
    families = QFontDatabase.applicationFontFamilies(font_id) if font_id != -1 else []
    if not families:
        logger.warning("Could not load font from %s.", config.FONT_PATH)
        return
    app.setFont(QFont(families[0]))


def main():
    app = QApplication(sys.argv)
    app.setApplicationName(config.APPLICATION_NAME)
    app.setOrganizationName(config.ORGANIZATION_NAME)

    # Ensure you have an 'icons' directory with 'task_icon.png' in your project root
    icon_path = os.path.join(config.ICONS_DIR, config.APP_ICON)
    if os.path.exists(icon_path):
        app.setWindowIcon(QIcon(icon_path))
    else:
        logger.warning("Icon file not found at %s. Application icon might not be displayed.", icon_path)
    load_default_font(app)

    window = TodoWindow()
    window.show()
    sys.exit(app.exec_())


if __name__ == "__main__":
    main()

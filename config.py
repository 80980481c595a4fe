# config.py

# Application identity, also used to build the data directory path
PROJECT_QUALIFIER = "rs"
APPLICATION_NAME = "Todos"
ORGANIZATION_NAME = "Iced"

# Persistence
DATA_FILENAME = "todos.json"
SAVE_COOLDOWN_SECONDS = 2 # Save at most once every couple of seconds

# Timestamp written on tasks created from the input box or a file drop
TASK_DATE_FORMAT = " Added %Y/%m/%d %H:%M"

# Window
WINDOW_GEOMETRY = (100, 100, 800, 700)
CONTENT_MAX_WIDTH = 800
INPUT_PLACEHOLDER = "What needs to be done?"
EDIT_PLACEHOLDER = "Describe your task..."
FILTER_PLACEHOLDER = "Filter tasks by keyword"

# Assets
FONT_PATH = "fonts/NotoSansJP-Regular.otf"
ICONS_DIR = "icons"
APP_ICON = "task_icon.png"
FILE_ICON_SIZE = 30
# Attachment icon per file extension (lowercase, without the dot)
FILE_ICONS = {
    "txt": "icons8-txt-48.png",
    "xlsx": "icons8-xls-48.png",
    "jpg": "icons8-jpg-48.png",
    "exe": "icons8-exe-48.png",
    "zip": "icons8-zip-48.png",
}

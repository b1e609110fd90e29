APP_ORG = "TextEditor"
APP_NAME = "TextEditor"

NEW_FILE_LABEL = "new file"

OPEN_DIALOG_TITLE = "choose a file..."
SAVE_DIALOG_TITLE = "choose file name"
FILE_FILTER = "All files (*)"

DEFAULT_GRAMMAR = "py"
DEFAULT_THEME = "solarized-dark"
DEFAULT_LOG_LEVEL = "WARNING"

APP_NAME = "Category Manager"
APP_WIDTH = 900
APP_HEIGHT = 640

DEFAULT_API_BASE_URL = "http://localhost:3000"
DEFAULT_REQUEST_TIMEOUT = 10.0  # seconds
CATEGORIES_PATH = "/api/categories"


def category_path(category_id) -> str:
    return f"{CATEGORIES_PATH}/{category_id}"


TAB_ALL = "all"
TABS = [TAB_ALL, "income", "expense"]
TAB_LABELS = {
    "all":     "All Categories",
    "income":  "Income",
    "expense": "Expense",
}
TAB_TITLES = {
    "all":     "All Categories",
    "income":  "Income Categories",
    "expense": "Expense Categories",
}

PAGE_SIZE = 10
TOAST_DURATION_MS = 4000

TYPE_COLORS = {
    "income":  "#4CAF50",
    "expense": "#F44336",
}

SEVERITY_COLORS = {
    "success": "#4CAF50",
    "error":   "#F44336",
    "info":    "#2196F3",
}

SEVERITY_HOVER_COLORS = {
    "success": "#388E3C",
    "error":   "#D32F2F",
    "info":    "#1976D2",
}

SEVERITY_ICONS = {
    "success": "✓",
    "error":   "❗",
    "info":    "ℹ",
}

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

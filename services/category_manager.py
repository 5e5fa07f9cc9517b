import logging
from enum import Enum
from typing import Callable

from client.api_client import ApiError
from client.category_api import CategoryAPI
from models.category import Category, CreateDraft, Draft, EditDraft
from services.notifier import Notifier
from utils.constants import TAB_ALL, TABS

logger = logging.getLogger(__name__)


class DialogState(str, Enum):
    CLOSED = "closed"
    OPEN_CREATE = "open_create"
    OPEN_EDIT = "open_edit"


class CategoryManager:
    """Category list state plus the create/edit/delete workflow.

    The server is the source of truth: every successful write is followed by
    a full reload, and nothing in `categories` is ever patched locally.
    """

    def __init__(self, category_api: CategoryAPI, notifier: Notifier):
        self._api = category_api
        self._notifier = notifier
        self._listeners: list[Callable[[], None]] = []

        self.categories: list[Category] = []
        self.loading = False
        self.active_tab = TAB_ALL
        self.dialog = DialogState.CLOSED
        self.draft: Draft | None = None

    # ── Listeners ────────────────────────────────────────────────────────────
    def subscribe(self, listener: Callable[[], None]):
        self._listeners.append(listener)

    def unsubscribe(self, listener: Callable[[], None]):
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _changed(self):
        for listener in list(self._listeners):
            listener()

    # ── Queries ──────────────────────────────────────────────────────────────
    @property
    def is_editing(self) -> bool:
        return self.dialog == DialogState.OPEN_EDIT

    @property
    def is_dialog_open(self) -> bool:
        return self.dialog != DialogState.CLOSED

    def filter(self, tab: str | None = None) -> list[Category]:
        tab = self.active_tab if tab is None else tab
        if tab not in TABS:
            raise ValueError(f"Unknown tab: {tab!r}")
        if tab == TAB_ALL:
            return list(self.categories)
        return [c for c in self.categories if c.type == tab]

    @property
    def visible_categories(self) -> list[Category]:
        return self.filter(self.active_tab)

    def set_tab(self, tab: str):
        if tab not in TABS:
            raise ValueError(f"Unknown tab: {tab!r}")
        self.active_tab = tab
        self._changed()

    # ── Loading ──────────────────────────────────────────────────────────────
    def load_all(self) -> bool:
        self.loading = True
        self._changed()
        try:
            categories = self._api.get_all()
        except (ApiError, ValueError) as e:
            logger.error("Error fetching categories: %s", e)
            self._notifier.error("Failed to load categories")
            return False
        else:
            self.categories = categories
            logger.info("Loaded %d categories", len(categories))
            return True
        finally:
            self.loading = False
            self._changed()

    # ── Dialog ───────────────────────────────────────────────────────────────
    def open_create(self):
        self.draft = CreateDraft()
        self.dialog = DialogState.OPEN_CREATE
        self._changed()

    def open_edit(self, category: Category):
        self.draft = EditDraft.from_category(category)
        self.dialog = DialogState.OPEN_EDIT
        self._changed()

    def update_draft(self, name: str | None = None, type_: str | None = None):
        if self.draft is None:
            raise RuntimeError("No draft to update; open the dialog first.")
        self.draft = self.draft.with_values(name=name, type_=type_)

    def cancel(self):
        self.dialog = DialogState.CLOSED
        self._changed()

    def submit(self, draft: Draft | None = None) -> bool:
        """Create or update from the draft; True when the server accepted it.

        Whether this is a create or an update follows the draft's variant.
        """
        if draft is not None:
            self.draft = draft
        draft = self.draft
        if draft is None:
            raise RuntimeError("No draft to submit; open the dialog first.")

        if not draft.name:
            logger.warning("Rejected category draft with an empty name")
            self._notifier.error("Please enter a category name")
            return False

        editing = isinstance(draft, EditDraft)
        try:
            self._api.save(draft)
        except ApiError as e:
            logger.error("Error saving category: %s", e)
            self._notifier.error("Error saving category")
            return False

        self.dialog = DialogState.CLOSED
        self._changed()
        self.load_all()
        self._notifier.success(
            "Category updated successfully" if editing else "Category added successfully"
        )
        return True

    # ── Delete ───────────────────────────────────────────────────────────────
    def remove(self, category_id) -> bool:
        try:
            self._api.delete(category_id)
        except ApiError as e:
            # Rows stay as they are until the next successful load.
            logger.error("Error deleting category %s: %s", category_id, e)
            self._notifier.error("Error deleting category")
            return False

        self.load_all()
        self._notifier.success("Category deleted successfully")
        return True

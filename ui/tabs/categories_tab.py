import threading

import customtkinter as ctk

from models.category import Category
from services.category_manager import CategoryManager
from ui.components.category_form import CategoryForm
from ui.components.data_table import Column, DataTable
from utils.constants import PAGE_SIZE, TAB_ALL, TAB_LABELS, TABS, TYPE_COLORS
from utils.table import card_title, category_column_keys


class CategoriesTab(ctk.CTkFrame):
    def __init__(self, master, manager: CategoryManager, **kwargs):
        super().__init__(master, fg_color="transparent", **kwargs)
        self._manager = manager
        self._render_pending = False

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(2, weight=1)

        self._build_header()
        self._build_tabs()
        self._build_card()

        self._manager.subscribe(self._on_state_changed)
        self.bind("<Destroy>", self._on_destroy, add="+")
        self._render()
        self.after(100, self.refresh)

    def refresh(self):
        self._run(self._manager.load_all)

    # ── Layout builders ───────────────────────────────────────────────────────

    def _build_header(self):
        bar = ctk.CTkFrame(self, fg_color="transparent")
        bar.grid(row=0, column=0, sticky="ew", padx=8, pady=(8, 0))
        bar.grid_columnconfigure(0, weight=1)

        ctk.CTkLabel(
            bar, text="Categories", anchor="w",
            font=ctk.CTkFont(size=24, weight="bold"),
        ).grid(row=0, column=0, sticky="w")
        ctk.CTkLabel(
            bar, text="Manage your income and expense categories",
            anchor="w", text_color="gray60",
        ).grid(row=1, column=0, sticky="w")

        ctk.CTkButton(
            bar, text="+ Add Category", command=self._open_add,
        ).grid(row=0, column=1, rowspan=2, padx=4)

    def _build_tabs(self):
        self._label_to_tab = {TAB_LABELS[t]: t for t in TABS}
        self._tab_seg = ctk.CTkSegmentedButton(
            self,
            values=[TAB_LABELS[t] for t in TABS],
            command=self._on_tab_changed,
        )
        self._tab_seg.set(TAB_LABELS[self._manager.active_tab])
        self._tab_seg.grid(row=1, column=0, sticky="w", padx=8, pady=(12, 0))

    def _build_card(self):
        card = ctk.CTkFrame(self, fg_color=("gray88", "gray18"), corner_radius=8)
        card.grid(row=2, column=0, sticky="nsew", padx=8, pady=8)
        card.grid_columnconfigure(0, weight=1)
        card.grid_rowconfigure(1, weight=1)

        self._card_title = ctk.CTkLabel(
            card, text="", anchor="w",
            font=ctk.CTkFont(size=15, weight="bold"),
        )
        self._card_title.grid(row=0, column=0, sticky="ew", padx=12, pady=(10, 4))

        self._loading_frame = ctk.CTkFrame(card, fg_color="transparent")
        ctk.CTkLabel(
            self._loading_frame, text="Loading categories...", text_color="gray60",
        ).pack(pady=(40, 8))
        self._progress = ctk.CTkProgressBar(self._loading_frame, mode="indeterminate", width=200)
        self._progress.pack()

        self._table = DataTable(
            card, columns=self._columns(TAB_ALL), page_size=PAGE_SIZE,
            empty_text="No categories found.",
        )
        self._table.grid(row=1, column=0, sticky="nsew", padx=8, pady=(0, 8))
        self._table_tab = TAB_ALL

    def _columns(self, tab: str) -> list[Column]:
        columns = [
            Column("name", "Name", sortable=True),
            Column("type", "Type", sortable=True, width=80, render=self._render_type),
            Column("actions", "Actions", width=140, render=self._render_actions),
        ]
        keys = category_column_keys(tab)
        return [c for c in columns if c.key in keys]

    def _render_type(self, parent, cat: Category):
        return ctk.CTkLabel(
            parent, text=cat.type.capitalize(), width=70, height=22, corner_radius=11,
            fg_color=TYPE_COLORS.get(cat.type, "#888888"), text_color="white",
            font=ctk.CTkFont(size=11, weight="bold"),
        )

    def _render_actions(self, parent, cat: Category):
        btn_frame = ctk.CTkFrame(parent, fg_color="transparent")
        ctk.CTkButton(
            btn_frame, text="Edit", width=60, height=26,
            fg_color="transparent", border_width=1,
            text_color=("gray10", "gray90"),
            command=lambda c=cat: self._open_edit(c),
        ).pack(side="left", padx=(0, 4))
        ctk.CTkButton(
            btn_frame, text="Delete", width=65, height=26,
            fg_color="#F44336", hover_color="#D32F2F",
            command=lambda c=cat: self._on_delete(c),
        ).pack(side="left")
        return btn_frame

    # ── Callbacks ─────────────────────────────────────────────────────────────

    def _on_tab_changed(self, label: str):
        self._manager.set_tab(self._label_to_tab[label])

    def _open_add(self):
        self._manager.open_create()
        CategoryForm(self.winfo_toplevel(), self._manager)

    def _open_edit(self, cat: Category):
        self._manager.open_edit(cat)
        CategoryForm(self.winfo_toplevel(), self._manager)

    def _on_delete(self, cat: Category):
        self._run(lambda: self._manager.remove(cat.id))

    def _run(self, action):
        threading.Thread(target=action, daemon=True).start()

    # ── Rendering ─────────────────────────────────────────────────────────────

    def _on_state_changed(self):
        # May be called from a worker thread; coalesce onto the Tk loop.
        if self._render_pending:
            return
        self._render_pending = True
        self.after(0, self._render)

    def _on_destroy(self, event):
        if event.widget is self:
            self._manager.unsubscribe(self._on_state_changed)

    def _render(self):
        self._render_pending = False
        if not self.winfo_exists():
            return
        tab = self._manager.active_tab
        self._card_title.configure(text=card_title(tab))

        if self._manager.loading:
            self._table.grid_remove()
            self._loading_frame.grid(row=1, column=0, sticky="nsew")
            self._progress.start()
            return

        self._progress.stop()
        self._loading_frame.grid_remove()
        self._table.grid()
        if tab != self._table_tab:
            self._table_tab = tab
            self._table.set_columns(self._columns(tab))
        self._table.set_data(self._manager.visible_categories)

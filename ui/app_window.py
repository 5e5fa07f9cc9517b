import customtkinter as ctk

from client.category_api import CategoryAPI
from services.category_manager import CategoryManager
from ui.components.toast import ToastNotifier
from ui.tabs.categories_tab import CategoriesTab
from utils.constants import APP_NAME, APP_WIDTH, APP_HEIGHT


class AppWindow(ctk.CTk):
    def __init__(self, category_api: CategoryAPI, **kwargs):
        super().__init__(**kwargs)

        self.title(APP_NAME)
        self.minsize(APP_WIDTH // 2, APP_HEIGHT // 2)
        self.geometry(f"{APP_WIDTH}x{APP_HEIGHT}")

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(1, weight=1)

        self._build_banner_area()
        self.manager = CategoryManager(category_api, ToastNotifier(self._banner_frame))
        self._build_page()

    # ── Banners ─────────────────────────────────────────────────────────────
    def _build_banner_area(self):
        self._banner_frame = ctk.CTkFrame(self, fg_color="transparent", height=0)
        self._banner_frame.grid(row=0, column=0, sticky="ew", padx=8)

    # ── Page ────────────────────────────────────────────────────────────────
    def _build_page(self):
        self._categories_tab = CategoriesTab(self, manager=self.manager)
        self._categories_tab.grid(row=1, column=0, sticky="nsew", padx=8, pady=(0, 8))

from dataclasses import dataclass
from typing import Callable

import customtkinter as ctk

from utils.constants import PAGE_SIZE
from utils.table import clamp_page, page_count, page_label, page_slice, sort_rows


@dataclass
class Column:
    key: str
    label: str
    sortable: bool = False
    width: int = 0
    # render(parent, row) -> widget; plain text of getattr(row, key) otherwise
    render: Callable | None = None


class DataTable(ctk.CTkFrame):
    """Generic sortable, paged table. Holds no domain logic."""

    def __init__(self, master, columns: list[Column], page_size: int = PAGE_SIZE,
                 empty_text: str = "No data found.", **kwargs):
        super().__init__(master, fg_color="transparent", **kwargs)
        self._columns = columns
        self._page_size = page_size
        self._empty_text = empty_text
        self._rows: list = []
        self._page = 0
        self._sort_key: str | None = None
        self._sort_desc = False

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(0, weight=1)

        self._body = ctk.CTkScrollableFrame(self)
        self._body.grid(row=0, column=0, sticky="nsew")
        self._body.grid_columnconfigure(0, weight=1)

        pager = ctk.CTkFrame(self, fg_color="transparent")
        pager.grid(row=1, column=0, sticky="ew", pady=(6, 0))
        self._prev_btn = ctk.CTkButton(
            pager, text="Previous", width=80,
            fg_color="transparent", border_width=1,
            text_color=("gray10", "gray90"),
            command=lambda: self._go(self._page - 1),
        )
        self._prev_btn.pack(side="left")
        self._page_label = ctk.CTkLabel(pager, text="", text_color="gray60")
        self._page_label.pack(side="left", padx=12)
        self._next_btn = ctk.CTkButton(
            pager, text="Next", width=80,
            fg_color="transparent", border_width=1,
            text_color=("gray10", "gray90"),
            command=lambda: self._go(self._page + 1),
        )
        self._next_btn.pack(side="left")

    def set_columns(self, columns: list[Column]):
        self._columns = columns
        if self._sort_key and not any(c.key == self._sort_key for c in columns):
            self._sort_key = None
        self._render()

    def set_data(self, rows: list):
        self._rows = list(rows)
        self._page = clamp_page(self._page, len(self._rows), self._page_size)
        self._render()

    def _go(self, page: int):
        self._page = clamp_page(page, len(self._rows), self._page_size)
        self._render()

    def _toggle_sort(self, key: str):
        if self._sort_key == key:
            self._sort_desc = not self._sort_desc
        else:
            self._sort_key = key
            self._sort_desc = False
        self._render()

    def _render(self):
        for w in self._body.winfo_children():
            w.destroy()

        total = len(self._rows)
        last = page_count(total, self._page_size) - 1
        self._page_label.configure(text=page_label(self._page, total, self._page_size))
        self._prev_btn.configure(state="normal" if self._page > 0 else "disabled")
        self._next_btn.configure(state="normal" if self._page < last else "disabled")

        if not self._rows:
            ctk.CTkLabel(
                self._body, text=self._empty_text, text_color="gray60",
            ).grid(row=0, column=0, pady=40)
            return

        self._render_header()
        rows = sort_rows(self._rows, self._sort_key, self._sort_desc)
        for idx, item in enumerate(page_slice(rows, self._page, self._page_size)):
            self._render_row(idx + 1, item)

    def _render_header(self):
        hdr = ctk.CTkFrame(self._body, fg_color="transparent")
        hdr.grid(row=0, column=0, sticky="ew", padx=4, pady=(0, 2))
        hdr.grid_columnconfigure(0, weight=1)

        for col_idx, col in enumerate(self._columns):
            text = col.label
            if col.key == self._sort_key:
                text += " ▼" if self._sort_desc else " ▲"
            if col.sortable:
                ctk.CTkButton(
                    hdr, text=text, width=col.width or 60, height=22, anchor="w",
                    fg_color="transparent", hover_color=("gray80", "gray25"),
                    text_color="gray60", font=ctk.CTkFont(size=11),
                    command=lambda k=col.key: self._toggle_sort(k),
                ).grid(row=0, column=col_idx, padx=8, sticky="w")
            else:
                ctk.CTkLabel(
                    hdr, text=text, width=col.width, anchor="e", text_color="gray60",
                    font=ctk.CTkFont(size=11),
                ).grid(row=0, column=col_idx, padx=8, sticky="e")

    def _render_row(self, idx: int, item):
        row = ctk.CTkFrame(self._body, fg_color=("gray90", "gray20"), corner_radius=8)
        row.grid(row=idx, column=0, sticky="ew", padx=4, pady=3)
        row.grid_columnconfigure(0, weight=1)

        for col_idx, col in enumerate(self._columns):
            if col.render is not None:
                cell = col.render(row, item)
            else:
                cell = ctk.CTkLabel(
                    row, text=str(getattr(item, col.key, "")), anchor="w",
                    width=col.width, font=ctk.CTkFont(size=13, weight="bold"),
                )
            cell.grid(row=0, column=col_idx, padx=8, pady=6, sticky="w" if col_idx == 0 else "")

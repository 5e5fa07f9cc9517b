import threading

import customtkinter as ctk

from services.category_manager import CategoryManager
from utils.constants import TYPE_COLORS


class CategoryForm(ctk.CTkToplevel):
    """Add or edit a category. Mirrors the manager's open dialog and draft."""

    def __init__(self, master, manager: CategoryManager, **kwargs):
        super().__init__(master, **kwargs)
        self._manager = manager
        self._saving = False
        editing = manager.is_editing
        draft = manager.draft

        self.title("Edit Category" if editing else "Add New Category")
        self.resizable(False, False)
        self.grid_columnconfigure(0, weight=1)
        self.protocol("WM_DELETE_WINDOW", self._on_cancel)

        ctk.CTkLabel(
            self,
            text="Update your category details below" if editing
            else "Fill in the details to create a new category",
            text_color="gray60", anchor="w",
        ).grid(row=0, column=0, padx=16, pady=(16, 8), sticky="ew")

        # Name
        ctk.CTkLabel(
            self, text="Category Name", anchor="w",
            font=ctk.CTkFont(size=12, weight="bold"),
        ).grid(row=1, column=0, padx=16, pady=(4, 2), sticky="ew")
        self._name_entry = ctk.CTkEntry(
            self, width=320, height=36,
            placeholder_text="e.g., Salary, Rent, Groceries",
        )
        if draft.name:
            self._name_entry.insert(0, draft.name)
        self._name_entry.grid(row=2, column=0, padx=16, pady=(0, 8), sticky="ew")
        self._name_entry.bind("<Return>", lambda _e: self._on_save())

        # Type
        ctk.CTkLabel(
            self, text="Category Type", anchor="w",
            font=ctk.CTkFont(size=12, weight="bold"),
        ).grid(row=3, column=0, padx=16, pady=(4, 2), sticky="ew")
        self._type_var = ctk.StringVar(value=draft.type)
        type_row = ctk.CTkFrame(self, fg_color="transparent")
        type_row.grid(row=4, column=0, padx=16, pady=(0, 8), sticky="ew")
        type_row.grid_columnconfigure((0, 1), weight=1)
        for col, (value, label) in enumerate((("expense", "Expense"), ("income", "Income"))):
            ctk.CTkRadioButton(
                type_row, text=label, value=value, variable=self._type_var,
                fg_color=TYPE_COLORS[value],
            ).grid(row=0, column=col, padx=4, pady=8, sticky="w")

        # Buttons
        btn_frame = ctk.CTkFrame(self, fg_color="transparent")
        btn_frame.grid(row=5, column=0, padx=16, pady=(4, 16), sticky="ew")
        ctk.CTkButton(
            btn_frame, text="Cancel", width=90,
            fg_color="transparent", border_width=1,
            text_color=("gray10", "gray90"),
            command=self._on_cancel,
        ).pack(side="left")
        self._save_btn = ctk.CTkButton(
            btn_frame, text="Save Changes" if editing else "Create Category",
            width=130, command=self._on_save,
        )
        self._save_btn.pack(side="right")

        self.transient(master)
        self.grab_set()
        self._center()
        self._name_entry.focus_set()

    def _on_save(self):
        if self._saving:
            return
        self._manager.update_draft(
            name=self._name_entry.get(), type_=self._type_var.get()
        )
        self._saving = True
        self._save_btn.configure(state="disabled")

        def save():
            self._manager.submit()
            self.after(0, self._on_saved)

        threading.Thread(target=save, daemon=True).start()

    def _on_saved(self):
        if not self.winfo_exists():
            return
        self._saving = False
        if not self._manager.is_dialog_open:
            self.destroy()
        else:
            self._save_btn.configure(state="normal")

    def _on_cancel(self):
        self._manager.cancel()
        self.destroy()

    def _center(self):
        self.update_idletasks()
        mw = self.master.winfo_x() + self.master.winfo_width() // 2
        mh = self.master.winfo_y() + self.master.winfo_height() // 2
        w, h = self.winfo_reqwidth(), self.winfo_reqheight()
        self.geometry(f"+{mw - w//2}+{mh - h//2}")

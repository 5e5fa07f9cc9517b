import customtkinter as ctk

from services.notifier import Notifier
from utils.constants import (
    SEVERITY_COLORS,
    SEVERITY_HOVER_COLORS,
    SEVERITY_ICONS,
    TOAST_DURATION_MS,
)


class Toast(ctk.CTkFrame):
    """A colored banner that removes itself after `duration_ms`."""

    def __init__(self, master, message: str, severity: str = "info",
                 duration_ms: int = TOAST_DURATION_MS, **kwargs):
        color = SEVERITY_COLORS.get(severity, SEVERITY_COLORS["info"])
        super().__init__(master, fg_color=color, corner_radius=6, **kwargs)
        self.grid_columnconfigure(0, weight=1)

        icon = SEVERITY_ICONS.get(severity, "")
        ctk.CTkLabel(
            self, text=f"{icon}  {message}", text_color="white",
            anchor="w", padx=10, pady=6
        ).grid(row=0, column=0, sticky="ew")

        ctk.CTkButton(
            self, text="✕", width=28, height=24,
            fg_color="transparent",
            hover_color=SEVERITY_HOVER_COLORS.get(severity, SEVERITY_HOVER_COLORS["info"]),
            text_color="white",
            command=self.dismiss,
        ).grid(row=0, column=1, padx=(0, 4))

        self.after(duration_ms, self.dismiss)

    def dismiss(self):
        if self.winfo_exists():
            self.destroy()


class ToastNotifier(Notifier):
    """Shows notifications as toasts stacked in `container`.

    Safe to call from worker threads: the toast is created on the Tk loop.
    """

    def __init__(self, container: ctk.CTkFrame):
        self._container = container

    def success(self, message: str) -> None:
        self._show(message, "success")

    def error(self, message: str) -> None:
        self._show(message, "error")

    def _show(self, message: str, severity: str):
        def show():
            if self._container.winfo_exists():
                Toast(self._container, message, severity).pack(fill="x", pady=2)

        self._container.after(0, show)

from __future__ import annotations

"""
Transient Notifications.

Borderless, self-destroying popups centered over the main window, used for
clipboard confirmations and failures.
"""

import customtkinter as ctk

TOAST_COLORS = {
    "info": "#2CC985",
    "error": "#D9534F",
}


def show_toast(
        parent: ctk.CTk,
        title: str,
        message: str = "",
        kind: str = "info",
        duration_ms: int = 2500,
) -> ctk.CTkToplevel:
    """
    Display a notification that disappears after a delay.

    Args:
        parent: Window the toast is centered on.
        title: Bold first line.
        message: Optional detail line.
        kind: 'info' or 'error'; selects the background color.
        duration_ms: Time before the toast closes itself.

    Returns:
        ctk.CTkToplevel: The toast window.
    """
    toast = ctk.CTkToplevel(parent)
    toast.overrideredirect(True)
    toast.attributes("-topmost", True)

    frame = ctk.CTkFrame(toast, corner_radius=8, fg_color=TOAST_COLORS.get(kind, TOAST_COLORS["info"]))
    frame.pack(fill="both", expand=True)

    ctk.CTkLabel(
        frame,
        text=title,
        text_color="white",
        font=ctk.CTkFont(size=14, weight="bold")
    ).pack(padx=24, pady=(12, 4 if message else 12))

    if message:
        ctk.CTkLabel(frame, text=message, text_color="white").pack(padx=24, pady=(0, 12))

    toast.update_idletasks()
    x = parent.winfo_rootx() + (parent.winfo_width() - toast.winfo_reqwidth()) // 2
    y = parent.winfo_rooty() + (parent.winfo_height() - toast.winfo_reqheight()) // 2
    toast.geometry(f"+{max(x, 0)}+{max(y, 0)}")

    toast.after(duration_ms, toast.destroy)
    return toast

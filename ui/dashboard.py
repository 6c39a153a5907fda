# ui/dashboard.py (the single habit list screen)
import tkinter as tk
from tkinter import ttk

from ui import theme
from ui.create_habit import AddHabitSheet


class HabitList(tk.Frame):
    def __init__(self, parent, store):
        super().__init__(parent, bg=theme.BG)
        self.store = store

        # Header
        header = tk.Frame(self, bg=theme.BG)
        header.pack(fill="x", padx=16, pady=(14, 6))
        theme.heading_label(header, "HabitOne").pack(side="left", anchor="w")
        theme.ghost_button(header, "+ Add", self.open_add_sheet).pack(side="right")
        self.date_label = theme.muted_label(self, "")
        self.date_label.pack(anchor="w", padx=16)

        self.list_frame = tk.Frame(self, bg=theme.BG)
        self.list_frame.pack(fill="both", expand=True, padx=16, pady=10)

        # Progress footer
        footer = tk.Frame(self, bg=theme.BG)
        footer.pack(fill="x", padx=16, pady=(0, 14))
        self.progress_label = tk.Label(footer, bg=theme.BG, fg=theme.TEXT, font=theme.SUBTITLE)
        self.progress_label.pack()
        self.progress_bar = ttk.Progressbar(footer, maximum=100, mode="determinate")
        self.progress_bar.pack(fill="x", pady=(4, 0))
        self.footer = footer

        self._unsubscribe = store.subscribe(lambda _snapshot: self.refresh())
        self.bind("<Destroy>", self._on_destroy)
        self.refresh()

    def _on_destroy(self, event):
        if event.widget is self:
            self._unsubscribe()

    def refresh(self):
        for w in self.list_frame.winfo_children():
            w.destroy()

        now = self.store.clock()
        self.date_label.configure(text=f"{now:%B} {now.day}, {now.year}")

        habits = self.store.snapshot()
        if not habits:
            self.footer.pack_forget()
            theme.muted_label(
                self.list_frame,
                "No habits yet 🫠\nTap + to add one",
                font=theme.BODY,
                justify="center",
            ).pack(expand=True, pady=40)
            return

        for h in habits:
            row = tk.Frame(self.list_frame, bg=theme.ROW_BG, padx=12, pady=6)
            row.pack(fill="x", pady=3)
            tk.Label(row, text=h.emoji, bg=theme.ROW_BG, font=theme.EMOJI).pack(side="left")
            tk.Label(
                row,
                text=h.title,
                anchor="w",
                bg=theme.ROW_BG,
                fg=theme.TEXT,
                font=theme.HEADING,
            ).pack(side="left", padx=10, fill="x", expand=True)
            tk.Button(
                row,
                text="✔" if h.is_completed else "○",
                fg=theme.SUCCESS if h.is_completed else theme.MUTED,
                bg=theme.ROW_BG,
                activebackground=theme.ROW_BG,
                font=theme.CHECK,
                relief="flat",
                bd=0,
                cursor="hand2",
                command=lambda hid=h.id: self.store.toggle_completion(hid),
            ).pack(side="right")

        percent = self.store.progress()
        self.progress_label.configure(text=f"Progress: {percent}%")
        self.progress_bar["value"] = percent
        self.footer.pack(fill="x", padx=16, pady=(0, 14))

    def open_add_sheet(self):
        AddHabitSheet(self, on_add=self.store.create)

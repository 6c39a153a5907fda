# ui/create_habit.py
import tkinter as tk

from ui import theme


class AddHabitSheet(tk.Toplevel):
    """Modal "New Habit" form. Empty title or emoji is never passed on."""

    def __init__(self, parent, on_add):
        super().__init__(parent, bg=theme.CARD_BG)
        self.on_add = on_add
        self.title("New Habit")
        self.resizable(False, False)
        self.transient(parent.winfo_toplevel())

        form = tk.Frame(self, bg=theme.CARD_BG)
        form.pack(padx=16, pady=14, fill="x")
        tk.Label(
            form, text="Habit name", bg=theme.CARD_BG, fg=theme.TEXT, font=theme.BODY
        ).grid(row=0, column=0, sticky="w", pady=4)
        self.name = tk.Entry(form, relief="solid", bd=1, font=theme.BODY)
        self.name.grid(row=0, column=1, sticky="ew", padx=8, pady=4)

        tk.Label(
            form, text="Emoji (🔥💪🧠)", bg=theme.CARD_BG, fg=theme.TEXT, font=theme.BODY
        ).grid(row=1, column=0, sticky="w", pady=4)
        self.emoji = tk.Entry(form, relief="solid", bd=1, font=theme.BODY, width=6)
        self.emoji.grid(row=1, column=1, sticky="w", padx=8, pady=4)
        form.columnconfigure(1, weight=1)

        controls = tk.Frame(self, bg=theme.CARD_BG)
        controls.pack(fill="x", padx=16, pady=(0, 14))
        theme.ghost_button(controls, "Cancel", self.destroy).pack(side="left")
        theme.primary_button(controls, "Add", self.save).pack(side="right")

        self.bind("<Return>", lambda _e: self.save())
        self.bind("<Escape>", lambda _e: self.destroy())
        self.name.focus_set()
        self.grab_set()

    def save(self):
        title = self.name.get().strip()
        emoji = self.emoji.get().strip()
        if not title or not emoji:
            return
        self.on_add(title, emoji)
        self.destroy()

"""Shared visual style helpers for the Tk UI (light gray list, green checks)."""

import tkinter as tk

# Palette
BG = "#f2f2f7"
CARD_BG = "#ffffff"
ROW_BG = "#e5e5ea"       # grouped list rows
TEXT = "#1c1c1e"
MUTED = "#8e8e93"
ACCENT = "#007aff"
ACCENT_DARK = "#0062cc"
SUCCESS = "#34c759"

# Typography
FONT_FAMILY = "Helvetica"
TITLE = (FONT_FAMILY, 22, "bold")
SUBTITLE = (FONT_FAMILY, 11)
HEADING = (FONT_FAMILY, 13, "bold")
BODY = (FONT_FAMILY, 12)
EMOJI = (FONT_FAMILY, 18)
BUTTON = (FONT_FAMILY, 11, "bold")
CHECK = (FONT_FAMILY, 18)


def heading_label(parent, text, font=TITLE):
    return tk.Label(parent, text=text, bg=parent.cget("bg"), fg=TEXT, font=font)


def muted_label(parent, text, font=SUBTITLE, wrap=None, justify="left"):
    return tk.Label(
        parent,
        text=text,
        bg=parent.cget("bg"),
        fg=MUTED,
        font=font,
        justify=justify,
        wraplength=wrap,
    )


def primary_button(parent, text, command):
    return tk.Button(
        parent,
        text=text,
        command=command,
        bg=ACCENT,
        fg="#ffffff",
        activebackground=ACCENT_DARK,
        activeforeground="#ffffff",
        relief="flat",
        bd=0,
        font=BUTTON,
        padx=14,
        pady=6,
        cursor="hand2",
        highlightthickness=0,
    )


def ghost_button(parent, text, command):
    return tk.Button(
        parent,
        text=text,
        command=command,
        bg=parent.cget("bg"),
        fg=ACCENT,
        activebackground=BG,
        activeforeground=ACCENT_DARK,
        relief="flat",
        bd=0,
        font=BUTTON,
        padx=10,
        pady=6,
        cursor="hand2",
    )

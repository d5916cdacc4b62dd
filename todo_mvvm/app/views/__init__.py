"""Tkinter views: layout and widget callbacks only, no list state."""

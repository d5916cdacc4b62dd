"""Application composition layer for the Tkinter GUI.

``main.App`` wires views to the todo view models into a runnable desktop
workflow without placing list logic in views.
"""

"""Todo list with a lifted edit-session state holder.

Layers: ``domain`` (items, icons, errors), ``viewmodels`` (list and form
state), ``app`` (tkinter desktop runtime) and ``web_ui`` (NiceGUI runtime).
"""

__version__ = "0.1.0"

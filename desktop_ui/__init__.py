"""PySide6 host for the view switcher."""

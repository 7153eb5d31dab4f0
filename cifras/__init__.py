"""Caesar and columnar transposition ciphers, their attacks, and interactive menus."""

__version__ = "0.1.0"
__all__ = ["caesar", "transposition", "console", "caesar_menu", "transposition_menu"]
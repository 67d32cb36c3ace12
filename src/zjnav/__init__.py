"""Vim-aware pane navigation for zellij."""
__version__ = "0.1.0"

"""Utility helpers for bootstencil entry points."""

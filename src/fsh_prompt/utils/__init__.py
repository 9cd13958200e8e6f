"""Utility helpers for fsh-prompt."""

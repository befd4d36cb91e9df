"""Utility helpers for Doom Codex."""

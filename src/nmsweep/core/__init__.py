"""Core scanning and deletion logic."""

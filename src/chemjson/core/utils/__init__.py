"""Shared helpers for document field access."""

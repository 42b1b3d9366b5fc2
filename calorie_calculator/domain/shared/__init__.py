"""Shared kernel: answer record and the choice enums both contexts use."""

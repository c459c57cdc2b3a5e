"""Vaner backend - share pages and scheduled habit reminders."""

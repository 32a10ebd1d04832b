"""Insights over parsed statement transactions."""

"""Shared configuration, logging, and helper utilities."""

"""Shared helpers for the Cronofy API client."""

"""Command-line client for the dashboard API."""

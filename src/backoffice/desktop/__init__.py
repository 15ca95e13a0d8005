"""Flet display surface for the back-office console."""

"""Flet front end for the pot catalog."""

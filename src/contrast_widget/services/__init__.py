"""Headless services backing the contrast widget (menu dispatch, logging)."""

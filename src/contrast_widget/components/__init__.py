"""Reusable Qt components for the contrast widget."""

"""Adaptateur CLI (Typer + Rich) de SubMatch."""

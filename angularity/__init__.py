"""Angularity generator: scaffold new projects from generator-project templates."""

"""Bounded contexts: workspace, templating, rendering."""

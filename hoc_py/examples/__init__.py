"""Runnable hoc-py examples."""

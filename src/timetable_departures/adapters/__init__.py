"""Adapters - configuration, display and polling infrastructure."""

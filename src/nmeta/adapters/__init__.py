"""Adapters - configuration sources and web framework integration."""

"""Integrations that let Gas values travel inside third-party model layers."""

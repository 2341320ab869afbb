"""Adapters – host serializer integrations."""

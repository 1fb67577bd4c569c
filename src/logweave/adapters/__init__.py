"""Adapters implementing the Handler port."""

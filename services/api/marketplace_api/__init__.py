"""Marketplace search REST API service."""

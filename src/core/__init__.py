"""Catalog core: configuration, domain, interfaces and services."""

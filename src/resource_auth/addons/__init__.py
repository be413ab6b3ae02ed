"""Addons installable on a resource-auth ``Application``."""

"""RBAC registry service."""

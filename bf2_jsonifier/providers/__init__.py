"""Upstream ASPX providers."""

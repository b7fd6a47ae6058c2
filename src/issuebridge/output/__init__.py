"""Reporters: JSON, terminal, and scan-response enhancement."""

"""Diagnostic-message engine behind AssertKit."""

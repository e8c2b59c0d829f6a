"""Renderers for gate outcomes."""

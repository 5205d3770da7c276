"""Durable proposal-and-voting registry."""

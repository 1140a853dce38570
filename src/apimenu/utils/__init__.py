"""Utility helpers for apimenu."""

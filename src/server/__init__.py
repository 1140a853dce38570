"""HTTP server for apimenu."""

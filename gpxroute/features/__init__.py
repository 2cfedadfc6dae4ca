"""Feature modules: GPX parsing and route processing."""

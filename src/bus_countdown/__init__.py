"""Resolve a free-text stop query into concrete (route, direction, stop) countdown requests."""

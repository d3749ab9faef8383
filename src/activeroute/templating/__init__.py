"""Expose the checker to kida templates as globals."""

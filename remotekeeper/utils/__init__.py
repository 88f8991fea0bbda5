"""Shared utilities for remotekeeper."""

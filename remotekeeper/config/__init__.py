"""Configuration for remotekeeper."""

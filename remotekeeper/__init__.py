"""
remotekeeper - rclone remote management for backup dashboards
"""

__version__ = "0.3.0"

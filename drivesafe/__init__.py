"""
DriveSafe backend: drive sessions, speed samples and notification preferences.
"""

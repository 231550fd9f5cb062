"""Compose configurations, embedded resource files and image unpacking."""
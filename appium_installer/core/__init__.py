"""Core — models, configuration and wizard services."""

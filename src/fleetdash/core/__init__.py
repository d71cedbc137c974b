"""Core configuration and session handling."""

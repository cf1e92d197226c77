"""Configuration loading and logging helpers."""

"""Configuration loading and hot reload."""

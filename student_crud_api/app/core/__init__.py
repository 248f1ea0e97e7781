"""Configuration, logging and request dependencies."""

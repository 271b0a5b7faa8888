"""Core layer: configuration, logging, models, ports and exceptions."""

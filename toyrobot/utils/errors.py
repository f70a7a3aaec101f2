"""
Custom exception types for the toyrobot command pipeline.
Keep this focused and non-redundant; prefer built-ins where appropriate.
"""


class PlaceSyntaxError(ValueError):
    """Malformed PLACE arguments (field count, integers, position, direction)."""

    def __init__(self, message: str):
        self.original_message = message
        super().__init__(f"Invalid PLACE command: {message}")

    def __str__(self):
        return f"Invalid PLACE command: {self.original_message}"


class ConfigError(ValueError):
    """Invalid configuration value (table dimensions, etc.)."""

    def __init__(self, message: str):
        self.original_message = message
        super().__init__(f"Config error: {message}")

    def __str__(self):
        return f"Config error: {self.original_message}"

"""Domain layer: configuration value object and error taxonomy."""

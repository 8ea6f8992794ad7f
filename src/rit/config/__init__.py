"""Configuration: settings models, layered settings, logging setup."""

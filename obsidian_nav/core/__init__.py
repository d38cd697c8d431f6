"""Business logic behind the plugin commands."""

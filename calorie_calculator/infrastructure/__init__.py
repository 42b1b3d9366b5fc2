"""Infrastructure layer - configuration, logging and exporters."""

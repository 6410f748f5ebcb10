"""Package settings and the logging preset."""

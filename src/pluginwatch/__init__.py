"""Registry health checks for WordPress plugins installed through a mirror."""

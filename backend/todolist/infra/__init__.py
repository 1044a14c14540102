"""Framework adapters for the service-layer ports."""

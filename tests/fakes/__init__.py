"""In-memory stand-ins for the capabilities the use cases depend on."""

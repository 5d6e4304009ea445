"""Platform specific process source implementations."""

"""Infrastructure adapters for the domain protocols."""

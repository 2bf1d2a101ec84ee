"""Infrastructure layer - adapters for the domain and application ports."""

"""Infrastructure Layer - adapters for the domain ports and the event bus."""

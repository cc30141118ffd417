"""Domain core: scoring engine, services and observability."""

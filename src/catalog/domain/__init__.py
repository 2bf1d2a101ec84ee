"""Domain layer - aggregates, value objects, rules and ports."""

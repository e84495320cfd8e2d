"""Domain layer: clause, operator and sanitizer vocabulary."""

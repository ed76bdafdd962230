"""Domain layer: topology formulas, magnetics and thermal calculators, advisories."""

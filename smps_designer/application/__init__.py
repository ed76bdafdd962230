"""Application layer coordinating the domain calculators."""

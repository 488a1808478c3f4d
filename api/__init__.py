"""HTTP boundary for the shipping rate calculator."""

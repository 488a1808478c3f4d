"""Correios reference data: limits, origin, billable weight and service curves."""

"""
Distance Factor Configuration

The distance factor is the numeric difference between origin and destination
CEP divided by DISTANCE_SCALE. It is not a geographic distance; quotes must
keep reproducing it as-is.
"""

DISTANCE_SCALE = 10_000_000

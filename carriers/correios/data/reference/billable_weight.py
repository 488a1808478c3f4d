"""
Billable Weight Configuration

Correios cubic weight rules: 1 m3 of package volume bills as 200 kg.
"""

CUBIC_FACTOR = 200            # kg per cubic meter
GRAMS_PER_KG = 1_000
CM3_PER_M3 = 1_000_000        # cubic centimeters per cubic meter

"""
Service Pricing Curves

Linear cost curves over billable weight (kg) and distance factor:

    price = BASE_PRICE + billable_weight * PRICE_PER_KG + distance * PRICE_PER_DISTANCE
    days  = BASE_DAYS + floor(distance * DAYS_PER_DISTANCE)
"""

# Express (SEDEX)
EXPRESS_CODE = "04014"
EXPRESS_NAME = "Express"
EXPRESS_BASE_PRICE = 25.00
EXPRESS_PRICE_PER_KG = 5.00
EXPRESS_PRICE_PER_DISTANCE = 50.00
EXPRESS_BASE_DAYS = 2
EXPRESS_DAYS_PER_DISTANCE = 3

# Standard (PAC)
STANDARD_CODE = "04510"
STANDARD_NAME = "Standard"
STANDARD_BASE_PRICE = 15.00
STANDARD_PRICE_PER_KG = 3.00
STANDARD_PRICE_PER_DISTANCE = 30.00
STANDARD_BASE_DAYS = 5
STANDARD_DAYS_PER_DISTANCE = 5

# Store pickup (sentinel, always free and same day)
PICKUP_CODE = "PICKUP"
PICKUP_NAME = "Store Pickup"

"""Product module constants."""

# Largest quantity a product can hold: the int32 range that
# ``PositiveIntegerField`` stores on every supported database.
MAX_QUANTITY_IN_STOCK = 2**31 - 1

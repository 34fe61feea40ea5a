"""
Fixed values used by the hof factories.

None of these are read from the environment.
"""

# Color channels (8-bit)
CHANNEL_MIN = 0
CHANNEL_MAX = 255

# Lives never drop below this
LIVES_FLOOR = 0

# Pocket economy
TRINKET_BUY_PRICE = 10
TRINKET_SELL_PRICE = 5

# User names: one or more ASCII letters or spaces
NAME_ALLOWED_CHARS = "A-Za-z "

# Message logger
MESSAGE_FIRST_ID = 1
MESSAGE_TEMPLATE = "[{id}] {text}"

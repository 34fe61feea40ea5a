"""
hof: small stateful objects built from closures.

Every factory returns a fresh, independent instance:

    from hof import counter, pocket

    c = counter(2)
    c.next()        # 3

    p = pocket(50)
    p.buy()         # True
    p.coins()       # 40
"""

from hof.modules.color import Color, color
from hof.modules.counter import Counter, counter
from hof.modules.lives import Lives, lives
from hof.modules.messages import MessageLog, messages
from hof.modules.multiplier import multiply
from hof.modules.pocket import Pocket, pocket
from hof.modules.shared.exceptions import DomainValidationError, HofDomainException
from hof.modules.total import Total, total
from hof.modules.user import User, user

__version__ = "1.0.0"

__all__ = [
    # Factories
    "counter",
    "multiply",
    "total",
    "user",
    "color",
    "lives",
    "messages",
    "pocket",
    # Handles
    "Counter",
    "Total",
    "User",
    "Color",
    "Lives",
    "MessageLog",
    "Pocket",
    # Errors
    "HofDomainException",
    "DomainValidationError",
]

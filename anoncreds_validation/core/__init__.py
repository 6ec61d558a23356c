"""
Core components: identifier patterns, validation contract, models and exceptions.
"""

from .exceptions import *
from .patterns import *
from .validators import *
from .models import *

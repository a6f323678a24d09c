from .poker_eval import *  # noqa: F401,F403
from .poker_eval import __all__

__version__ = "0.1.0"

"""Binary relations over finite sets, for use within a small set-theory toolkit"""

# Add imports here
from .relations import *

from ._version import __version__

TOOLKIT_NAME : str = 'binrel'

"""
Runtime value comparison for expression and template evaluators

Answers three questions about values whose type is only known at run
time: are these equal, is this one contained in that collection, and is
this one meaningful.
"""

__version__ = "0.1.0"


from ._error import *
from ._capability import *
from ._value import *
from ._resolve import *
from ._kind import *
from ._equal import *
from ._printable import *
from ._member import *
from ._truth import *
from ._funcs import *
from ._literal import *

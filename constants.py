import math
from types import MappingProxyType

# Names are matched case sensitively; lowercase letters stay variables.
CONSTANTS = MappingProxyType({
    "PI": math.pi,
    "TAU": math.tau,
    "E": math.e,
    "PHI": 1.618_033_988_749_895,
})


def lookup(name: str):
    return CONSTANTS.get(name)

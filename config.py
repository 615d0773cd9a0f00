import os

VERSION = "0.1.0"

# Variable the simplifier hoists toward when no target is given
DEFAULT_TARGET = "X"

# Ceiling for fixed-point loops in the simplifier and the equation solver
MAX_ITERATIONS = 1000

# Decimal places kept by the numeric evaluator
ROUND_DIGITS = 15

LOG_LEVEL = os.environ.get("CAS_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

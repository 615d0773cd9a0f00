class MathError(Exception):
    def __init__(self, message, code="9999"):
        super().__init__(message)
        self.message = message
        self.code = code


class ParserError(MathError):
    pass


class EvaluatorError(MathError):
    pass


class SolverError(MathError):
    pass


# Codes are structured as:
# 1. Digit: stage (1 parser, 2 evaluator, 3 solver)
# 2. to 4. Digit: error number
ERROR_MESSAGES = {
    "1000": "Syntax error: no name found for function",
    "1001": "Syntax error: no equals sign found '='",
    "1002": "Syntax error: too many equals signs",
    "1003": "Syntax error: invalid token '{}'",
    "1004": "Syntax error: invalid operator '{}'",
    "1005": "Syntax error: unknown constant '{}'",

    "2000": "Syntax error: can't find function with the name '{}'",
    "2001": "Error while parsing: {}",
    "2002": "Equality found in evaluator",
    "2003": "Function '{}' expects {} argument(s), got {}",
    "2004": "Can't evaluate unbound variable '{}'",

    "3000": "Not an equation: {}",
    "3001": "Rewriting did not converge after {} passes",

    "9999": "Unexpected Error: ",
}


# -----------------------------
# Parser errors
# -----------------------------

class NoFunctionName(ParserError):
    def __init__(self):
        super().__init__(ERROR_MESSAGES["1000"], code="1000")


class NoEquals(ParserError):
    def __init__(self):
        super().__init__(ERROR_MESSAGES["1001"], code="1001")


class EqualsCount(ParserError):
    def __init__(self, count=None):
        super().__init__(ERROR_MESSAGES["1002"], code="1002")
        self.count = count


class InvalidToken(ParserError):
    def __init__(self, text):
        super().__init__(ERROR_MESSAGES["1003"].format(text), code="1003")
        self.text = text


class InvalidOperator(ParserError):
    def __init__(self, text):
        super().__init__(ERROR_MESSAGES["1004"].format(text), code="1004")
        self.text = text


class UnknownConstant(ParserError):
    def __init__(self, name):
        super().__init__(ERROR_MESSAGES["1005"].format(name), code="1005")
        self.name = name


# -----------------------------
# Evaluator errors
# -----------------------------

class UnknownFunction(EvaluatorError):
    def __init__(self, name):
        super().__init__(ERROR_MESSAGES["2000"].format(name), code="2000")
        self.name = name


class ParseFailure(EvaluatorError):
    def __init__(self, inner):
        super().__init__(ERROR_MESSAGES["2001"].format(inner), code="2001")
        self.inner = inner


class EqualityInEval(EvaluatorError):
    def __init__(self):
        super().__init__(ERROR_MESSAGES["2002"], code="2002")


class WrongArity(EvaluatorError):
    def __init__(self, name, expected, actual):
        super().__init__(ERROR_MESSAGES["2003"].format(name, expected, actual), code="2003")
        self.name = name
        self.expected = expected
        self.actual = actual


class UnboundVariable(EvaluatorError):
    def __init__(self, name):
        super().__init__(ERROR_MESSAGES["2004"].format(name), code="2004")
        self.name = name


# -----------------------------
# Solver errors
# -----------------------------

class NotAnEquation(SolverError):
    def __init__(self, equation):
        super().__init__(ERROR_MESSAGES["3000"].format(equation), code="3000")
        self.equation = equation


class ConvergenceError(SolverError):
    def __init__(self, iterations):
        super().__init__(ERROR_MESSAGES["3001"].format(iterations), code="3001")
        self.iterations = iterations

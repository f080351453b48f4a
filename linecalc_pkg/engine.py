"""Arithmetic engine built on SymPy.

This module handles:
- Parsing and evaluating one preprocessed line against a variable scope
- ``name = expr`` assignments written back into that scope
- Guarding against powers too large to compute exactly
- Tagging results as Numeric or Other at the engine boundary
- Auto-notation formatting (fixed or scientific by exponent range)
- Best-effort float conversion
"""

from __future__ import annotations

import decimal
import keyword
import math
from tokenize import TokenError
from typing import Any

import sympy as sp
from sympy import parse_expr, postorder_traversal
from sympy.core.function import AppliedUndef

from .config import (
    ALLOWED_ENGINE_NAMES,
    ASSIGNMENT_RE,
    DISPLAY_PRECISION,
    EXPONENT_LITERAL_REGEX,
    IDENTIFIER_REGEX,
    LOWER_EXP,
    MAX_DECIMAL_EXPONENT,
    MAX_EXACT_DIGITS,
    NUMERIC_TRANSFORMATIONS,
    TRANSFORMATIONS,
    UPPER_EXP,
    WORKING_PRECISION,
)
from .logging_config import get_logger
from .types import EngineError, EngineValue, Numeric, Other

logger = get_logger("engine")


def _round_half_away(value: Any, digits: Any = 0) -> sp.Expr:
    """round(x) / round(x, n): half away from zero, like a pocket calculator."""
    value = sp.sympify(value)
    if value.is_integer:
        return value
    scale = sp.Integer(10) ** int(digits)
    return sp.sign(value) * sp.floor(abs(value) * scale + sp.S.Half) / scale


def _undefined_name(name: str, *args: Any, **kwargs: Any) -> Any:
    # The parser emits Symbol('x') / Function('f') only for names that are
    # neither in the namespace nor in the scope
    raise EngineError(f"Undefined symbol: {name}", "UNDEFINED_SYMBOL")


def _unsupported_factorial(*args: Any) -> Any:
    raise EngineError("Factorial is not supported", "UNSUPPORTED")


def _working_float(literal: Any) -> sp.Float:
    # An explicit precision keeps Float from expanding the literal exactly
    return sp.Float(literal, WORKING_PRECISION)


ENGINE_NAMESPACE: dict[str, Any] = {
    **ALLOWED_ENGINE_NAMES,
    "round": _round_half_away,
}

# Names the generated parser code refers to; everything else comes from
# the namespace or the scope
_PARSE_GLOBALS: dict[str, Any] = {
    "__builtins__": {},
    "Integer": sp.Integer,
    "Float": sp.Float,
    "Rational": sp.Rational,
    "Symbol": _undefined_name,
    "Function": _undefined_name,
    "factorial": _unsupported_factorial,
    "I": sp.I,
}

# Constructors the unevaluated parse refers to by name
_TREE_BUILDERS: dict[str, Any] = {
    "Add": sp.Add,
    "Mul": sp.Mul,
    "Pow": sp.Pow,
    "And": sp.And,
    "Eq": sp.Eq,
    "Ne": sp.Ne,
    "Lt": sp.Lt,
    "Le": sp.Le,
    "Gt": sp.Gt,
    "Ge": sp.Ge,
}


def _transformations_for(expr_str: str) -> tuple:
    """Pick parse transformations; huge literals stay floating point.

    Raises:
        EngineError: If a literal exponent is beyond MAX_DECIMAL_EXPONENT
    """
    largest = max(
        (int(m.group(1)) for m in EXPONENT_LITERAL_REGEX.finditer(expr_str)),
        default=0,
    )
    if largest > MAX_DECIMAL_EXPONENT:
        raise EngineError("Number is too large", "OVERFLOW")
    if largest > MAX_EXACT_DIGITS:
        return NUMERIC_TRANSFORMATIONS
    return TRANSFORMATIONS


def _parse(
    expr_str: str,
    scope: dict[str, Any],
    transformations: tuple = TRANSFORMATIONS,
    evaluate: bool = True,
) -> Any:
    expr_str = expr_str.strip()
    if not expr_str:
        raise EngineError("Expression is empty", "PARSE_ERROR")
    local_dict = dict(ENGINE_NAMESPACE)
    local_dict.update(scope)
    global_dict = dict(_PARSE_GLOBALS)
    if not evaluate:
        typed = set(IDENTIFIER_REGEX.findall(expr_str)) & _TREE_BUILDERS.keys()
        if typed:
            raise EngineError(
                f"Undefined symbol: {min(typed)}", "UNDEFINED_SYMBOL"
            )
        global_dict.update(_TREE_BUILDERS)
        for name in _TREE_BUILDERS:
            local_dict.pop(name, None)
    if transformations is NUMERIC_TRANSFORMATIONS:
        global_dict["Float"] = _working_float
    try:
        return parse_expr(
            expr_str,
            local_dict=local_dict,
            global_dict=global_dict,
            transformations=transformations,
            evaluate=evaluate,
        )
    except (SyntaxError, TokenError) as e:
        logger.debug(f"Parse error for {expr_str!r}: {e}")
        raise EngineError(f"Could not parse expression: {e}", "PARSE_ERROR") from e
    except (
        TypeError,
        ValueError,
        AttributeError,
        NameError,
        ArithmeticError,
        RecursionError,
    ) as e:
        logger.debug(f"Evaluation error for {expr_str!r}: {e}")
        raise EngineError(f"Evaluation failed: {e}", "EVAL_ERROR") from e


def _power_size(node: sp.Pow, exact: bool) -> tuple[Any, Any] | None:
    """Estimate a numeric power as (decimal exponent, exact digit count).

    The first item is about log10 of the result's magnitude; the second is
    how many digits an exact rational result would need. None when the
    power is symbolic or not a finite real quantity.
    """
    base, exponent = node.args
    if not (base.is_number and exponent.is_number):
        return None
    try:
        base_approx = abs(base.evalf(15))
        exp_approx = abs(exponent.evalf(15))
    except (TypeError, ValueError, ArithmeticError):
        return None
    if not (base_approx.is_Number and exp_approx.is_Number):
        return None
    if not (base_approx.is_finite and exp_approx.is_finite):
        return None
    if base_approx.is_zero or exp_approx.is_zero:
        return sp.S.Zero, sp.S.Zero

    magnitude = (exp_approx * abs(sp.log(base_approx))).evalf(15) / math.log(10)
    size = magnitude
    if exact:
        try:
            rational = base.doit()
        except (TypeError, ValueError, ArithmeticError):
            return magnitude, size
        if rational.is_Rational:
            widest = max(abs(rational.p), abs(rational.q), 2)
            size = exp_approx * math.log10(widest)
    return magnitude, size


def _needs_numeric(tree: Any) -> bool:
    """Check every power in an unevaluated tree against the digit limits.

    Powers are visited innermost first, so an exponent is only approximated
    after its own powers passed the overflow check.

    Returns:
        True when some power is too large to compute exactly

    Raises:
        EngineError: If a power overflows MAX_DECIMAL_EXPONENT
    """
    if not isinstance(tree, sp.Basic):
        return False
    numeric = False
    try:
        for node in postorder_traversal(tree):
            if not isinstance(node, sp.Pow):
                continue
            estimate = _power_size(node, exact=not numeric)
            if estimate is None:
                continue
            magnitude, size = estimate
            if magnitude > MAX_DECIMAL_EXPONENT:
                raise EngineError("Result is out of range", "OVERFLOW")
            if size > MAX_EXACT_DIGITS:
                numeric = True
    except RecursionError as e:
        raise EngineError("Expression is too deeply nested", "TOO_DEEP") from e
    return numeric


def _evaluate(expr_str: str, scope: dict[str, Any]) -> Any:
    """Parse once unevaluated to size the powers, then evaluate."""
    transformations = _transformations_for(expr_str)
    tree = _parse(expr_str, scope, transformations, evaluate=False)
    if not _needs_numeric(tree):
        return _parse(expr_str, scope, transformations, evaluate=True)

    logger.debug(f"Evaluating {expr_str!r} at {WORKING_PRECISION} digits")
    try:
        return tree.evalf(WORKING_PRECISION)
    except (TypeError, ValueError, ArithmeticError) as e:
        raise EngineError(f"Evaluation failed: {e}", "EVAL_ERROR") from e


def to_engine_value(value: Any) -> EngineValue:
    """Tag a raw SymPy result as Numeric or Other.

    Raises:
        EngineError: If the value references undefined names, or is
            undefined (complex infinity, NaN) or not real.
    """
    if value is None or isinstance(value, bool):
        return Other(value)
    if isinstance(value, (int, float)):
        value = sp.sympify(value)
    if isinstance(value, sp.Basic):
        undefined = {str(s) for s in value.free_symbols}
        undefined.update(str(f.func) for f in value.atoms(AppliedUndef))
        if undefined:
            raise EngineError(
                f"Undefined symbol(s): {', '.join(sorted(undefined))}",
                "UNDEFINED_SYMBOL",
            )
    if not isinstance(value, sp.Expr):
        return Other(value)
    if value == sp.oo or value == -sp.oo:
        return Numeric(value)
    if value.has(sp.zoo, sp.nan):
        raise EngineError("Result is undefined", "UNDEFINED_RESULT")
    try:
        approx = value.evalf(WORKING_PRECISION)
    except (TypeError, ValueError, ArithmeticError) as e:
        raise EngineError(f"Evaluation failed: {e}", "EVAL_ERROR") from e
    if not approx.is_Number:
        raise EngineError("Result is not a real number", "UNDEFINED_RESULT")
    return Numeric(value)


def evaluate_expression(expr_str: str, scope: dict[str, Any]) -> EngineValue:
    """Evaluate one preprocessed line.

    ``scope`` is read for variable values and written by assignments, so the
    same dict must be passed for every line of a pass.

    Args:
        expr_str: Engine-ready expression, e.g. "_v0 = 3500" or "ans*2"
        scope: Mutable variable environment

    Returns:
        Numeric or Other tagged value

    Raises:
        EngineError: On any malformed or semantically invalid input
    """
    match = ASSIGNMENT_RE.match(expr_str)
    if match is None:
        return to_engine_value(_evaluate(expr_str, scope))

    name, rhs = match.group(1), match.group(2)
    if keyword.iskeyword(name):
        raise EngineError(f"Cannot assign to '{name}'", "ASSIGNMENT_ERROR")
    raw = _evaluate(rhs, scope)
    tagged = to_engine_value(raw)
    scope[name] = raw
    return tagged


def format_auto(
    value: Any,
    lower_exp: int = LOWER_EXP,
    upper_exp: int = UPPER_EXP,
    precision: int = DISPLAY_PRECISION,
) -> str:
    """Format a number in auto notation.

    The value is rounded to ``precision`` significant digits (half up).
    Fixed notation is used when ``lower_exp <= exponent < upper_exp``,
    scientific notation (``1.5e+25``) otherwise. Trailing zeros are dropped.

    Args:
        value: SymPy number (or anything ``sympify`` accepts)
        lower_exp: Smallest exponent shown in fixed notation
        upper_exp: First exponent shown in scientific notation
        precision: Significant digits

    Returns:
        Raw display string, e.g. "3700", "0.333333333333", "1e+21"
    """
    value = sp.sympify(value)
    if value == sp.oo:
        return "Infinity"
    if value == -sp.oo:
        return "-Infinity"

    approx = value.evalf(max(WORKING_PRECISION, precision + 5))
    ctx = decimal.Context(
        prec=precision,
        rounding=decimal.ROUND_HALF_UP,
        Emax=decimal.MAX_EMAX,
        Emin=decimal.MIN_EMIN,
    )
    number = ctx.plus(decimal.Decimal(str(approx)))
    if number.is_zero():
        return "0"

    exponent = number.adjusted()
    number = number.normalize(ctx)
    if lower_exp <= exponent < upper_exp:
        return format(number, "f")

    sign, digits, _ = number.as_tuple()
    mantissa = "".join(str(d) for d in digits)
    if len(mantissa) > 1:
        mantissa = f"{mantissa[0]}.{mantissa[1:]}"
    exp_sign = "+" if exponent >= 0 else "-"
    return f"{'-' if sign else ''}{mantissa}e{exp_sign}{abs(exponent)}"


def to_number(value: Any) -> float:
    """Best-effort float approximation; 0.0 when conversion fails."""
    try:
        return float(value)
    except (TypeError, ValueError, OverflowError, AttributeError):
        return 0.0

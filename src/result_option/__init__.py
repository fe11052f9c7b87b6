"""result-option: a three-way Value | Absent | Failure type for Python 3.13+.

Flat imports (preferred):
    from result_option import ResultOption, Value, Absent, Failure
    from result_option import from_result, from_option, from_nullable, safe

Submodule imports (for organization):
    from result_option.types import ResultOption, Option, Result
    from result_option.convert import from_result
    from result_option.infallible import unwrap_infallible
"""

# Configuration
from result_option._config import Config, get_config, init

# Conversions
from result_option.convert import from_nullable, from_option, from_result

# Decorators
from result_option.decorators import safe

# Errors
from result_option.errors import UnwrapError

# Infallible extension
from result_option.infallible import unwrap_infallible

# Types
from result_option.types import (
    Absent,
    AbsentType,
    Err,
    Failure,
    Nothing,
    NothingType,
    Ok,
    Option,
    Result,
    ResultOption,
    Some,
    State,
    Value,
)

__all__ = [
    "Absent",
    "AbsentType",
    "Config",
    "Err",
    "Failure",
    "Nothing",
    "NothingType",
    "Ok",
    "Option",
    "Result",
    "ResultOption",
    "Some",
    "State",
    "UnwrapError",
    "Value",
    "from_nullable",
    "from_option",
    "from_result",
    "get_config",
    "init",
    "safe",
    "unwrap_infallible",
]

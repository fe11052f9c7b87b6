"""Core types: ResultOption (Value, Absent, Failure) and the binary Option and Result."""

from result_option.types.option import Nothing, NothingType, Option, Some
from result_option.types.result import Err, Ok, Result
from result_option.types.result_option import Absent, AbsentType, Failure, ResultOption, Value
from result_option.types.state import State

__all__ = [
    "Absent",
    "AbsentType",
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
    "Value",
]

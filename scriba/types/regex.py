"""Common regex patterns used in mutiple modules."""

RE_IS_INT = r"^[+-]?[0-9]+(?:_[0-9]+)*$"
"""Strings matching int representations we're able to parse."""

RE_IS_FLOAT = r"^[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?$"
"""Decimal and exponential notation. Excludes words like "nan" or "inf" that Python
would happily turn into floats.
"""

RE_WHITESPACE = r"\s+"

RE_NON_WORD = r"\W+"

"""
bigint - Arbitrary-precision signed integers, digit by decimal digit.

Usage example:

    from bigint import BigInt

    n = BigInt("987654321987654321")
    assert BigInt("9000000009") == n % BigInt("123456789123456789")
    assert "FF" == BigInt(255).to_string(16)
    assert BigInt(371) == BigInt("aB", 36)
"""

import logging

from .digits import InvalidArgument
from .integer import BigInt

__all__ = [
    'BigInt',
    'InvalidArgument',
]

logging.getLogger(__name__).addHandler(logging.NullHandler())

from . import version
__version__ = version.__doc__

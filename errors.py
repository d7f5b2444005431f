

from typing import *


class OrdinalError(Exception):
    '''
    Base class for all the exceptions raised by this library.
    Messages have the structure:

    "x must be y but got z instead (at function f)"

    - x is the name of the value that could not be handled
    - y is the expected type or range
    - z shows the actual value or type
    - f: Name of the function that raised the error

    e.g:
    "value must be u8 (0..255) but got 300 instead (at function to_u8)"
    "value must be an integer but got float instead (at function Ordinal)"
    '''

    def __init__(self, func: str, param: str, expected: str, got: str) -> None:
        self.func = func
        super().__init__('{} must be {} but got {} instead (at function {})'.format(param, expected, got, func))



class ConversionError(OrdinalError, OverflowError):
    '''
    Raised when a value does not fit in the fixed-width integer type it is
    being narrowed to. The offending value and the width are kept in the
    attributes 'value' and 'width'
    '''
    def __init__(self, value: int, width, func: str) -> None:
        self.value, self.width = value, width
        super().__init__(func, 'value', width.describe(), str(value))



class NotAnIntegerError(OrdinalError, TypeError):
    '''
    Raised when trying to build an ordinal from something that is not an integer
    '''
    def __init__(self, value, func: str='Ordinal') -> None:
        self.value = value
        super().__init__(func, 'value', 'an integer',
            type(value).__name__ if value is not None else str(None))

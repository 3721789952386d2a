"""
Imastack Value - thin wrapper around a double precision float
"""

import math
import sys


def _parse_float(text):
    """Strict float parse: no surrounding whitespace, no digit separators"""
    if not text or not text.isascii() or text != text.strip() or '_' in text:
        raise ValueError(f"not a number: {text!r}")
    return float(text)


class Value:
    """Immutable numeric value on the operand stack"""
    
    __slots__ = ('number',)
    
    def __init__(self, number=0.0):
        object.__setattr__(self, 'number', float(number))
    
    def __setattr__(self, name, value):
        raise AttributeError("Value is immutable")
    
    @classmethod
    def from_text(cls, text):
        """Parse text into a Value; anything unparseable becomes 0.0"""
        try:
            return cls(_parse_float(text))
        except ValueError:
            return cls(0.0)
    
    def to_index(self):
        """Convert to a program index, saturating like an unsigned cast.
        
        Truncates toward zero. Negative numbers and NaN map to 0, anything
        too large for an index maps to sys.maxsize.
        """
        if math.isnan(self.number) or self.number <= 0:
            return 0
        if self.number >= sys.maxsize:
            return sys.maxsize
        return int(self.number)
    
    def __int__(self):
        return self.to_index()
    
    def __float__(self):
        return self.number
    
    def __bool__(self):
        return self.number != 0.0
    
    def __add__(self, other):
        return Value(self.number + float(other))
    
    def __sub__(self, other):
        return Value(self.number - float(other))
    
    def __mul__(self, other):
        return Value(self.number * float(other))
    
    def __truediv__(self, other):
        divisor = float(other)
        try:
            return Value(self.number / divisor)
        except ZeroDivisionError:
            # IEEE-754 result, Python raises instead
            if self.number == 0.0 or math.isnan(self.number):
                return Value(math.nan)
            return Value(math.copysign(math.inf, self.number) * math.copysign(1.0, divisor))
    
    def __eq__(self, other):
        if isinstance(other, Value):
            return self.number == other.number
        if isinstance(other, (int, float)):
            return self.number == other
        return NotImplemented
    
    def __hash__(self):
        return hash(self.number)
    
    def __repr__(self):
        return f"Value({self.number!r})"
    
    def __str__(self):
        return str(self.number)

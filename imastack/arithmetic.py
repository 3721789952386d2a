"""
Imastack Arithmetic - Mathematical operations
"""

from .compiler import Opcode
from .value import Value


class StackArithmetic:
    """Mixin providing arithmetic operations"""
    
    def _register_arithmetic_words(self):
        """Register arithmetic words"""
        self.words[Opcode.ADD] = self._plus
        self.words[Opcode.SUB] = self._minus
        self.words[Opcode.MUL] = self._mult
        self.words[Opcode.DIV] = self._div
    
    def _plus(self):
        b, a = self.get_ops()
        self.push(a + b)
    
    def _minus(self):
        b, a = self.get_ops()
        self.push(a - b)
    
    def _mult(self):
        b, a = self.get_ops()
        self.push(a * b)
    
    def _div(self):
        b, a = self.get_ops()
        if b == 0.0:
            self.push(Value(0.0))
        else:
            self.push(a / b)

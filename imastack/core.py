"""
Imastack Core - Base class with fundamental infrastructure
- Exception classes
- Operand stack and output management
- Word registry
"""

from .value import Value


class ImastackException(Exception):
    """Base exception for the imastack package"""


class StepBudgetExceeded(ImastackException):
    """Raised by bounded runners when a line keeps jumping past its budget"""
    def __init__(self, steps):
        self.steps = steps
        super().__init__(f"step budget exhausted after {steps} instructions")


class StackBase:
    """Base mixin providing the operand stack, output and word registry"""
    
    def __init__(self):
        self.stack = []
        self.output = []
        self.words = {}
        
        self._register_core_words()
    
    def _register_core_words(self):
        """Register core words - to be extended by mixins"""
        pass
    
    def push(self, item):
        self.stack.append(item)
    
    def pop(self):
        """Pop the top value; an empty stack yields zero"""
        if self.stack:
            return self.stack.pop()
        return Value(0.0)
    
    def get_ops(self):
        """Pop two values: (top, next)"""
        return self.pop(), self.pop()
    
    def push_number(self, number):
        self.push(number)

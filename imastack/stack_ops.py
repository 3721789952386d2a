"""
Imastack Stack Operations - Stack manipulation and output words
"""

import math

from .compiler import Opcode


def format_value(item):
    """Format a value for display, dropping the fraction of whole numbers"""
    number = float(item)
    if math.isnan(number):
        return 'NaN'
    if math.isinf(number):
        return 'inf' if number > 0 else '-inf'
    if number == int(number):
        return str(int(number))
    return str(number)


class StackOps:
    """Mixin providing stack manipulation operations"""
    
    def _register_stack_words(self):
        """Register stack words"""
        self.words[Opcode.DUP] = self._dup
        self.words[Opcode.SWP] = self._swap
        self.words[Opcode.PRINT] = self._print
    
    def _dup(self):
        a = self.pop()
        self.stack.extend([a, a])
    
    def _swap(self):
        b, a = self.get_ops()
        self.stack.extend([b, a])
    
    def _print(self):
        """Pop into the output sequence; nothing is written to stdout"""
        self.output.append(self.pop())
    
    def format_stack(self):
        formatted_stack = ' '.join(format_value(item) for item in self.stack)
        return f"<{len(self.stack)}> {formatted_stack}".rstrip()

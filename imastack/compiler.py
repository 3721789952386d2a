"""
Imastack Compiler - turns source tokens into instructions
"""

import enum
import logging

from .value import Value

logger = logging.getLogger(__name__)


class Opcode(enum.Enum):
    ADD = '+'
    SUB = '-'
    MUL = '*'
    DIV = '/'
    DUP = 'dup'
    SWP = 'swp'
    JNZ = 'jnz'
    PRINT = 'print'
    LITERAL = None


WORDS = {op.value: op for op in Opcode if op is not Opcode.LITERAL}


class Instruction:
    """One decoded token: an operator, or a literal carrying its Value"""
    
    __slots__ = ('op', 'value')
    
    def __init__(self, op, value=None):
        if op is Opcode.LITERAL and value is None:
            value = Value(0.0)
        object.__setattr__(self, 'op', op)
        object.__setattr__(self, 'value', value)
    
    def __setattr__(self, name, value):
        raise AttributeError("Instruction is immutable")
    
    @classmethod
    def literal(cls, value):
        return cls(Opcode.LITERAL, value)
    
    def as_value(self):
        """Literals give their number, operators give 0.0"""
        if self.op is Opcode.LITERAL:
            return self.value
        return Value(0.0)
    
    def __eq__(self, other):
        if not isinstance(other, Instruction):
            return NotImplemented
        return self.op is other.op and self.value == other.value
    
    def __hash__(self):
        return hash((self.op, self.value))
    
    def __repr__(self):
        if self.op is Opcode.LITERAL:
            return f"Instruction.literal({self.value!r})"
        return f"Instruction({self.op})"
    
    def __str__(self):
        if self.op is Opcode.LITERAL:
            return str(self.value)
        return self.op.value


def tokenize(text):
    """Split source on single spaces; adjacent spaces leave empty tokens"""
    return text.split(' ')


def decode_token(token):
    op = WORDS.get(token)
    if op is not None:
        return Instruction(op)
    return Instruction.literal(Value.from_text(token))


def compile_program(tokens):
    """Decode every token, in order, into exactly one instruction"""
    program = tuple(decode_token(tok) for tok in tokens)
    logger.debug("compiled %d instructions", len(program))
    return program

"""
imastack - a minimal stack language interpreter

Usage:
    from imastack import evaluate
    evaluate("1 2 + print")        # [3.0]

    from imastack import InteractiveImastack
    InteractiveImastack().repl()

Words: + - * / dup swp jnz print. Any other token is a number literal
(0 when it does not parse). Nothing ever raises: underflow and division
by zero give 0, a jump out of the program ends it.
"""

from .core import ImastackException, StepBudgetExceeded, StackBase
from .value import Value
from .compiler import Instruction, Opcode, compile_program, decode_token, tokenize
from .stack_ops import format_value
from .repl import (Machine, InteractiveImastack, evaluate, run_bounded,
                   run_source, see)

eval_line = evaluate

__all__ = ['evaluate', 'eval_line', 'run_source', 'run_bounded', 'Machine',
           'InteractiveImastack', 'Value', 'Instruction', 'Opcode',
           'compile_program', 'tokenize', 'ImastackException',
           'StepBudgetExceeded']
__version__ = '0.1.0'

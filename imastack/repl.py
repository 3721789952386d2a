"""
Imastack REPL - Execution loop, entry points and interactive front end
"""

import logging
import os

from .core import StackBase, ImastackException, StepBudgetExceeded
from .arithmetic import StackArithmetic
from .stack_ops import StackOps, format_value
from .control_flow import StackControlFlow
from .compiler import Opcode, compile_program, tokenize

logger = logging.getLogger(__name__)

DEFAULT_STEP_BUDGET = 1_000_000


class Machine(StackBase, StackArithmetic, StackOps, StackControlFlow):
    """Stack machine combining all word mixins, owned by a single evaluation"""
    
    def __init__(self):
        super().__init__()
        self._register_all_words()
    
    def _register_all_words(self):
        """Register all words from all mixins"""
        self._register_arithmetic_words()
        self._register_stack_words()
        self._register_control_flow_words()
    
    def dispatch(self, instruction):
        """Execute one instruction; returns a new counter only for a taken jump"""
        if instruction.op is Opcode.LITERAL:
            self.push_number(instruction.value)
            return None
        return self.words[instruction.op]()
    
    def steps(self, program):
        """Run program one instruction at a time, yielding the counter after each.
        
        There is no limit on the number of steps: a jump that keeps landing
        inside the program loops forever. Callers that need a bound count the
        yielded steps themselves (see run_bounded).
        """
        pc = 0
        while pc < len(program):
            target = self.dispatch(program[pc])
            if target is None:
                pc += 1
            else:
                pc = target
            yield pc
        logger.debug("halted at %d of %d", pc, len(program))
    
    def run(self, program):
        for _ in self.steps(program):
            pass
        return self.output


def run_source(text):
    """Evaluate one line on a fresh machine and return the machine"""
    machine = Machine()
    machine.run(compile_program(tokenize(text)))
    return machine


def evaluate(text):
    """Evaluate one line of source, returning the printed numbers in order"""
    return [float(v) for v in run_source(text).output]


def run_bounded(text, max_steps=DEFAULT_STEP_BUDGET):
    """Like run_source, but give up after max_steps instructions.
    
    max_steps of None means no bound.
    """
    machine = Machine()
    program = compile_program(tokenize(text))
    if max_steps is None:
        machine.run(program)
        return machine
    
    count = 0
    for pc in machine.steps(program):
        count += 1
        if count >= max_steps and pc < len(program):
            raise StepBudgetExceeded(count)
    return machine


def see(text):
    """Listing of the decoded program, one instruction per line"""
    program = compile_program(tokenize(text))
    return '\n'.join(f"{i:3d}. {instruction.op.name:10} {instruction}"
                     for i, instruction in enumerate(program))


class ImastackREPL:
    """Mixin providing REPL functionality"""
    
    def _ipython_input(self, prompt):
        """Input using IPython's own input system when running inside IPython"""
        try:
            from IPython import get_ipython
        except ImportError:
            return input(prompt)
        ip = get_ipython()
        if ip is not None and hasattr(ip, 'pt_app'):
            return ip.pt_app.prompt(prompt)
        return input(prompt)
    
    def _detect_ipython(self):
        """Detect if running inside IPython"""
        try:
            from IPython import get_ipython
        except ImportError:
            return False
        return get_ipython() is not None
    
    def _step_budget_from_env(self):
        raw = os.environ.get('IMASTACK_STEP_BUDGET')
        if raw is None:
            return self.step_budget
        try:
            budget = int(raw)
        except ValueError:
            logger.warning("ignoring IMASTACK_STEP_BUDGET=%r, not an integer", raw)
            return self.step_budget
        return budget if budget > 0 else None
    
    def _help(self):
        print("Words: + - * / dup swp jnz print; anything else is a number")
        print("Commands: .s (stack of last line), see <code>, help, bye")
    
    def repl(self, ipython_mode=None):
        """Start interactive REPL
        
        Every line is evaluated on its own fresh machine and the printed
        values are shown below it.
        
        Args:
            ipython_mode: If True, use IPython's prompt system.
                         If None (default), auto-detect IPython.
        """
        print("imastack - stack language REPL")
        print("Type 'bye' to exit, 'help' for help")
        
        if ipython_mode is None:
            ipython_mode = self._detect_ipython()
        get_input = self._ipython_input if ipython_mode else input
        
        self.step_budget = self._step_budget_from_env()
        print()
        
        while True:
            try:
                try:
                    line = get_input("OK> ")
                except EOFError:
                    break
                
                line_stripped = line.strip()
                
                if line_stripped.lower() == 'bye':
                    print("Bye!")
                    break
                
                if line_stripped.lower() == 'help':
                    self._help()
                    continue
                
                if line_stripped.lower() in ('stack', '.s'):
                    print(self.last.format_stack())
                    continue
                
                if line_stripped.lower().startswith('see '):
                    print(see(line_stripped[4:]))
                    continue
                
                # not stripped: empty tokens are literals and shift jump targets
                self.execute(line)
                if self.last.output:
                    print(' '.join(format_value(v) for v in self.last.output))
                
            except KeyboardInterrupt:
                print("\n(Ctrl+C) Type 'bye' to exit")
            except ImastackException as e:
                print(f"Error: {e}")
        
        return self


class InteractiveImastack(ImastackREPL):
    """Interactive front end: evaluates lines and keeps the last machine around"""
    
    def __init__(self, step_budget=DEFAULT_STEP_BUDGET):
        self.step_budget = step_budget
        self.last = Machine()
    
    def __repr__(self):
        return f"<InteractiveImastack {self.last.format_stack()}>"
    
    def __call__(self, text):
        return self.execute(text).output
    
    def execute(self, text):
        """Evaluate one line within the step budget"""
        self.last = run_bounded(text, self.step_budget)
        return self
    
    @property
    def output(self):
        return [float(v) for v in self.last.output]

"""
Imastack Control Flow - conditional jump
"""

import logging

from .compiler import Opcode

logger = logging.getLogger(__name__)


class StackControlFlow:
    """Mixin providing the jump word"""
    
    def _register_control_flow_words(self):
        """Register control flow words"""
        self.words[Opcode.JNZ] = self._jnz
    
    def _jnz(self):
        """Pop target then condition; return the new counter if taken"""
        target, cond = self.get_ops()
        if cond != 0.0:
            logger.debug("jnz taken -> %s", target)
            return target.to_index()
        return None

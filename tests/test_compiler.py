from __future__ import annotations

import pytest

from imastack.compiler import Instruction, Opcode, compile_program, decode_token, tokenize
from imastack.value import Value


def test_tokenize_keeps_empty_tokens():
    assert tokenize("1  2") == ["1", "", "2"]
    assert tokenize("") == [""]


def test_every_word_decodes_to_its_opcode():
    program = compile_program("+ - * / dup swp jnz print".split(" "))
    assert [i.op for i in program] == [
        Opcode.ADD, Opcode.SUB, Opcode.MUL, Opcode.DIV,
        Opcode.DUP, Opcode.SWP, Opcode.JNZ, Opcode.PRINT,
    ]


def test_other_tokens_become_literals():
    assert decode_token("2.5") == Instruction.literal(Value(2.5))
    assert decode_token("abc") == Instruction.literal(Value(0.0))
    assert decode_token("") == Instruction.literal(Value(0.0))
    # words are case sensitive
    assert decode_token("DUP").op is Opcode.LITERAL


def test_one_instruction_per_token():
    tokens = tokenize("1  2 + print ")
    assert len(compile_program(tokens)) == len(tokens) == 6


def test_as_value_and_str():
    assert decode_token("7").as_value() == 7.0
    assert decode_token("+").as_value() == 0.0
    assert str(decode_token("swp")) == "swp"
    assert str(decode_token("7")) == "7.0"


def test_instruction_is_immutable():
    instruction = decode_token("dup")
    with pytest.raises(AttributeError):
        instruction.op = Opcode.ADD
    assert instruction.op is Opcode.DUP

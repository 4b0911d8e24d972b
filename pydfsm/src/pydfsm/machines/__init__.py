from pydfsm.machines.generate import random_dfa
from pydfsm.machines.mod3 import make_mod3_dfa
from pydfsm.machines.words import EMPTY_STATE, ERROR_STATE, make_hello_dfa, make_word_dfa

__all__ = [
    "EMPTY_STATE",
    "ERROR_STATE",
    "make_hello_dfa",
    "make_mod3_dfa",
    "make_word_dfa",
    "random_dfa",
]

"""Test doubles for the career engine."""

from .sequence_random import SequenceRandom, ConstantRandom

__all__ = ['SequenceRandom', 'ConstantRandom']

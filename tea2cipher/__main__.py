"""Run the TEA2 demonstration: python -m tea2cipher"""

from .demo import run_demo

run_demo()

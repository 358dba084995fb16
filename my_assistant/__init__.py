"""
A small tool-using assistant: a model decides, in plain text, whether to call
one of the registered tools, and the result is fed back for the final answer.
"""

__version__ = "0.1.0"

"""Sort integers with two stacks and a restricted set of stack operations.

Also holds small helpers for characters, byte buffers, strings, formatted
output, line reading and linked lists.
"""

__version__ = "1.0.0"
"""
The MODEL layer contains the measurement calculator engine.
It has NO knowledge of the GUI (Qt).
It deals with parsing, formatting, input validation, evaluation and undo history.
"""

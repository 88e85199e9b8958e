"""
The MODEL layer contains pure data structures and the scale algorithms.
It has NO knowledge of the GUI (Qt).
"""

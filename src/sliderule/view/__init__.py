"""
The VIEW layer renders the slide rule with PySide6 and forwards raw
pointer and wheel events to the interaction engine.
"""

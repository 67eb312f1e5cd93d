"""
Bot runtime: component handlers and the interaction dispatcher.
"""

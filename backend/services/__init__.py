"""
Presentation services for the snake simulation.
"""

"""
Core application pieces: exceptions and the application context
"""

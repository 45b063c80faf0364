"""
Strategic Insight - document upload and AI-backed document Q&A service
"""

__version__ = "0.1.0"

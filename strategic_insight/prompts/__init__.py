"""
Prompt System

Builds the document question-answering prompt from a Jinja2 template.
"""

from strategic_insight.prompts.base import PromptBuilder

__all__ = ["PromptBuilder"]

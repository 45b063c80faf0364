"""
Unit tests for PromptBuilder
"""

import pytest

from strategic_insight.prompts import PromptBuilder


@pytest.mark.unit
def test_document_prompt_layout():
    prompt = PromptBuilder().build_document_prompt(document_content="The sky is blue.\n", query="What color?")

    assert prompt == (
        "Based ONLY on the following document content, answer the query. "
        "If the information is not available in the document, state that.\n\n"
        "Document Content:\nThe sky is blue.\n\n\n"
        "Query: What color?"
    )


@pytest.mark.unit
def test_empty_document_still_builds_prompt():
    prompt = PromptBuilder().build_document_prompt(document_content="", query="Anything?")

    assert "Document Content:\n\n\nQuery: Anything?" in prompt

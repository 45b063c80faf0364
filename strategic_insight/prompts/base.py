"""
Prompt Builder - Jinja2 prompt construction
"""

from pathlib import Path
from jinja2 import Environment, FileSystemLoader, select_autoescape


class PromptBuilder:
    """
    Builds prompts from Jinja2 templates.

    The document prompt tells the model to answer only from the supplied
    document content and to say so when the answer is not there.
    """

    def __init__(self):
        # Load templates from templates directory
        templates_dir = Path(__file__).parent / "templates"
        self.env = Environment(
            loader=FileSystemLoader(templates_dir),
            autoescape=select_autoescape(['html', 'xml']),
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def build_document_prompt(self, document_content: str, query: str) -> str:
        """
        Build the single-turn prompt for a document question.

        Args:
            document_content: All chunks of the document, in order
            query: The user's question, embedded literally

        Returns:
            Prompt text
        """
        template = self.env.get_template("document_qa.jinja2")
        return template.render(document_content=document_content, query=query)

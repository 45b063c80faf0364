"""
Services

- text_extractor: file → raw text
- ingestion_service: upload → Document + chunks
- analysis_service: document + query → reply + chat history
- insight_generator: prompt → reply via LiteLLM
"""

from strategic_insight.services.text_extractor import TextExtractor
from strategic_insight.services.insight_generator import InsightGenerator, NO_INSIGHT_MESSAGE
from strategic_insight.services.ingestion_service import IngestionService
from strategic_insight.services.analysis_service import AnalysisService

__all__ = [
    "TextExtractor",
    "InsightGenerator",
    "NO_INSIGHT_MESSAGE",
    "IngestionService",
    "AnalysisService",
]

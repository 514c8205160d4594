from docreport.analysis.frequency import FrequencyAnalyzer
from docreport.analysis.normalizer import TextNormalizer
from docreport.analysis.report_builder import ReportBuilder
from docreport.analysis.tokenizer import character_count, word_count

__all__ = [
    "FrequencyAnalyzer",
    "ReportBuilder",
    "TextNormalizer",
    "character_count",
    "word_count",
]

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path

from docreport.analysis.models import (
    DocumentStatistics,
    FrequencyAnalysis,
    Report,
    WordCount,
)


@dataclass(slots=True)
class PipelineContext:
    source_path: Path
    lines: list[str] = field(default_factory=list)
    total_characters: int = 0
    normalized_text: str = ""
    word_count: WordCount = field(default_factory=WordCount)
    frequency: FrequencyAnalysis = field(default_factory=FrequencyAnalysis)
    statistics: DocumentStatistics | None = None
    report: Report | None = None
    output_path: Path | None = None
    error_message: str = ""


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError

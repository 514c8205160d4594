from collections.abc import Callable, Sequence
from pathlib import Path

from docreport.analysis.frequency import FrequencyAnalyzer
from docreport.analysis.normalizer import TextNormalizer
from docreport.analysis.report_builder import ReportBuilder
from docreport.config.settings import Settings
from docreport.logging.logger import Log
from docreport.output.report_writer import ReportWriter
from docreport.processor.pipeline import PipelineContext, PipelineStep
from docreport.processor.steps import (
    AnalyzeFrequencyStep,
    BuildReportStep,
    CountCharactersStep,
    NormalizeStep,
    ReadDocumentStep,
    ReportFailureStep,
    TokenizeStep,
    WriteReportStep,
)
from docreport.reader.document_reader import DocumentReader


class Processor:
    """Orchestrates the document statistics pipeline.

    Pipeline: read -> count characters -> normalize -> tokenize
    -> analyze frequency -> build report -> write report.
    """

    def __init__(
        self,
        steps: Sequence[PipelineStep],
        failed_step: PipelineStep,
    ) -> None:
        self._steps = list(steps)
        self._failed_step = failed_step

    def process(self, source_path: str | Path) -> PipelineContext:
        """Run every step for one document; report and re-raise on failure."""
        context = PipelineContext(source_path=Path(source_path))
        Log.info(
            f"Processing document {context.source_path}",
            source_path=str(context.source_path),
        )
        try:
            for step in self._steps:
                context = step.run(context)
        except Exception as exc:
            context.error_message = str(exc)
            self._failed_step.run(context)
            raise
        Log.info(
            f"Successfully processed {context.source_path}",
            source_path=str(context.source_path),
        )
        return context


def build_processor(
    settings: Settings,
    echo: Callable[[str], None] | None = print,
) -> Processor:
    """Build a Processor with the default steps."""
    reader = DocumentReader(settings.supported_extensions)
    normalizer = TextNormalizer(
        task_limit=settings.task_limit,
        max_workers=settings.max_workers,
    )
    analyzer = FrequencyAnalyzer(max_workers=settings.max_workers)
    writer = ReportWriter(
        subdirectory=settings.output_subdirectory,
        prefix=settings.output_prefix,
        echo=echo if settings.echo_report else None,
    )
    steps = [
        ReadDocumentStep(reader),
        CountCharactersStep(),
        NormalizeStep(normalizer),
        TokenizeStep(),
        AnalyzeFrequencyStep(analyzer),
        BuildReportStep(ReportBuilder()),
        WriteReportStep(writer),
    ]
    return Processor(steps=steps, failed_step=ReportFailureStep())

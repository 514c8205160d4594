from docreport.analysis.frequency import FrequencyAnalyzer
from docreport.analysis.models import DocumentStatistics
from docreport.analysis.normalizer import TextNormalizer
from docreport.analysis.report_builder import ReportBuilder
from docreport.analysis.tokenizer import character_count, word_count
from docreport.logging.logger import Log
from docreport.output.report_writer import ReportWriter
from docreport.processor.pipeline import PipelineContext, PipelineStep
from docreport.reader.document_reader import DocumentReader


class ReportFailureStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        Log.error(
            f"Processing {context.source_path} failed: {context.error_message}",
            source_path=str(context.source_path),
        )
        return context


class ReadDocumentStep(PipelineStep):
    def __init__(self, reader: DocumentReader) -> None:
        self._reader = reader

    def run(self, context: PipelineContext) -> PipelineContext:
        context.lines = self._reader.read(context.source_path)
        return context


class CountCharactersStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        context.total_characters = character_count(context.lines)
        Log.info(f"Counted {context.total_characters} characters")
        return context


class NormalizeStep(PipelineStep):
    def __init__(self, normalizer: TextNormalizer) -> None:
        self._normalizer = normalizer

    def run(self, context: PipelineContext) -> PipelineContext:
        context.normalized_text = self._normalizer.normalize(context.lines)
        Log.info(f"Normalized {len(context.lines)} lines to {len(context.normalized_text)} chars")
        return context


class TokenizeStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        context.word_count = word_count(context.normalized_text)
        Log.info(f"Created word collection of {context.word_count.count} words")
        return context


class AnalyzeFrequencyStep(PipelineStep):
    def __init__(self, analyzer: FrequencyAnalyzer) -> None:
        self._analyzer = analyzer

    def run(self, context: PipelineContext) -> PipelineContext:
        context.frequency = self._analyzer.group(context.word_count.words)
        Log.info(
            f"Processed common words: {context.frequency.unique_count} unique, "
            f"{len(context.frequency.groups)} frequency groups"
        )
        return context


class BuildReportStep(PipelineStep):
    def __init__(self, builder: ReportBuilder) -> None:
        self._builder = builder

    def run(self, context: PipelineContext) -> PipelineContext:
        context.statistics = DocumentStatistics(
            total_lines=len(context.lines),
            total_words=context.word_count.count,
            unique_words=context.frequency.unique_count,
            total_characters=context.total_characters,
        )
        context.report = self._builder.build(context.statistics, context.frequency.groups)
        Log.info(f"Built report with {len(context.report)} sections")
        return context


class WriteReportStep(PipelineStep):
    def __init__(self, writer: ReportWriter) -> None:
        self._writer = writer

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.report is None:
            raise ValueError("PipelineContext.report must be set before writing")
        context.output_path = self._writer.write(context.source_path, context.report)
        return context

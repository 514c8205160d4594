from collections.abc import Callable

from docreport.analysis.exceptions import AnalysisError
from docreport.exceptions import DocReportError
from docreport.logging.logger import Log
from docreport.output.exceptions import ReportWriteError
from docreport.processor.processor import Processor
from docreport.reader.exceptions import ReaderError


class PromptLoop:
    """Ask for a path -> process -> on failure explain and ask again."""

    PROMPT = "Enter your document file path (or 'exit' to quit): "
    CONTINUE_PROMPT = "Press Enter to continue."
    EXIT_WORDS = frozenset({"exit", "quit"})

    def __init__(
        self,
        processor: Processor,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
    ) -> None:
        self._processor = processor
        self._input = input_fn
        self._output = output_fn

    def run(self, max_runs: int | None = None) -> int:
        """Main prompt loop. Returns the number of documents processed.

        If max_runs is set, stop after that many attempts (for testing).
        """
        processed = 0
        attempts = 0
        try:
            while max_runs is None or attempts < max_runs:
                answer = self._input(self.PROMPT).strip()
                if answer.lower() in self.EXIT_WORDS:
                    break
                attempts += 1
                if self._process(answer):
                    processed += 1
        except (KeyboardInterrupt, EOFError):
            Log.info("Prompt loop shutting down")
        return processed

    def _process(self, path: str) -> bool:
        try:
            context = self._processor.process(path)
        except DocReportError as exc:
            self._output(f"{self._category(exc)}: {exc}")
            self._input(self.CONTINUE_PROMPT)
            return False
        self._output(f"Report written to {context.output_path}")
        return True

    @staticmethod
    def _category(exc: DocReportError) -> str:
        if isinstance(exc, ReaderError):
            return "Invalid document"
        if isinstance(exc, AnalysisError):
            return "Analysis failed"
        if isinstance(exc, ReportWriteError):
            return "Could not write report"
        return "Processing failed"

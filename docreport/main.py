import sys
from collections.abc import Sequence

from docreport.config.settings import Settings
from docreport.console.prompt_loop import PromptLoop
from docreport.exceptions import DocReportError
from docreport.logging.logger import Log
from docreport.processor.processor import build_processor


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point: settings -> logging -> processor -> paths or prompt loop.

    Paths given on the command line are processed once each; without any,
    the interactive prompt loop starts. Returns the process exit code.
    """
    settings = Settings()
    Log.configure(settings.log_level)
    processor = build_processor(settings)

    paths = list(sys.argv[1:] if argv is None else argv)
    if not paths:
        PromptLoop(processor).run()
        return 0

    failures = 0
    for path in paths:
        try:
            processor.process(path)
        except DocReportError:
            failures += 1
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())

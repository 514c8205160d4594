from docreport.reader.base import BaseDocumentReader
from docreport.reader.csv_reader import CsvReader
from docreport.reader.exceptions import UnsupportedFileTypeError
from docreport.reader.json_reader import JsonReader
from docreport.reader.text_reader import PlainTextReader


class ReaderFactory:
    """Creates the correct document reader for a file extension."""

    READERS: dict[str, type[BaseDocumentReader]] = {
        "txt": PlainTextReader,
        "csv": CsvReader,
        "json": JsonReader,
    }

    @classmethod
    def create(cls, extension: str) -> BaseDocumentReader:
        key = extension.lower().lstrip(".")
        reader_cls = cls.READERS.get(key)
        if reader_cls is None:
            raise UnsupportedFileTypeError(
                f"No reader for '{key}' files. Choose from: {list(cls.READERS)}"
            )
        return reader_cls()

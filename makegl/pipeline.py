"""
Generation pipeline.

Enumerates the input documents, scans each one, renders its records and
writes them between the wrapper prologue and epilogue. One run writes
exactly one output file; any error aborts the run.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Iterable, Iterator, Optional, Sequence, TextIO, Union

from .config import MakeGlConfig
from .errors import ConfigError
from .generators import AUXILIARY_FUNCTIONS, Generator, get_generator
from .parser import ConstantRecord, Document, FunctionRecord, Record, scan_document

logger = logging.getLogger("makegl.pipeline")


@dataclass
class DocumentSummary:
    """What one document contributed to the output."""
    identifier: str
    constants: int = 0
    functions: int = 0
    duplicates: list[str] = field(default_factory=list)


@dataclass
class GenerationReport:
    """Result of a run, one summary per document in processing order."""
    output: Optional[Path]
    documents: list[DocumentSummary] = field(default_factory=list)
    # Auxiliary functions left out of the epilogue because a page declared them
    epilogue_duplicates: list[str] = field(default_factory=list)

    @property
    def constants(self) -> int:
        return sum(d.constants for d in self.documents)

    @property
    def functions(self) -> int:
        return sum(d.functions for d in self.documents)

    @property
    def duplicates(self) -> int:
        return sum(len(d.duplicates) for d in self.documents) + len(self.epilogue_duplicates)

    def to_dict(self) -> dict:
        return {
            "output": str(self.output) if self.output else None,
            "constants": self.constants,
            "functions": self.functions,
            "duplicates": self.duplicates,
            "documents": [asdict(d) for d in self.documents],
            "epilogue_duplicates": list(self.epilogue_duplicates),
        }


class SymbolTable:
    """
    Keep-first filter for records declared by more than one document.

    Constants are keyed by name. Functions are keyed by name and parameter
    types so that overloads are kept, or by name alone when the target
    cannot hold overloads.
    """

    def __init__(self, overloads: bool = True):
        self.overloads = overloads
        self._constants: set[str] = set()
        self._functions: set[str] = set()

    def add(self, record: Record) -> Optional[str]:
        """Register ``record``; return its key if it was already seen."""
        if isinstance(record, ConstantRecord):
            key, seen = record.name, self._constants
        elif self.overloads:
            key, seen = record.key, self._functions
        else:
            key, seen = record.name, self._functions
        if key in seen:
            return key
        seen.add(key)
        return None


def iter_documents(inputs: Sequence[str], input_dir: Path) -> Iterator[Document]:
    """
    Return a lazy, single-pass sequence of documents in the given order.

    The identifiers are checked up front so a bad list fails before any
    output is opened.

    Raises:
        ConfigError: an identifier occurs more than once
    """
    seen = set()
    for identifier in inputs:
        if identifier in seen:
            raise ConfigError(f"Document listed twice: {identifier}")
        seen.add(identifier)
    return (Document(identifier, input_dir / identifier) for identifier in inputs)


def unique_records(
    document: Document,
    summary: DocumentSummary,
    symbols: Optional[SymbolTable],
    encoding: str = "utf-8",
) -> Iterator[Record]:
    """Scan ``document``, dropping duplicates and counting into ``summary``."""
    for record in scan_document(document, encoding):
        if symbols is not None:
            duplicate = symbols.add(record)
            if duplicate is not None:
                logger.warning("  duplicate: %s (%s)", duplicate, record.location)
                summary.duplicates.append(duplicate)
                continue
        if isinstance(record, ConstantRecord):
            summary.constants += 1
        else:
            summary.functions += 1
        yield record


def unique_auxiliaries(
    symbols: Optional[SymbolTable], report: GenerationReport
) -> list[FunctionRecord]:
    """Auxiliary functions not already declared by a page."""
    if symbols is None:
        return list(AUXILIARY_FUNCTIONS)

    auxiliaries = []
    for function in AUXILIARY_FUNCTIONS:
        duplicate = symbols.add(function)
        if duplicate is not None:
            logger.warning("  duplicate: %s (epilogue)", duplicate)
            report.epilogue_duplicates.append(duplicate)
            continue
        auxiliaries.append(function)
    return auxiliaries


class WrapperWriter:
    """
    Writes a whole wrapper to an open text stream.

    Kept separate from file handling so it can target any stream.
    """

    def __init__(self, generator: Generator, config: MakeGlConfig):
        self.generator = generator
        self.config = config

    def write(
        self,
        documents: Iterable[Document],
        out: TextIO,
        output: Optional[Path] = None,
    ) -> GenerationReport:
        symbols = (
            SymbolTable(self.generator.overloads)
            if self.config.generation.deduplicate else None
        )
        encoding = self.config.generation.encoding
        report = GenerationReport(output=output)

        out.write(self.generator.render_prologue())
        for document in documents:
            logger.info("processing %s", document.identifier)
            out.write(self.generator.render_banner(document.identifier))
            summary = DocumentSummary(document.identifier)
            for record in unique_records(document, summary, symbols, encoding):
                out.write(self.generator.render(record))
            report.documents.append(summary)
        out.write(self.generator.render_epilogue(unique_auxiliaries(symbols, report)))

        return report


def generate(
    inputs: Sequence[str],
    output: Union[str, Path],
    config: Optional[MakeGlConfig] = None,
) -> GenerationReport:
    """
    Generate the wrapper from ``inputs`` into ``output``.

    Args:
        inputs: Document identifiers, resolved against the configured input dir
        output: Output file path, resolved against the project root
        config: Configuration (defaults when omitted)

    Returns:
        Per-document summary of what was written

    Raises:
        ConfigError: invalid document list
        UnterminatedFunctionError: a declaration never reached its terminator
        OSError: any read or write failure
    """
    if config is None:
        config = MakeGlConfig()

    documents = iter_documents(inputs, config.input_dir_abs)
    output_path = config.resolve_path(Path(output))
    writer = WrapperWriter(get_generator(config), config)

    logger.info("makegl begin ...")
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding=config.generation.encoding,
              newline=config.generation.newline) as out:
        report = writer.write(documents, out, output_path)
    logger.info(
        "... done: %d constants, %d functions, %d duplicates -> %s",
        report.constants, report.functions, report.duplicates, output_path,
    )
    return report


def scan_only(inputs: Sequence[str], config: Optional[MakeGlConfig] = None) -> GenerationReport:
    """Scan ``inputs`` and count records without writing anything."""
    if config is None:
        config = MakeGlConfig()

    overloads = get_generator(config).overloads
    symbols = SymbolTable(overloads) if config.generation.deduplicate else None
    report = GenerationReport(output=None)
    for document in iter_documents(inputs, config.input_dir_abs):
        logger.info("scanning %s", document.identifier)
        summary = DocumentSummary(document.identifier)
        for _ in unique_records(document, summary, symbols, config.generation.encoding):
            pass
        report.documents.append(summary)
    unique_auxiliaries(symbols, report)
    return report

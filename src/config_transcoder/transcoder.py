"""Main Config Transcoder implementation."""

import asyncio
import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import List, Optional, Union

from .error_handler import ErrorHandler
from .formats import JSONCodec, PropertiesCodec, YAMLCodec
from .io import FileReader, FileWriter
from .profiler import ConversionProfiler
from .router import TranscodingRouter
from .types import (
    ConfigTranscoderInterface,
    ConvertOptions,
    ConvertResult,
    ErrorType,
    FormatTag,
    TranscodeError,
)


class ConfigTranscoder(ConfigTranscoderInterface):
    """
    Main implementation of the Config Transcoder interface.

    Converts configuration files between YAML, properties and JSON. Each
    conversion parses, transforms and serializes on its own fresh value
    tree, so independent files can be converted in parallel.
    """

    def __init__(self, json_indent: Optional[int] = 2,
                 yaml_sort_keys: bool = False,
                 encoding: str = "utf-8",
                 logger: Optional[logging.Logger] = None,
                 enable_parallel_processing: bool = True,
                 max_workers: Optional[int] = None):
        """
        Initialize the Config Transcoder.

        Args:
            json_indent: Indentation of JSON output; None writes compact JSON
            yaml_sort_keys: Sort mapping keys in YAML output
            encoding: Text encoding of input and output files
            logger: Optional logger instance
            enable_parallel_processing: Convert batches on a thread pool
            max_workers: Maximum number of worker threads (None = auto-detect)
        """
        self.logger = logger or logging.getLogger(__name__)
        self.encoding = encoding
        self.enable_parallel_processing = enable_parallel_processing
        self.max_workers = max_workers

        if enable_parallel_processing:
            self.executor = ThreadPoolExecutor(max_workers=max_workers)
        else:
            self.executor = None

        self.error_handler = ErrorHandler(self.logger)
        self.router = TranscodingRouter(
            codecs={
                FormatTag.YAML: YAMLCodec(sort_keys=yaml_sort_keys, logger=self.logger),
                FormatTag.PROPERTIES: PropertiesCodec(logger=self.logger),
                FormatTag.JSON: JSONCodec(indent=json_indent, logger=self.logger),
            },
            logger=self.logger
        )
        self.file_reader = FileReader(encoding=encoding, logger=self.logger)
        self.file_writer = FileWriter(encoding=encoding, logger=self.logger)
        self.profiler = ConversionProfiler(self.logger)

    def convert_text(self, text: str, source: Union[str, FormatTag], target: Union[str, FormatTag]) -> str:
        """
        Convert document text between formats without touching the disk.

        Args:
            text: Source document
            source: Source format name or tag
            target: Target format name or tag

        Returns:
            Target document text

        Raises:
            TranscodeError: If the pair is unsupported or parsing/serialization fails
        """
        converter = self.router.route(source, target)
        source_tag = FormatTag.from_extension(source.value if isinstance(source, FormatTag) else source)
        self.error_handler.raise_if_invalid(
            self.error_handler.validate_input(text, source_tag), ErrorType.PARSE
        )
        return converter(text)

    def output_path_for(self, input_path: Union[str, Path], output_dir: Union[str, Path],
                        output_format: str) -> Path:
        """Derive ``<output_dir>/<input stem>.<output format>``."""
        stem = Path(input_path).stem or "output"
        return Path(output_dir) / f"{stem}.{output_format.lower()}"

    def convert_file(self, input_path: str, output_dir: str, options: ConvertOptions) -> ConvertResult:
        """
        Convert one configuration file into the requested format.

        The output directory is created first. The output file is written
        last and atomically, so a failed conversion leaves no output file.

        Args:
            input_path: Source file; its extension selects the input format
            output_dir: Directory for the output file
            options: Conversion options carrying the output format

        Returns:
            ConvertResult with the output path or an error message
        """
        try:
            self.error_handler.raise_if_invalid(
                self.error_handler.validate_directory_path(output_dir), ErrorType.PATH
            )
            self.file_writer.ensure_directory_exists(output_dir)

            source = Path(input_path)
            output_format = options.output_format.lower()
            output_path = self.output_path_for(source, output_dir, output_format)
            input_format = source.suffix.lower().lstrip(".")

            converter = self.router.route(input_format, output_format)
            self.logger.info(f"Converting {source} ({input_format}) -> {output_path} ({output_format})")

            text = self.file_reader.read_text(source)
            with self.profiler.profile_operation(f"{input_format}->{output_format}",
                                                 len(text.encode(self.encoding, errors="replace"))) as session:
                self.error_handler.raise_if_invalid(
                    self.error_handler.validate_input(text, FormatTag.from_extension(input_format)),
                    ErrorType.PARSE
                )
                content = converter(text)
                self.file_writer.write_text(output_path, content)
                session.output_size = len(content.encode(self.encoding, errors="replace"))
                session.success = True

            self.logger.info(f"Wrote {output_path}")
            return ConvertResult.ok(str(output_path))

        except TranscodeError as e:
            return self.error_handler.handle_error(e)
        except Exception as e:
            return self.error_handler.handle_unexpected(e)

    async def convert_files(
        self,
        input_paths: List[str],
        output_dir: str,
        options: ConvertOptions
    ) -> List[ConvertResult]:
        """
        Convert several files independently.

        Conversions share no state, so they run concurrently on the thread
        pool when parallel processing is enabled. Results keep input order.

        Args:
            input_paths: Source files
            output_dir: Directory for all output files
            options: Conversion options shared by every file

        Returns:
            One ConvertResult per input path
        """
        self.logger.info(f"Converting {len(input_paths)} files to {options.output_format} in {output_dir}")

        if self.executor is None:
            return [self.convert_file(path, output_dir, options) for path in input_paths]

        loop = asyncio.get_running_loop()
        tasks = [
            loop.run_in_executor(self.executor, self.convert_file, path, output_dir, options)
            for path in input_paths
        ]
        return list(await asyncio.gather(*tasks))

    def close(self) -> None:
        """Shut down the worker pool."""
        if self.executor is not None:
            self.executor.shutdown(wait=True)
            self.executor = None

    def __enter__(self) -> "ConfigTranscoder":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

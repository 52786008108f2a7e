"""Local filesystem consumer implementation."""
import logging
import os
from datetime import datetime
from typing import Iterator, Optional

from tqdm import tqdm

from ..core.models import Config, EndpointConfig, GenericFile
from ..errors import ConfigurationError, ConfigurationIssue
from ..utils.file_filter import FileFilter
from ..utils.path_utils import PathUtils
from .base import Consumer, Processor

logger = logging.getLogger(__name__)


class FileConsumer(Consumer):
    """Consumer that lists the files beneath an endpoint root."""

    def __init__(self, endpoint: EndpointConfig, processor: Processor,
                 config: Optional[Config] = None, show_progress: bool = False):
        super().__init__(endpoint, processor, config)
        self.file_filter = FileFilter(endpoint, self.config)
        self.show_progress = show_progress
        self.scan_root = endpoint.resolve_against(self.config.working_directory)

    @staticmethod
    def as_generic_file(endpoint_path: str, file_path: str, charset: Optional[str] = None,
                        stat_result: Optional[os.stat_result] = None) -> GenericFile:
        """
        Describe a discovered file relative to its endpoint.

        Both '/' and '\\' count as separators in ``endpoint_path`` and
        ``file_path``, on every platform. A POSIX file name containing a
        backslash, such as ``a\\b.txt``, is therefore reported as the
        two-segment relative path ``a/b.txt``.

        Args:
            endpoint_path: Root path as configured on the endpoint.
            file_path: Path of the file, beginning with ``endpoint_path``.
            charset: Charset configured on the endpoint, if any.
            stat_result: Optional stat data for size and modification time.

        Returns:
            GenericFile whose relative path uses '/' separators.

        Raises:
            PathOutsideRootError: If the file does not live under the root.
        """
        relative_path = PathUtils.relative_of(endpoint_path, file_path)

        file_length = None
        last_modified = None
        if stat_result is not None:
            file_length = stat_result.st_size
            last_modified = datetime.fromtimestamp(stat_result.st_mtime)

        return GenericFile(
            absolute_path=PathUtils.collapse_separators(file_path),
            relative_path=relative_path,
            endpoint_path=endpoint_path,
            charset=charset,
            file_length=file_length,
            last_modified=last_modified,
        )

    def _check_root(self) -> bool:
        if os.path.isdir(self.scan_root):
            return True
        if self.endpoint.auto_create:
            logger.info(f"Creating missing directory: {self.scan_root}")
            os.makedirs(self.scan_root, exist_ok=True)
            return True
        if self.endpoint.directory_must_exist:
            raise ConfigurationError(
                ConfigurationIssue.MISSING_DIRECTORY,
                f"Directory does not exist: {self.endpoint.root_path}",
                "Create the directory or enable autoCreate",
            )
        logger.warning(f"Directory does not exist, nothing to consume: {self.scan_root}")
        return False

    def iter_files(self) -> Iterator[GenericFile]:
        """Walk the root once, yielding matching files in sorted order."""
        if not self._check_root():
            return

        for dirpath, dirnames, filenames in os.walk(self.scan_root):
            rel_dir = os.path.relpath(dirpath, self.scan_root)
            dir_depth = 0 if rel_dir == os.curdir else rel_dir.count(os.sep) + 1

            # Prune in place so os.walk skips excluded subtrees
            dirnames[:] = sorted(
                d for d in dirnames
                if not self.file_filter.should_exclude_directory(d, dir_depth + 1)
                and not os.path.islink(os.path.join(dirpath, d))
            )

            for name in sorted(filenames):
                if self.file_filter.should_skip_file(name, dir_depth + 1):
                    continue

                full_path = os.path.join(dirpath, name)
                try:
                    stat_result = os.stat(full_path)
                except OSError as e:
                    self.errors.append(f"Cannot stat {full_path}: {e}")
                    continue

                if rel_dir == os.curdir:
                    file_path = os.path.join(self.endpoint.file_path, name)
                else:
                    file_path = os.path.join(self.endpoint.file_path, rel_dir, name)

                yield self.as_generic_file(self.endpoint.root_path, file_path,
                                           self.endpoint.charset, stat_result)

    def poll(self) -> int:
        """Hand each matching file to the processor, up to maxMessagesPerPoll."""
        limit = self.endpoint.max_messages_per_poll
        count = 0

        for item in tqdm(self.iter_files(), desc="Scanning files", unit="file",
                         disable=not self.show_progress):
            self._dispatch(item)
            count += 1
            if limit and count >= limit:
                logger.debug(f"Reached maxMessagesPerPoll ({limit})")
                break

        logger.debug(f"Polled {count} file(s) from {self.scan_root}")
        return count

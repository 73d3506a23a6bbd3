# Standard Library
import logging
import os

# Package
from .errors import MissingDirectory, RemuxError, FileSystemError
from .mkv import Job, remux_file, replace_file

logger = logging.getLogger(__name__)


class BatchOutcome(object):
    """
    Result of processing a directory.

    :ivar list[str] processed: Original paths that were remuxed and replaced, in processing order.
    :ivar list[tuple[str, RemuxError]] failures: Files that failed, with the reason.
    """
    def __init__(self):
        self.processed = []
        self.failures = []

    @property
    def ok(self):
        return not self.failures

    def __repr__(self):
        return "BatchOutcome(processed=%r, failures=%r)" % (self.processed, self.failures)


def clean_path(path):
    """Strip the quotes a shell may leave around a path, e.g. a Windows drag & drop."""
    return path.strip().strip('"')


def find_files(directory, config):
    """
    List the files in directory that should be remuxed. Subdirectories are not searched.
    The extension is matched ignoring case, so "movie.MKV" counts as an mkv file.

    :param str directory: Directory containing the mkv files.
    :param config: The run configuration.
    :type config: mkvlang.config.Config

    :raises FileSystemError: If the directory can't be listed.

    :return: Sorted list of full paths.
    :rtype: list[str]
    """
    try:
        entries = sorted(os.listdir(directory))
    except OSError as e:
        raise FileSystemError(directory, e)

    extension = config.extension.lower()
    files = []
    for filename in entries:
        fullpath = os.path.join(directory, filename)
        if not filename.lower().endswith(extension) or not os.path.isfile(fullpath):
            continue

        files.append(fullpath)
    return files


def process_file(path, config):
    """
    Remux one file and replace the original with the result.

    :param str path: The mkv file to process.
    :param config: The run configuration.
    :type config: mkvlang.config.Config

    :return: True if the original was replaced, False on a dry run.
    :rtype: bool
    """
    job = Job(path, config.suffix, config.language)
    logger.info("Remuxing: %s", job.filename)
    remux_file(job, config)
    if config.dry_run:
        return False

    replace_file(job.output_path, job.input_path)
    logger.info("Successfully removed audio for %s", job.input_path)
    return True


def process_directory(directory, config):
    """
    Strip the unwanted audio tracks from every matching file in directory, one file at a time.

    When config.fail_fast is set, the first error is raised and the remaining files are
    left alone. Otherwise the error is recorded in the outcome and processing continues.

    :param str directory: Directory containing the mkv files. May be wrapped in quotes.
    :param config: The run configuration.
    :type config: mkvlang.config.Config

    :raises MissingDirectory: If no directory was given.
    :raises RemuxError: On the first failure, when failing fast.

    :rtype: BatchOutcome
    """
    if not directory:
        raise MissingDirectory()

    directory = clean_path(directory)
    if not directory:
        raise MissingDirectory()

    outcome = BatchOutcome()
    files = find_files(directory, config)
    logger.debug("Found %d %s file(s) in %s", len(files), config.extension, directory)

    for path in files:
        try:
            replaced = process_file(path, config)
        except RemuxError as e:
            if config.fail_fast:
                raise
            logger.error("Failed to process %s: %s", path, e)
            outcome.failures.append((path, e))
        else:
            if replaced:
                outcome.processed.append(path)

    return outcome

# Standard Library
from collections import namedtuple
import subprocess
import threading
import logging
import shutil
import os

# Package
from .errors import ToolNotFound, ToolFailed, FileSystemError

logger = logging.getLogger(__name__)

ProcessResult = namedtuple("ProcessResult", ["returncode", "stdout", "stderr"])


class Job(object):
    """
    A single mkv file waiting to be remuxed.

    The output is written next to the input, using the input's basename with the
    suffix appended, e.g. "movie.mkv" => "movie_noaudio.mkv".

    :param str input_path: The mkv file to strip.
    :param str suffix: Suffix added to the basename of the output file.
    :param str language: Language code of the audio tracks to keep.
    """
    def __init__(self, input_path, suffix, language):
        dirpath, filename = os.path.split(input_path)
        basename, ext = os.path.splitext(filename)
        self.output_path = os.path.join(dirpath, "%s%s%s" % (basename, suffix, ext))
        self.input_path = input_path
        self.filename = filename
        self.language = language

    def __repr__(self):
        return "Job(%r => %r, language=%r)" % (self.input_path, self.output_path, self.language)


def build_command(job, tool_path):
    """
    Build the mkvmerge command line to keep only the audio tracks of the job's language.

    :param Job job: The job to build the command for.
    :param str tool_path: Path or program name of the mkvmerge executable.

    :raises ToolNotFound: If mkvmerge can't be found.

    :return: The command, starting with the resolved executable.
    :rtype: list[str]
    """
    executable = shutil.which(tool_path)
    if executable is None:
        raise ToolNotFound(tool_path)

    return [executable, "--output", job.output_path, "--audio-tracks", job.language, job.input_path]


def _drain_stderr(process, lines, fatal):
    """Collect everything mkvmerge writes to stderr. Kills the process on the first line if fatal."""
    for line in iter(process.stderr.readline, ""):
        lines.append(line)
        if fatal:
            logger.error("MKVMerge error: %s", line.rstrip())
            if process.poll() is None:
                process.terminate()
        else:
            logger.warning("MKVMerge warning: %s", line.rstrip())


def remove_output(job):
    """Remove a partially written output file, if there is one."""
    if os.path.exists(job.output_path):
        logger.debug("Removing incomplete output: %s", job.output_path)
        os.remove(job.output_path)


def remux_file(job, config):
    """
    Run mkvmerge on one file and wait for it to finish.

    :param Job job: The file to remux.
    :param config: The run configuration.
    :type config: mkvlang.config.Config

    :raises ToolNotFound: If mkvmerge can't be found.
    :raises ToolFailed: If mkvmerge exits non zero, or writes to stderr while stderr is fatal.

    :rtype: ProcessResult
    """
    command = build_command(job, config.tool_path)
    if config.dry_run:
        logger.info("Dry run: %s", subprocess.list2cmdline(command))
        return ProcessResult(0, "", "")

    logger.debug("Running: %s", subprocess.list2cmdline(command))
    try:
        # mkvmerge may print filenames in a different encoding than the locale
        process = subprocess.Popen(command, stdout=subprocess.PIPE, stderr=subprocess.PIPE,
                                   universal_newlines=True, errors="replace")
    except FileNotFoundError:
        raise ToolNotFound(config.tool_path)
    except OSError as e:
        raise FileSystemError(job.input_path, e)

    # stderr is read on its own thread so a full pipe can't block the process
    errors = []
    reader = threading.Thread(target=_drain_stderr, args=(process, errors, config.stderr_fatal))
    reader.daemon = True
    reader.start()

    output = []
    for line in iter(process.stdout.readline, ""):
        line = line.rstrip()
        output.append(line)
        if "progress" in line.lower():
            logger.debug("%s", line)
        elif line:
            logger.info("MKVMerge output: %s", line)

    retcode = process.wait()
    reader.join()
    stderr = "".join(errors)

    if retcode or (stderr and config.stderr_fatal):
        remove_output(job)
        raise ToolFailed(job.input_path, retcode, stderr)

    return ProcessResult(retcode, "\n".join(output), stderr)


def replace_file(tmp_file, org_file):
    """
    Replaces the original mkv file with the newly remuxed file,
    keeping the original's timestamps.

    :param str tmp_file: The remuxed mkv file.
    :param str org_file: The original mkv file to replace.

    :raises FileSystemError: If the original can't be replaced.
    """
    try:
        stat = os.stat(org_file)
        os.utime(tmp_file, (stat.st_atime, stat.st_mtime))
        os.replace(tmp_file, org_file)
    except OSError as e:
        if os.path.exists(tmp_file):
            os.remove(tmp_file)
        raise FileSystemError(org_file, e)

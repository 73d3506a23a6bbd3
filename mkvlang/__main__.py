# Standard Library
import argparse
import logging
import sys

# Package
from .batch import process_directory, clean_path
from .config import Config
from .errors import RemuxError

logger = logging.getLogger("mkvlang")


def catch_interrupt(func):
    """Decorator to catch Keyboard Interrupts and silently exit."""
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except KeyboardInterrupt:  # pragma: no cover
            return 130

    # The function been catched
    return wrapper


class StripQuotes(argparse.Action):
    """
    Custom action to remove the quotes that some shells
    leave around a path, e.g. "C:\\My Movies".
    """
    def __call__(self, _, namespace, value, option_string=None):
        setattr(namespace, self.dest, clean_path(value) if value else value)


# Create Parser to parse the required arguments
parser = argparse.ArgumentParser(
    description="Removes every audio track except one language from MKV files."
)

parser.add_argument(
    "directory",
    nargs="?",
    action=StripQuotes,
    help="The directory where your MKV files are stored. Subdirectories are not searched."
)

parser.add_argument(
    "-c",
    "--config",
    metavar="path",
    help="YAML file with default settings. Command line options take precedence."
)

parser.add_argument(
    "-b",
    "--mkvmerge-bin",
    dest="tool_path",
    metavar="path",
    help="The path to the MKVMerge executable."
)

parser.add_argument(
    "-l",
    "--language",
    metavar="lang",
    help="Language code of the audio tracks to keep, as known by mkvmerge. E.g. ja, eng, fre. Default: ja"
)

parser.add_argument(
    "-e",
    "--extension",
    metavar="ext",
    help="Extension of the files to process, matched ignoring case (.mkv also matches .MKV). Default: .mkv"
)

parser.add_argument(
    "-s",
    "--suffix",
    metavar="suffix",
    help="Suffix of the intermediate output file, removed once the original is replaced. Default: _noaudio"
)

parser.add_argument(
    "-k",
    "--keep-going",
    action="store_true",
    default=False,
    help="Carry on with the remaining files when one fails, instead of stopping."
)

parser.add_argument(
    "--allow-stderr",
    action="store_true",
    default=False,
    help="Only fail on a non zero exit code. By default any mkvmerge output on stderr is a failure."
)

parser.add_argument(
    "-t",
    "--dry-run",
    action="store_true",
    default=False,
    help="Show the mkvmerge commands without running them."
)

parser.add_argument(
    "-v",
    "--verbose",
    action="store_true",
    default=False,
    help="Verbose output."
)


def build_config(args):
    """
    Combine the defaults, the optional config file and the command line arguments.

    :param argparse.Namespace args: The parsed command line.

    :rtype: Config
    """
    config = Config.from_file(args.config) if args.config else Config()
    return config.replace(
        tool_path=args.tool_path,
        language=args.language,
        extension=args.extension,
        suffix=args.suffix,
        fail_fast=False if args.keep_going else None,
        stderr_fatal=False if args.allow_stderr else None,
        dry_run=True if args.dry_run else None,
    )


@catch_interrupt
def main(params=None):
    """
    Remove the unwanted audio tracks from all mkv files in a directory.

    :param params: [opt] List of arguments to pass to argparse.
    :type params: list or tuple

    :return: The exit status, 0 when every file was processed.
    :rtype: int
    """
    # Parse the list of given arguments
    args = parser.parse_args(params)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s"
    )

    try:
        config = build_config(args)
    except (OSError, ValueError) as e:
        parser.error(str(e))

    logger.debug("Using %r", config)
    try:
        outcome = process_directory(args.directory, config)
    except RemuxError as e:
        logger.error("Error processing directory: %s", e)
        return 1

    for path in outcome.processed:
        logger.info("Processed: %s", path)

    if not outcome.ok:
        for path, error in outcome.failures:
            logger.error("Failed: %s (%s)", path, error)
        logger.error("%d file(s) failed.", len(outcome.failures))
        return 1

    logger.info("Finished processing all files in the directory.")
    return 0


if __name__ == "__main__":
    sys.exit(main())

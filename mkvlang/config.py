# Standard Library
import logging
import sys
import os
import re

# Third Party
import yaml

logger = logging.getLogger(__name__)

if sys.platform == "win32":
    BIN_DEFAULT = "C:\\Program Files\\MKVToolNix\\mkvmerge.exe"
else:
    BIN_DEFAULT = "mkvmerge"

BOOL_TAG = "tag:yaml.org,2002:bool"


class ConfigLoader(yaml.SafeLoader):
    """
    SafeLoader that only reads true and false as booleans. YAML 1.1 also turns
    yes, no, on and off into booleans, which would break "language: no" (Norwegian).
    """


ConfigLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != BOOL_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
ConfigLoader.add_implicit_resolver(BOOL_TAG, re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"), list("tTfF"))


class Config(object):
    """
    Settings for a remux run.

    :param str extension: Container extension of the files to process.
    :param str language: Language code of the audio tracks to keep.
    :param str suffix: Suffix added to the intermediate output filename.
    :param str tool_path: Path or program name of the mkvmerge executable.
    :param bool fail_fast: Stop at the first file that fails.
    :param bool stderr_fatal: Treat any output on mkvmerge's stderr as a failure.
    :param bool dry_run: Log what would be done without running mkvmerge.
    """
    OPTIONS = ("extension", "language", "suffix", "tool_path", "fail_fast", "stderr_fatal", "dry_run")

    def __init__(self, extension=".mkv", language="ja", suffix="_noaudio", tool_path=BIN_DEFAULT,
                 fail_fast=True, stderr_fatal=True, dry_run=False):
        for name, value in (("extension", extension), ("language", language),
                            ("suffix", suffix), ("tool_path", tool_path)):
            if not isinstance(value, str):
                raise ValueError("%s must be a string, got %r" % (name, value))
        for name, value in (("fail_fast", fail_fast), ("stderr_fatal", stderr_fatal), ("dry_run", dry_run)):
            if not isinstance(value, bool):
                raise ValueError("%s must be true or false, got %r" % (name, value))

        if not extension.startswith("."):
            extension = "." + extension
        if not suffix:
            raise ValueError("suffix must not be empty, the output file would overwrite its input")
        if not language:
            raise ValueError("language must not be empty")

        self.extension = extension
        self.language = language
        self.suffix = suffix
        self.tool_path = tool_path
        self.fail_fast = fail_fast
        self.stderr_fatal = stderr_fatal
        self.dry_run = dry_run

    def __repr__(self):
        opts = ", ".join("%s=%r" % (name, getattr(self, name)) for name in self.OPTIONS)
        return "Config(%s)" % opts

    def replace(self, **overrides):
        """Return a copy of this config with the given options changed. None values are ignored."""
        options = {name: getattr(self, name) for name in self.OPTIONS}
        options.update((key, value) for key, value in overrides.items() if value is not None)
        return Config(**options)

    @classmethod
    def from_file(cls, path):
        """
        Load settings from a YAML file. Options missing from the file keep their defaults.

        :param str path: Path to the yaml config file.

        :raises FileNotFoundError: If the config file does not exist.
        :raises ValueError: If the file holds options this tool doesn't know,
                            or an option has the wrong type.

        :rtype: Config
        """
        if not os.path.exists(path):
            raise FileNotFoundError("[Errno 2] No such file or directory: '%s'" % path)

        with open(path, "r", encoding="utf-8") as stream:
            data = yaml.load(stream, Loader=ConfigLoader) or {}

        if not isinstance(data, dict):
            raise ValueError("Config file must contain a mapping of options: '%s'" % path)

        unknown = sorted(set(data) - set(cls.OPTIONS))
        if unknown:
            raise ValueError("Unknown config option(s) in '%s': %s" % (path, ", ".join(unknown)))

        logger.debug("Configuration loaded from %s", path)
        return cls(**data)

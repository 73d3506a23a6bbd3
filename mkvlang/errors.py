class RemuxError(Exception):
    """Base class for all errors raised while remuxing a directory."""


class ToolNotFound(RemuxError):
    """
    The mkvmerge executable could not be found.

    :param str tool_path: The path or program name that was looked up.
    """
    def __init__(self, tool_path):
        super().__init__("MKVMerge not found at '%s'! Please install it." % tool_path)
        self.tool_path = tool_path


class ToolFailed(RemuxError):
    """
    mkvmerge exited with a non zero return code or wrote to its error stream.

    :param str path: The input file that was being remuxed.
    :param int returncode: The exit code of the process.
    :param str stderr: Anything the process wrote to its error stream.
    """
    def __init__(self, path, returncode, stderr=""):
        if stderr:
            msg = "MKVToolNix process wrote to stderr for '%s' (exit code %s): %s" % (path, returncode, stderr.strip())
        else:
            msg = "MKVToolNix process exited with error code %s for '%s'" % (returncode, path)
        super().__init__(msg)
        self.path = path
        self.returncode = returncode
        self.stderr = stderr


class MissingDirectory(RemuxError):
    def __init__(self):
        super().__init__("Please provide a directory to process")


class FileSystemError(RemuxError):
    """
    Listing the directory or renaming a file failed.

    :param str path: The path the operation failed on.
    :param OSError cause: The underlying error.
    """
    def __init__(self, path, cause):
        super().__init__("%s: %s" % (path, cause))
        self.path = path
        self.cause = cause

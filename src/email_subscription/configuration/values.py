"""Value classes for django-configurations used by the subscription settings."""

import os

from configurations import values

from email_subscription.tools.tags import parse_tag_names


class SecretFileValue(values.Value):
    """
    Value read from an environment variable or from the file it points to.

    Credentials are usually mounted as files by the orchestrator, the value set
    is either (in order of priority):
    * The content of the file referenced by the environment variable
      `{name}_{file_suffix}` if set.
    * The value of the environment variable `{name}` if set.
    * The default value
    """

    file_suffix = "FILE"

    def __init__(self, *args, file_suffix=None, **kwargs):
        """Initialize the value."""
        super().__init__(*args, **kwargs)
        if file_suffix is not None:
            self.file_suffix = file_suffix

    def _read_file(self, filename):
        if not os.path.exists(filename):
            raise ValueError(f"Path {filename!r} does not exist.")
        try:
            with open(filename) as file:
                return file.read().strip()
        except OSError as err:
            raise ValueError(f"Path {filename!r} cannot be read: {err!r}") from err

    def setup(self, name):
        """Get the value from the environment."""
        value = self.default
        if self.environ:
            full_environ_name = self.full_environ_name(name)
            full_environ_name_file = f"{full_environ_name}_{self.file_suffix}"
            if full_environ_name_file in os.environ:
                value = self.to_python(self._read_file(os.environ[full_environ_name_file]))
            elif full_environ_name in os.environ:
                value = self.to_python(os.environ[full_environ_name])
            elif self.environ_required:
                raise ValueError(
                    f"Value {name!r} is required to be set as the "
                    f"environment variable {full_environ_name_file!r} or {full_environ_name!r}"
                )
        self.value = value
        return value


class TagListValue(values.Value):
    """Comma-separated list of tag names, trimmed and without duplicates."""

    def __init__(self, *args, separator=",", **kwargs):
        """Initialize the value."""
        self.separator = separator
        if not args:
            kwargs.setdefault("default", ())
        super().__init__(*args, **kwargs)

    def to_python(self, value):
        """Convert the environment string into a tuple of tag names."""
        return parse_tag_names(value, separator=self.separator)

from blockdoc.plugins.readers import html_reader, json_reader  # noqa: F401
from blockdoc.plugins.writers import html_writer, json_writer  # noqa: F401

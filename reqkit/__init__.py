"""Building blocks for HTTP clients: header and cookie parsing, URL encoding, request options, multipart parts and a thread pool."""

__version__ = "0.1.0"

__all__ = [
    "containers",
    "multipart",
    "options",
    "range",
    "redirect",
    "ssl_ctx",
    "threadpool",
    "timeout",
    "util",
]
# reqkit

reqkit provides small pieces that an HTTP client is built from. Each
module works on its own and uses only the standard library.

## Modules

- `reqkit.util`
  - `parse_header(headers)` parses a raw header block into a `ParsedHeader`.
    It has `fields`, `status_line` and `reason`. Lookups ignore case, through
    `parsed["Name"]`, `parsed.get(name, default="")` and `name in parsed`. Each
    `HTTP/` status line starts the fields again, so the result holds the
    headers of the last response in the block.
  - `parse_cookies(lines)` turns tab-separated cookie-jar lines into frozen
    `Cookie` dataclasses with `name`, `value`, `domain`,
    `include_subdomains`, `path`, `https_only` and a UTC `expires` datetime.
  - `url_encode` percent-encodes everything except unreserved characters.
    `url_decode` decodes percent escapes and leaves `+` as it is.
  - `split(text, delimiter)`: a trailing delimiter gives no empty last token.
  - `is_true(s)`: true only for "true", in any letter case.
  - `secure_clear(buffer)` overwrites a `bytearray` with zero bytes and then
    empties it. Any other type raises `TypeError`.
- `reqkit.timeout`: `Timeout(ms_or_timedelta)`. Its `milliseconds()` returns
  the value and raises `OverflowError` outside the signed 64-bit range.
- `reqkit.range`: `Range(resume_from=None, finish_at=None)` and
  `MultiRange(*ranges)`, which render as byte-range text such as `1-` or
  `-3, 5-6`.
- `reqkit.redirect`: the `Redirect` dataclass, with `maximum=50`,
  `follow=True`, `cont_send_cred=False` and `post_flags`. It also has the
  `PostRedirectFlags` flag enum (`NONE`, `POST_301`, `POST_302`, `POST_303`,
  `POST_ALL`) and `any_flags(flag)`.
- `reqkit.options`: `Verbose` (a dataclass, `verbose=True` by default), plus
  `UserAgent` and `Interface`, which are subclasses of `str`.
- `reqkit.threadpool`: `ThreadPool(min_threads, max_threads, max_idle)` runs
  callables on worker threads and returns `concurrent.futures.Future`
  objects. Its methods are `start`, `stop`, `pause`, `resume`, `wait`,
  `submit`, `current_thread_num`, `idle_thread_num`, `is_started` and
  `is_stopped`. `submit` starts a stopped pool. A worker above the minimum
  leaves after it has waited `max_idle` with no work. `start` on a started
  pool and `stop` on a stopped pool raise `RuntimeError`. `stop` cancels
  tasks still in the queue. The pool can also be used as a context manager.
- `reqkit.multipart`:
  - `File(filepath, overridden_filename="")` is one file to upload.
  - `Files` is an ordered collection that accepts files or paths.
  - `Part(name, value, content_type="")` is one form field. Its value is a
    string, an int, a `File` or a `Files`.
  - `Multipart(parts)` holds the parts of a form.
- `reqkit.containers`: `Parameter` and `Pair` are key/value dataclasses.
  `CurlContainer(items, encode=True)` takes those or `(key, value)` tuples,
  and `get_content()` joins them as `key=value&...`, URL-encoded unless
  `encode` is false.
- `reqkit.ssl_ctx`: `load_ca_cert_from_buffer(context, cert_buffer)` adds the
  first PEM certificate in a string or bytes buffer to an `ssl.SSLContext`.
  It raises `ValueError` when an argument is missing or the buffer holds no
  certificate.

## Installation

```
pip install .
pip install ".[test]"   # with the test dependencies
```

## Examples

```python
from reqkit.util import parse_header, url_encode, url_decode

parsed = parse_header("HTTP/1.1 200 OK\r\nServer: nginx\r\n\r\n")
parsed.status_line     # "HTTP/1.1 200 OK"
parsed.reason          # "OK"
parsed["server"]       # "nginx"

url_encode("Hello World!")        # "Hello%20World%21"
url_decode("Hello%20World%21")    # "Hello World!"
```

```python
from reqkit.range import MultiRange, Range

str(Range(1))                                    # "1-"
str(MultiRange(Range(None, 3), Range(5, 6)))     # "-3, 5-6"
```

```python
from reqkit.threadpool import ThreadPool

with ThreadPool(min_threads=1, max_threads=4) as pool:
    future = pool.submit(sum, [1, 2, 3])
    future.result()   # 6
```

```python
from reqkit.containers import CurlContainer

payload = CurlContainer([("key1", "hello"), ("key2", "world")])
payload.get_content()   # "key1=hello&key2=world"
```

## What reqkit does not do

reqkit does not send requests. It has no session, no connection handling
and no HTTP transport. The option and body types describe a request, and
the parsers read what a transport has received, but the transfer itself is
left to the code that uses them.

## Running the tests

```
pytest
```
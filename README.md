# gapicgen

Building blocks for generating API client libraries from protocol buffer
service descriptions. The package works on plain Python descriptor objects
and provides:

- parsing of the generator's option string (`gapicgen.options`);
- identifier case conversion and routing path-template helpers
  (`gapicgen.naming`);
- a small descriptor model for messages, fields, methods and services
  (`gapicgen.descriptors`);
- REST path and query parameter discovery from HTTP bindings
  (`gapicgen.rest`, `gapicgen.rest_query`);
- mapping of gRPC status codes to HTTP status expressions for retry settings
  (`gapicgen.rest_status`);
- GAPIC metadata recording and JSON output (`gapicgen.metadata`);
- rendering of Markdown doc comments as plain text (`gapicgen.markdown`).

## Installation

```
pip install gapicgen
```

For running the tests:

```
pip install "gapicgen[test]"
pytest
```

## Usage

### Generator options

`parse_options` reads comma-separated `key=value` pairs and bare flags
(`metadata`, `diregapic`, `rest-numeric-enums`, `omit-snippets`). The
`go-gapic-package=path;name` option is required; malformed input raises
`OptionsError`, a `ValueError`.

```python
from gapicgen.options import parse_options, Transport, OptionsError

opts = parse_options("transport=rest+grpc,go-gapic-package=path/to/out;pkg")
assert opts.transports == [Transport.GRPC, Transport.REST]
assert opts.pkg_name == "pkg"

try:
    parse_options("transport=tcp,go-gapic-package=path;pkg")
except OptionsError as err:
    print(err)  # invalid transport option: "tcp"
```

When no transport is given, `opts.transports` is `[Transport.GRPC]`. A
`module=prefix` option strips that prefix from `opts.out_dir`, and
`M<file>=<import>` options are collected in `opts.pkg_overrides`.

### Naming helpers

```python
from gapicgen.naming import (
    camel_to_snake, snake_to_camel, lower_first, upper_first,
    convert_path_template_to_regex, get_header_name,
)

camel_to_snake("IAMCredentials")        # "iam_credentials"
snake_to_camel("os_config")             # "OsConfig"
lower_first("BarBaz")                   # "barBaz"
convert_path_template_to_regex("{foo=projects/*}/bars")
# "(?P<foo>projects/[^/]+)/bars"
get_header_name("profiles/{routing_id=*}")  # "routing_id"
```

### Descriptors

`gapicgen.descriptors` holds dataclasses `FieldDescriptor`,
`MessageDescriptor`, `HttpRule`, `MethodDescriptor` and `ServiceDescriptor`,
the enums `FieldType`, `FieldLabel` and `FieldBehavior`, and the helper
`contains_service`. Messages answer `get_field`, `has_field` and
`is_optional`; services answer `get_method`, `has_method` and
`has_rest_method`; fields answer `is_required`.

### REST parameters

```python
from gapicgen.descriptors import (
    FieldDescriptor, FieldType, HttpRule, MessageDescriptor, MethodDescriptor,
)
from gapicgen.rest import base_url_format, get_http_info, path_params
from gapicgen.rest_query import query_params, query_param_key

types = {
    ".identify.IdentifyRequest": MessageDescriptor(
        name="IdentifyRequest",
        fields=[
            FieldDescriptor(name="kingdom", type=FieldType.INT32),
            FieldDescriptor(name="mass_kg", type=FieldType.INT32),
        ],
    ),
}
method = MethodDescriptor(
    name="Identify",
    input_type=".identify.IdentifyRequest",
    http=HttpRule(verb="get", path="/kingdom/{kingdom}"),
)

list(path_params(method, types))              # ["kingdom"]
list(query_params(method, types))             # ["mass_kg"]
query_param_key("mass_kg")                    # "massKg"
base_url_format(get_http_info(method))        # ("/kingdom/%v", ["req.GetKingdom()"])
```

`gapicgen.rest_query.get_leafs` maps dotted paths to every leaf field of a
message, skipping repeated message fields, excluded fields and recursive
revisits; well-known types such as `.google.protobuf.FieldMask` count as
leaves.

### Status codes for retries

```python
from gapicgen.rest_status import StatusCode, http_status_for_code, retry_codes_expression

http_status_for_code(StatusCode.UNAVAILABLE)  # "http.StatusServiceUnavailable"
retry_codes_expression([StatusCode.UNAVAILABLE, StatusCode.DEADLINE_EXCEEDED])
# ["http.StatusServiceUnavailable,", "http.StatusGatewayTimeout)"]
```

### GAPIC metadata

```python
from gapicgen.metadata import GapicMetadata

md = GapicMetadata(language="go", proto_package="google.example.library.v1")
md.add_service_for_transport("LibraryService", "grpc", "LibraryService")
md.add_method("LibraryService", "grpc", "GetBook")
print(md.to_json())
```

`add_service_for_transport` is idempotent; `add_method` raises `KeyError`
if the service or transport has not been added. `to_json` writes
multi-line JSON with sorted map keys and leaves out empty fields.

### Plain-text documentation

```python
from gapicgen.markdown import md_plain

md_plain("link to [a search engine](https://www.example.com)")
# "link to a search engine (at https://www.example.com)"
md_plain("List:\n- item1\n- item2")
# "List:\n\n  item1\n\n  item2"
```

## What the package does not do

The package is a set of helpers, not a complete generator. It has no
command-line program or protoc plugin, it does not write client source
files, it does not sort import lists, and it does not read service
configuration files or resolve mixin APIs (long-running operations, IAM,
locations).
import pytest

from gapicgen.naming import (
    camel_to_snake,
    convert_path_template_to_regex,
    get_header_name,
    grpc_client_field,
    lower_first,
    snake_to_camel,
    upper_first,
)


@pytest.mark.parametrize(
    "text, expected",
    [("IAMCredentials", "iam_credentials"), ("DLP", "dlp"), ("OsConfig", "os_config")],
)
def test_camel_to_snake(text, expected):
    assert camel_to_snake(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("iam_credentials", "IamCredentials"),
        ("dlp", "Dlp"),
        ("os_config", "OsConfig"),
        ("display_video_360_advertiser_links", "DisplayVideo_360AdvertiserLinks"),
    ],
)
def test_snake_to_camel(text, expected):
    assert snake_to_camel(text) == expected


@pytest.mark.parametrize("text, expected", [("Foo", "foo"), ("", ""), ("BarBaz", "barBaz")])
def test_lower_first(text, expected):
    assert lower_first(text) == expected


@pytest.mark.parametrize("text, expected", [("foo", "Foo"), ("", ""), ("barBaz", "BarBaz")])
def test_upper_first(text, expected):
    assert upper_first(text) == expected


@pytest.mark.parametrize("name, expected", [("Foo", "fooClient"), ("", "client")])
def test_grpc_client_field(name, expected):
    assert grpc_client_field(name) == expected


@pytest.mark.parametrize(
    "template, expected",
    [
        ("", "(.*)"),
        ("{foo}", "(?P<foo>.*)"),
        ("{foo=*}", "(?P<foo>.*)"),
        ("{foo=**}", "(?P<foo>.*)"),
        ("{foo=projects/*}/bars", "(?P<foo>projects/[^/]+)/bars"),
        (
            "{database=projects/*/databases/*}/documents/*/**",
            "(?P<database>projects/[^/]+/databases/[^/]+)/documents/[^/]+(?:/.*)?",
        ),
        (
            "projects/*/foos/*/{bar_name=bars/*}/**",
            "projects/[^/]+/foos/[^/]+/(?P<bar_name>bars/[^/]+)(?:/.*)?",
        ),
    ],
)
def test_convert_path_template_to_regex(template, expected):
    assert convert_path_template_to_regex(template) == expected


@pytest.mark.parametrize(
    "template, expected",
    [
        ("{foo}", "foo"),
        ("foo", ""),
        ("{foo=bar}", "foo"),
        ("{foo=*}", "foo"),
        ("test/{database=projects/*/databases/*}/documents/*/**", "database"),
        ("{new_name_match=projects/*/instances/*/tables/*}", "new_name_match"),
        ("profiles/{routing_id=*}", "routing_id"),
    ],
)
def test_get_header_name(template, expected):
    assert get_header_name(template) == expected


def test_get_header_name_rejects_two_names():
    assert get_header_name("{a=b}/{c=d}") == ""


def test_get_header_name_equals_outside_braces():
    with pytest.raises(ValueError):
        get_header_name("a=b/{foo}")
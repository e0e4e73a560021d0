import pytest

from gapicgen.descriptors import (
    FieldDescriptor,
    FieldLabel,
    FieldType,
    HttpRule,
    MessageDescriptor,
    MethodDescriptor,
)
from gapicgen.rest_query import get_leafs, query_param_key, query_params

REQ_FQN = ".identify.IdentifyRequest"


def setup_method_types(url, body, fields):
    msg = MessageDescriptor(
        name="IdentifyRequest",
        fields=[FieldDescriptor(name=n, number=i, type=FieldType.INT32) for i, n in enumerate(fields)],
    )
    method = MethodDescriptor(
        name="Identify",
        input_type=REQ_FQN,
        http=HttpRule(verb="get", path=url, body=body),
    )
    return method, {REQ_FQN: msg}


def int_field(name, number):
    return FieldDescriptor(name=name, number=number, type=FieldType.INT32)


@pytest.mark.parametrize(
    "url,body,fields,expected",
    [
        ("/kingdom/{kingdom}", "", ["kingdom"], {}),
        ("/kingdom/{kingdom}", "", [], {}),
        ("/kingdom", "guess", ["mass_kg", "guess"], {"mass_kg": int_field("mass_kg", 0)}),
        (
            "/kingdom/{kingdom}/phylum/{phylum}",
            "guess",
            ["kingdom", "phylum", "mass_kg", "guess"],
            {"mass_kg": int_field("mass_kg", 2)},
        ),
    ],
    ids=["all_params_are_path", "no_fields", "no_path_params", "path_query_param_mix"],
)
def test_query_params(url, body, fields, expected):
    method, types = setup_method_types(url, body, fields)
    assert query_params(method, types) == expected


def test_query_params_whole_body_has_none():
    method, types = setup_method_types("/kingdom", "*", ["mass_kg"])
    assert query_params(method, types) == {}


def test_query_params_without_http_binding():
    _, types = setup_method_types("/kingdom", "", ["mass_kg"])
    method = MethodDescriptor(name="Identify", input_type=REQ_FQN)
    assert query_params(method, types) == {}


def test_query_params_sorted_by_path():
    method, types = setup_method_types("/kingdom", "", ["zeta", "alpha", "mid"])
    assert list(query_params(method, types)) == ["alpha", "mid", "zeta"]


PKG = ".animalia.mollusca"


@pytest.fixture
def mollusca():
    basic = MessageDescriptor(
        name="Clam",
        fields=[
            int_field("mass_kg", 0),
            FieldDescriptor(name="saltwater_p", number=1, type=FieldType.BOOL),
        ],
    )
    innermost = MessageDescriptor(name="Chromatophore", fields=[int_field("color_code", 0)])
    nested = MessageDescriptor(
        name="Mantle",
        fields=[
            int_field("mass_kg", 0),
            FieldDescriptor(
                name="chromatophore",
                number=1,
                type=FieldType.MESSAGE,
                type_name=f"{PKG}.Chromatophore",
            ),
        ],
    )
    complex_msg = MessageDescriptor(
        name="Squid",
        fields=[
            int_field("length_m", 0),
            FieldDescriptor(name="mantle", number=1, type=FieldType.MESSAGE, type_name=f"{PKG}.Mantle"),
        ],
    )
    recursive = MessageDescriptor(
        name="Whelk",
        fields=[
            int_field("mass_kg", 0),
            FieldDescriptor(name="whelk", number=1, type=FieldType.MESSAGE, type_name=f"{PKG}.Whelk"),
        ],
    )
    overarching = MessageDescriptor(
        name="Trawl",
        fields=[
            FieldDescriptor(
                name="clams",
                number=0,
                label=FieldLabel.REPEATED,
                type=FieldType.MESSAGE,
                type_name=PKG,
            ),
            int_field("mass_kg", 1),
        ],
    )
    well_known = MessageDescriptor(
        name="Update",
        fields=[
            FieldDescriptor(
                name="update_mask",
                number=0,
                type=FieldType.MESSAGE,
                type_name=".google.protobuf.FieldMask",
            )
        ],
    )
    messages = [basic, innermost, nested, complex_msg, recursive, overarching, well_known]
    types = {f"{PKG}.{m.name}": m for m in messages}
    return types


def test_leafs_basic(mollusca):
    basic = mollusca[f"{PKG}.Clam"]
    assert get_leafs(basic, mollusca) == {
        "mass_kg": basic.fields[0],
        "saltwater_p": basic.fields[1],
    }


def test_leafs_complex(mollusca):
    squid = mollusca[f"{PKG}.Squid"]
    mantle = mollusca[f"{PKG}.Mantle"]
    chroma = mollusca[f"{PKG}.Chromatophore"]
    assert get_leafs(squid, mollusca) == {
        "length_m": squid.fields[0],
        "mantle.mass_kg": mantle.fields[0],
        "mantle.chromatophore.color_code": chroma.fields[0],
    }


def test_leafs_excluded(mollusca):
    squid = mollusca[f"{PKG}.Squid"]
    mantle = mollusca[f"{PKG}.Mantle"]
    assert get_leafs(squid, mollusca, [mantle.fields[1]]) == {
        "length_m": squid.fields[0],
        "mantle.mass_kg": mantle.fields[0],
    }


def test_leafs_recursive(mollusca):
    whelk = mollusca[f"{PKG}.Whelk"]
    assert get_leafs(whelk, mollusca) == {
        "mass_kg": whelk.fields[0],
        "whelk.mass_kg": whelk.fields[0],
    }


def test_leafs_repeated_message_skipped(mollusca):
    trawl = mollusca[f"{PKG}.Trawl"]
    assert get_leafs(trawl, mollusca) == {"mass_kg": trawl.fields[1]}


def test_leafs_well_known(mollusca):
    update = mollusca[f"{PKG}.Update"]
    assert get_leafs(update, mollusca) == {"update_mask": update.fields[0]}


def test_leafs_unknown_type_raises():
    msg = MessageDescriptor(
        name="Broken",
        fields=[FieldDescriptor(name="ghost", type=FieldType.MESSAGE, type_name=".nowhere.Ghost")],
    )
    with pytest.raises(KeyError):
        get_leafs(msg, {})


@pytest.mark.parametrize(
    "path,key",
    [
        ("mass_kg", "massKg"),
        ("update_mask", "updateMask"),
        ("display_video_360", "displayVideo_360"),
    ],
)
def test_query_param_key(path, key):
    assert query_param_key(path) == key
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import pytest
from coola.equality import objects_are_equal
from pydantic import BaseModel, ValidationError

from typedhttp.core.codec import BodyCodec
from typedhttp.exceptions import DeserializationError


@dataclass
class Post:
    user_id: int
    title: str


class Comment(BaseModel):
    id: int
    body: str


@pytest.fixture
def codec() -> BodyCodec:
    return BodyCodec()


###############################
#     Tests for serialize     #
###############################


def test_serialize_primitives(codec: BodyCodec) -> None:
    assert codec.serialize(1) == "1"
    assert codec.serialize("a") == '"a"'
    assert codec.serialize(None) == "null"


def test_serialize_mapping(codec: BodyCodec) -> None:
    assert codec.serialize({"id": 1, "tags": ["a", "b"]}) == '{"id":1,"tags":["a","b"]}'


def test_serialize_dataclass(codec: BodyCodec) -> None:
    assert codec.serialize(Post(user_id=1, title="Title")) == '{"user_id":1,"title":"Title"}'


def test_serialize_pydantic_model(codec: BodyCodec) -> None:
    assert codec.serialize(Comment(id=2, body="hi")) == '{"id":2,"body":"hi"}'


#################################
#     Tests for deserialize     #
#################################


@pytest.mark.parametrize("raw", [None, ""])
def test_deserialize_empty_body(codec: BodyCodec, raw: str | None) -> None:
    assert codec.deserialize(raw, dict) == (None, None)


def test_deserialize_primitive(codec: BodyCodec) -> None:
    assert codec.deserialize("42", int) == (42, None)


def test_deserialize_dataclass(codec: BodyCodec) -> None:
    assert codec.deserialize('{"user_id": 1, "title": "Title"}', Post) == (
        Post(user_id=1, title="Title"),
        None,
    )


def test_deserialize_list_of_models(codec: BodyCodec) -> None:
    body, error = codec.deserialize(
        '[{"id": 1, "body": "a"}, {"id": 2, "body": "b"}]', list[Comment]
    )
    assert error is None
    assert body == [Comment(id=1, body="a"), Comment(id=2, body="b")]


def test_deserialize_nested_containers(codec: BodyCodec) -> None:
    body, error = codec.deserialize(
        '{"a": [1, 2], "b": [3]}', dict[str, set[int]]
    )
    assert error is None
    assert objects_are_equal(body, {"a": {1, 2}, "b": {3}})


def test_deserialize_any(codec: BodyCodec) -> None:
    assert codec.deserialize('{"a": [1, {"b": null}]}') == ({"a": [1, {"b": None}]}, None)


def test_deserialize_plain_text_as_str(codec: BodyCodec) -> None:
    assert codec.deserialize("Not Found", str) == ("Not Found", None)


def test_deserialize_json_string_as_str(codec: BodyCodec) -> None:
    assert codec.deserialize('"quoted"', str) == ("quoted", None)


def test_deserialize_mismatch(codec: BodyCodec) -> None:
    body, error = codec.deserialize('{"id": "abc"}', Comment)
    assert body is None
    assert isinstance(error, DeserializationError)
    assert error.raw == '{"id": "abc"}'
    assert error.response_type is Comment
    assert isinstance(error.__cause__, ValidationError)


def test_deserialize_invalid_json(codec: BodyCodec) -> None:
    body, error = codec.deserialize("<html></html>", dict)
    assert body is None
    assert isinstance(error, DeserializationError)


def test_deserialize_reuses_adapter(codec: BodyCodec) -> None:
    codec.deserialize("1", int)
    codec.deserialize("2", int)
    assert len(codec._adapters) == 1


@dataclass
class Author:
    name: str
    posts: list[Post]
    tags: set[str]
    meta: dict[str, list[int]]


@pytest.mark.parametrize(
    ("value", "value_type"),
    [
        ({}, dict[str, int]),
        ("hello", str),
        (3.5, float),
        (Post(user_id=1, title="Title"), Post),
        (
            Author(
                name="a",
                posts=[Post(user_id=1, title="x")],
                tags={"b", "c"},
                meta={"ids": [1, 2], "empty": []},
            ),
            Author,
        ),
    ],
)
def test_serialize_deserialize_round_trip(codec: BodyCodec, value: Any, value_type: Any) -> None:
    body, error = codec.deserialize(codec.serialize(value), value_type)
    assert error is None
    assert objects_are_equal(body, value)

import math

import pytest

from utils.errors import NotFound, ValidationError


def test_create_post_sets_defaults(post_service, sample_post_data):
    post = post_service.create_post(sample_post_data)

    assert post.id
    assert post.likes == 0
    assert post.comments == []
    assert post.tags == ["python", "intro"]
    assert post.readTime == math.ceil(len(sample_post_data["content"]) / 200)
    assert post_service.list_posts() == [post]


def test_create_post_generates_distinct_ids(post_service, sample_post_data):
    ids = {post_service.create_post(sample_post_data).id for _ in range(10)}
    assert len(ids) == 10


def test_create_post_coerces_invalid_tags(post_service, sample_post_data):
    sample_post_data["tags"] = "not-a-list"
    assert post_service.create_post(sample_post_data).tags == []

    del sample_post_data["tags"]
    assert post_service.create_post(sample_post_data).tags == []


def test_create_post_rejects_missing_fields_without_touching_store(post_service, store):
    with pytest.raises(ValidationError):
        post_service.create_post({"title": "T", "author": "A"})
    assert len(store) == 0


def test_get_post_not_found(post_service):
    with pytest.raises(NotFound, match="Post not found"):
        post_service.get_post("nope")


def test_update_post_merges_only_supplied_fields(post_service, comment_service, sample_post_data):
    post = post_service.create_post(sample_post_data)
    post_service.like_post(post.id)
    comment_service.add_comment(post.id, {"author": "B", "content": "nice"})

    updated = post_service.update_post(post.id, {"title": "New title"})

    assert updated.title == "New title"
    assert updated.author == post.author
    assert updated.content == post.content
    assert updated.readTime == post.readTime
    assert updated.tags == post.tags
    assert updated.id == post.id
    assert updated.publicationDate == post.publicationDate
    assert updated.likes == 1
    assert len(updated.comments) == 1
    assert post_service.get_post(post.id) is updated


def test_update_post_recomputes_read_time(post_service, sample_post_data):
    post = post_service.create_post(sample_post_data)

    updated = post_service.update_post(post.id, {"content": "x" * 401})

    assert updated.readTime == 3


def test_update_post_coerces_invalid_tags(post_service, sample_post_data):
    post = post_service.create_post(sample_post_data)

    assert post_service.update_post(post.id, {"tags": 5}).tags == []
    assert post_service.update_post(post.id, {"tags": ["a"]}).tags == ["a"]


def test_update_post_ignores_null_fields(post_service, sample_post_data):
    post = post_service.create_post(sample_post_data)

    updated = post_service.update_post(post.id, {"title": None, "author": "Bob"})

    assert updated.title == post.title
    assert updated.author == "Bob"


def test_update_post_keeps_position(post_service, sample_post_data):
    first = post_service.create_post(sample_post_data)
    second = post_service.create_post(sample_post_data)

    post_service.update_post(first.id, {"title": "changed"})

    assert [p.id for p in post_service.list_posts()] == [first.id, second.id]


def test_update_post_not_found(post_service):
    with pytest.raises(NotFound):
        post_service.update_post("nope", {"title": "x"})


def test_delete_post(post_service, sample_post_data):
    post = post_service.create_post(sample_post_data)

    post_service.delete_post(post.id)

    assert post_service.list_posts() == []
    with pytest.raises(NotFound):
        post_service.delete_post(post.id)


def test_search_posts(post_service):
    a = post_service.create_post({"title": "FastAPI tips", "author": "A", "content": "routing"})
    b = post_service.create_post({"title": "Other", "author": "B", "content": "Deep dive into FASTAPI"})
    post_service.create_post({"title": "Unrelated", "author": "C", "content": "nothing"})

    assert post_service.search_posts("fastapi") == [a, b]
    assert post_service.search_posts("ROUTING") == [a]
    assert post_service.search_posts("") == []
    assert post_service.search_posts(None) == []


def test_filter_posts(post_service):
    a = post_service.create_post({"title": "1", "author": "A", "content": "c", "tags": ["x"]})
    b = post_service.create_post({"title": "2", "author": "A", "content": "c", "tags": ["y"]})
    c = post_service.create_post({"title": "3", "author": "B", "content": "c", "tags": ["x", "y"]})

    assert post_service.filter_posts() == []
    assert post_service.filter_posts(author="A") == [a, b]
    assert post_service.filter_posts(author="a") == []
    assert post_service.filter_posts(tag="x") == [a, c]
    assert post_service.filter_posts(author="A", tag="x") == [a]
    assert post_service.filter_posts(author="B", tag="z") == []


def test_like_and_unlike(post_service, sample_post_data):
    post = post_service.create_post(sample_post_data)

    assert post_service.like_post(post.id) == 1
    assert post_service.like_post(post.id) == 2
    assert post_service.like_post(post.id, unlike=True) == 1


def test_unlike_never_goes_negative(post_service, sample_post_data):
    post = post_service.create_post(sample_post_data)

    for _ in range(3):
        assert post_service.like_post(post.id, unlike=True) == 0


def test_like_post_not_found(post_service):
    with pytest.raises(NotFound):
        post_service.like_post("nope")

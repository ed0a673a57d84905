"""Pytest configuration and fixtures for taskhook tests."""

import json

import pytest

from taskhook import TaskBuilder, TaskStatus


@pytest.fixture
def sample_task_dict():
    """A task as Taskwarrior exports it, with a UDA and an annotation."""
    return {
        "id": 1,
        "status": "pending",
        "uuid": "a1b2c3d4-e5f6-4890-abcd-ef1234567890",
        "entry": "20250115T093000Z",
        "description": "Test task",
        "modified": "20250116T100000Z",
        "due": "20250201T120000Z",
        "project": "test-project",
        "priority": "H",
        "tags": ["tag1", "tag2"],
        "urgency": 5.0,
        "estimate": "PT2H",
        "annotations": [
            {"entry": "20250116T100000Z", "description": "first note"},
        ],
    }


@pytest.fixture
def sample_task_json(sample_task_dict):
    """The sample task as JSON text."""
    return json.dumps(sample_task_dict)


@pytest.fixture
def minimal_task_dict():
    """A task carrying only the required fields."""
    return {
        "status": "pending",
        "uuid": "d0a1b2c3-d4e5-46f7-8899-aabbccddeef1",
        "entry": "20230101T000000Z",
        "description": "buy milk",
    }


@pytest.fixture
def built_task():
    """A fully populated task assembled through the builder."""
    return (
        TaskBuilder()
        .status(TaskStatus.WAITING)
        .uuid("8ca953d5-18b4-4eb9-bd56-18f2e5b752f0")
        .entry("20150619T165438Z")
        .description("I love kittens, really!")
        .modified("20160327T163718Z")
        .wait("20160508T163718Z")
        .project("getkittens")
        .priority("L")
        .tags(["kittens", "are", "so", "awesome"])
        .depends(["54d49ffc-a06b-4dd8-b7d1-db5f50594312"])
        .imask(2.0)
        .urgency(1.07397)
        .annotation("fooooooobar", entry="20150623T181018Z")
        .uda("estimate", 3)
        .uda("review", {"by": ["ann", "bo"], "done": False})
        .build()
    )

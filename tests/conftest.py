"""Shared node classes and fixtures for graphnode tests."""

from __future__ import annotations

from datetime import date
from typing import Any, List

import pytest

from graphnode import Node, Property
from graphnode.Properties.PropertyRegistry import PropertyRegistry
from graphnode.Schema import SchemaRegistrar


class Person(Node):
    """Node with typed, defaulted, indexed and constrained properties."""

    __schema__ = SchemaRegistrar()

    name = Property(str, index='exact')
    email = Property(str, constraint='unique')
    age = Property(int)
    score = Property(int, default=0)
    dob = Property(date)
    parts = Property()
    tags = Property(default=list)
    nickname = Property(str, default=lambda node: (node.name or '').lower())
    created_at = Property()

    @property
    def full_name(self) -> Any:
        return self.name

    @full_name.setter
    def full_name(self, value: str) -> None:
        self.name = value.title()


Person.has_many('friends', rel_type='KNOWS', model_class='Person')


class Team(Node):
    """Node whose relationship names collide with a writer and a property."""

    __schema__ = SchemaRegistrar()

    title = Property(str)
    owner = Property(str)

    @property
    def members(self) -> List[Any]:
        return []

    @members.setter
    def members(self, value: List[Any]) -> None:
        self.assigned_members = value


Team.has_many('members')
Team.has_one('owner')


@pytest.fixture
def person_class() -> type:
    return Person


@pytest.fixture
def team_class() -> type:
    return Team


@pytest.fixture
def registry() -> PropertyRegistry:
    """A stand-alone registry with a few declarations."""
    registry = PropertyRegistry('Event')
    registry.declare('title', type=str)
    registry.declare('day', type=date)
    registry.declare('parts')
    registry.declare('count', type=int, default=1)
    return registry

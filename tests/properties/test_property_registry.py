"""Tests for per-class property declarations."""

from __future__ import annotations

from datetime import datetime, time
from unittest.mock import MagicMock

import pytest

from graphnode.Properties import PropertyConfigurationError, PropertyRegistry


class TestPropertyRegistry:
    """Test suite for PropertyRegistry."""

    @pytest.fixture
    def registrar(self) -> MagicMock:
        return MagicMock()

    @pytest.fixture
    def people(self, registrar: MagicMock) -> PropertyRegistry:
        return PropertyRegistry('Person', registrar)

    def test_declare_and_lookup(self, people: PropertyRegistry) -> None:
        declaration = people.declare('score', type=int, default=0)

        assert people.lookup('score') is declaration
        assert declaration.type is int
        assert declaration.default == 0
        assert 'score' in people
        assert people.lookup('missing') is None

    def test_redeclare_overwrites_in_place(self, people: PropertyRegistry) -> None:
        people.declare('name')
        people.declare('age')
        people.declare('name', type=str)

        assert people.names() == ['name', 'age']
        assert people.lookup('name').type is str

    def test_timestamps_are_always_datetime(self, people: PropertyRegistry) -> None:
        assert people.declare('created_at').type is datetime
        assert people.declare('updated_at', type=str).type is datetime

    def test_time_is_declared_as_datetime(self, people: PropertyRegistry) -> None:
        assert people.declare('alarm', type=time).type is datetime

    def test_index_is_registered(self, people: PropertyRegistry, registrar: MagicMock) -> None:
        people.declare('name', index='exact')

        registrar.declare_index.assert_called_once_with('Person', 'name', 'exact')
        registrar.declare_unique_constraint.assert_not_called()
        assert people.lookup('name').indexed

    def test_constraint_is_registered(self, people: PropertyRegistry, registrar: MagicMock) -> None:
        people.declare('email', constraint='unique')

        registrar.declare_unique_constraint.assert_called_once_with('Person', 'email')
        registrar.declare_index.assert_not_called()

    def test_index_and_constraint_together_are_rejected(
        self, people: PropertyRegistry, registrar: MagicMock
    ) -> None:
        with pytest.raises(PropertyConfigurationError):
            people.declare('email', index='exact', constraint='unique')

        assert 'email' not in people
        registrar.declare_index.assert_not_called()
        registrar.declare_unique_constraint.assert_not_called()

    @pytest.mark.parametrize('options', [{'index': 'fulltext'}, {'constraint': 'exists'}])
    def test_unsupported_schema_options_are_rejected(self, people: PropertyRegistry, options: dict) -> None:
        with pytest.raises(PropertyConfigurationError, match='unknown'):
            people.declare('name', **options)

    def test_default_for_callable_receiving_instance(self, people: PropertyRegistry) -> None:
        people.declare('label', default=lambda node: f"node-{node}")

        assert people.default_for('label', 7) == 'node-7'

    def test_default_for_zero_argument_producer(self, people: PropertyRegistry) -> None:
        people.declare('tags', default=list)
        people.declare('stamp', default=lambda: 'now')

        assert people.default_for('tags', object()) == []
        assert people.default_for('stamp', object()) == 'now'

    def test_default_for_value_is_copied(self, people: PropertyRegistry) -> None:
        shared = ['a']
        people.declare('tags', default=shared)

        produced = people.default_for('tags', None)
        assert produced == ['a']
        assert produced is not shared

    def test_default_for_without_default(self, people: PropertyRegistry) -> None:
        people.declare('name')

        assert people.default_for('name', None) is None
        assert people.default_for('unknown', None) is None

    def test_inherit_copies_declarations(self, people: PropertyRegistry) -> None:
        people.declare('name')
        employees = people.inherit('Employee')
        employees.declare('salary', type=int)

        assert employees.names() == ['name', 'salary']
        assert people.names() == ['name']
        assert employees.label == 'Employee'
        assert employees.registrar is people.registrar

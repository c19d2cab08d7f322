"""Tests for the per-node attribute store."""

from __future__ import annotations

from datetime import date
from typing import Any

import pytest

from graphnode.Casts.Typecaster import Typecaster
from graphnode.Properties import PropertyRegistry, UnknownAttributeError
from graphnode.Properties.AttributeEngine import AttributeEngine


class TestAttributeEngine:
    """Test suite for AttributeEngine."""

    @pytest.fixture
    def engine(self, registry: PropertyRegistry) -> AttributeEngine:
        return AttributeEngine(registry, typecaster=Typecaster(strict=False))

    def test_write_typecasts(self, engine: AttributeEngine) -> None:
        engine.write('day', '2020-05-17')
        engine.write('title', 42)

        assert engine.read('day') == date(2020, 5, 17)
        assert engine.read('title') == '42'

    def test_read_undeclared_returns_none(self, engine: AttributeEngine) -> None:
        assert engine.read('missing') is None

    def test_write_undeclared_raises(self, engine: AttributeEngine) -> None:
        with pytest.raises(UnknownAttributeError, match='missing'):
            engine.write('missing', 1)

    def test_attributes_lists_every_declared_property(self, engine: AttributeEngine) -> None:
        engine.write('title', 'launch')

        assert engine.attributes() == {'title': 'launch', 'day': None, 'parts': None, 'count': None}

    def test_defaults_fill_unset_properties_only(self, engine: AttributeEngine) -> None:
        engine.write('title', 'launch')

        assert engine.apply_defaults() == ['count']
        assert engine.read('count') == 1
        assert not engine.is_dirty('count')

    def test_is_set_tracks_assignment_not_value(self, engine: AttributeEngine) -> None:
        engine.write('count', None)

        assert engine.is_set('count')
        assert not engine.is_set('title')

    def test_defaults_skip_explicit_none(self, engine: AttributeEngine) -> None:
        engine.write('count', None)
        engine.apply_defaults()

        assert engine.read('count') is None

    def test_changed_only_when_value_differs(self, engine: AttributeEngine) -> None:
        engine.write('count', 5)
        engine.changes_applied()

        engine.write('count', '5')
        assert not engine.is_dirty()

        engine.write('count', 6)
        assert engine.is_dirty('count')
        assert engine.changes == {'count': (5, 6)}
        assert engine.changed_attributes == {'count': 5}
        assert engine.get_dirty() == {'count': 6}

    def test_original_is_captured_before_store(self, engine: AttributeEngine) -> None:
        engine.write('title', 'a')
        engine.changes_applied()

        engine.write('title', 'b')
        engine.write('title', 'c')

        assert engine.attribute_was('title') == 'a'
        assert engine.changes == {'title': ('a', 'c')}

    def test_reverting_clears_the_change(self, engine: AttributeEngine) -> None:
        engine.write('title', 'a')
        engine.changes_applied()

        engine.write('title', 'b')
        engine.write('title', 'a')

        assert engine.changed == []

    def test_changes_applied_keeps_previous_changes(self, engine: AttributeEngine) -> None:
        engine.write('title', 'a')
        engine.changes_applied()

        assert engine.changed == []
        assert engine.previous_changes == {'title': (None, 'a')}
        assert engine.was_changed('title')
        assert not engine.was_changed('day')

    def test_restore_attributes(self, engine: AttributeEngine) -> None:
        engine.write('title', 'a')
        engine.write('count', 2)
        engine.changes_applied()

        engine.write('title', 'b')
        engine.write('count', 3)
        engine.restore_attributes(['title'])

        assert engine.read('title') == 'a'
        assert engine.changed == ['count']

        engine.restore_attributes()
        assert engine.read('count') == 2
        assert not engine.is_dirty()

    def test_clear_changes_information(self, engine: AttributeEngine) -> None:
        engine.write('title', 'a')
        engine.changes_applied()
        engine.write('title', 'b')

        engine.clear_changes_information()

        assert not engine.is_dirty()
        assert engine.previous_changes == {}

    def test_will_change_records_original_once(self, engine: AttributeEngine) -> None:
        engine.write('parts', [1])
        engine.changes_applied()

        engine.attribute_will_change('parts')
        engine.read('parts').append(2)
        engine.attribute_will_change('parts')

        assert engine.changes == {'parts': ([1], [1, 2])}

    @pytest.mark.parametrize('value, expected', [
        ('yes', True),
        ('0', False),
        ('false', False),
        ('No', False),
        ('', False),
        ('   ', False),
        (0, False),
        (3, True),
        (0.0, False),
        (None, False),
        ([], False),
        (['x'], True),
    ])
    def test_query(self, engine: AttributeEngine, value: Any, expected: bool) -> None:
        engine.write('parts', value)

        assert engine.query('parts') is expected

    def test_query_undeclared_raises(self, engine: AttributeEngine) -> None:
        with pytest.raises(UnknownAttributeError):
            engine.query('missing')

import re
import threading

import pytest

from py_convtable import (INVALID_INPUT, ConversionResult, NormalizedTable, TableNotFoundError,
                          TableRegistrationError, TableRegistry, TableSchemaError)
from tests.fixtures_and_helpers import TEMPERATURE, TYPOGRAPHY


class TestRegistry:

    def test_register_and_get(self, registry):
        res = registry.register('temp', TEMPERATURE)
        assert res.is_ok()
        assert isinstance(res.value, NormalizedTable)
        assert res.value.name == 'temp'
        assert registry.get('temp').unwrap() is res.value
        assert 'temp' in registry
        assert len(registry) == 1
        assert list(registry) == ['temp']

    def test_duplicate_name_requires_force(self, registry):
        registry.register('temp', {'C': {'base': True, 'term': 'Celsius'}})
        res = registry.register('temp', {'F': {'base': True, 'term': 'Fahrenheit'}})
        assert res.error == "Table 'temp' is already registered. Use force=True to overwrite."
        assert isinstance(res.exception, TableRegistrationError)
        assert registry.get('temp').unwrap().base == 'C'

        forced = registry.register('temp', {'F': {'base': True, 'term': 'Fahrenheit'}}, force=True)
        assert forced.is_ok()
        assert registry.get('temp').unwrap().base == 'F'

    def test_failed_registration_keeps_previous_table(self, registry):
        original = registry.register('temp', TEMPERATURE).unwrap()
        res = registry.register('temp', {'a': {'base': True}, 'b': {'base': True}}, force=True)
        assert res.is_err()
        assert 'Duplicate base key' in res.error
        assert registry.get('temp').unwrap() is original

    def test_failed_registration_stores_nothing(self, registry):
        assert registry.register('bad', {}).is_err()
        assert 'bad' not in registry

    @pytest.mark.parametrize("field", ['scale', 'bias'])
    def test_oversized_number_is_rejected(self, registry, field):
        res = registry.register('huge', {'pt': {'base': True}, 'x': {field: 10 ** 400}})
        assert res.is_err()
        assert isinstance(res.exception, TableSchemaError)
        assert f"{field} of unit 'x' is not representable" in res.error
        assert 'huge' not in registry

    def test_unregister(self, registry):
        registry.register('temp', {'C': {'base': True}})
        res = registry.unregister('temp')
        assert res.value == "Table 'temp' unregistered successfully."
        assert registry.get('temp').error == "Table 'temp' not found."

    def test_unregister_missing(self, registry):
        quiet = registry.unregister('nothing')
        assert quiet.is_ok()
        assert quiet.value is None

        loud = registry.unregister('nothing', verbose=True)
        assert loud.error == "Table 'nothing' is not registered."
        assert isinstance(loud.exception, TableNotFoundError)

    def test_get_missing(self, registry):
        res = registry.get('nonexistent')
        assert res.error == "Table 'nonexistent' not found."
        with pytest.raises(TableNotFoundError):
            res.unwrap()

    def test_regex(self, registry):
        registry.register('temp', TEMPERATURE)
        regex = registry.regex('temp').unwrap()
        assert isinstance(regex, re.Pattern)
        match = regex.match('100C')
        assert match.group('major_value') == '100'
        assert match.group('major_unit') == 'C'
        assert match.group('minor_value') is None
        assert registry.regex('nonexistent').error == "Table 'nonexistent' not found."

    def test_name_based_operations(self, registry):
        registry.register('typography', TYPOGRAPHY)
        assert registry.convert('1p6', 'pt', 'typography').unwrap() == ConversionResult('pt', 18.0)
        assert registry.parse('2i', 'typography').unwrap().main.unit == 'in'
        assert registry.find('i', 'typography').unwrap().scale == 72.0
        assert registry.convert('20km', 'pt', 'typography').error == INVALID_INPUT
        assert registry.find('cm', 'nope').error == "Table 'nope' not found."

    def test_independent_registries(self):
        first, second = TableRegistry(), TableRegistry()
        first.register('temp', TEMPERATURE)
        assert 'temp' in first
        assert 'temp' not in second

    def test_tables_are_not_shared_between_names(self, registry):
        a = registry.register('a', TEMPERATURE).unwrap()
        b = registry.register('b', TEMPERATURE).unwrap()
        assert a is not b
        assert a.units is not b.units

    def test_table_is_read_only(self, registry):
        table = registry.register('temp', TEMPERATURE).unwrap()
        with pytest.raises(TypeError):
            table.units['X'] = table.units['C']
        with pytest.raises(AttributeError):
            table.base = 'F'

    def test_concurrent_registration(self, registry):
        errors = []

        def worker(i):
            res = registry.register(f't{i % 4}', TEMPERATURE, force=True)
            if res.is_err():
                errors.append(res.error)

        threads = [threading.Thread(target=worker, args=(i,)) for i in range(32)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert errors == []
        assert sorted(registry.names()) == ['t0', 't1', 't2', 't3']

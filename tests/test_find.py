import pytest

from py_convtable import (AliasResolutionError, NormalizedTable, NormalizedUnit, UnitNotFoundError, find,
                          pluralize)

FIND_TABLE_UNITS = {
    'i': NormalizedUnit(alias='in', scale=72.0, term=('Inch', 'Inches')),
    'in': NormalizedUnit(scale=72.0, term=('Inch', 'Inches')),
    'cm': NormalizedUnit(scale=28.3465, term=('Centimeter', 'Centimeters')),
    'pt': NormalizedUnit(is_base=True, term=('Point', 'Points')),
    'fake': NormalizedUnit(alias='nonexistent'),
}


@pytest.fixture(scope="module")
def table():
    return NormalizedTable(FIND_TABLE_UNITS, 'pt', 6, r'^$', 'typography')


class TestFind:

    def test_normal_unit(self, table):
        res = find('cm', table)
        assert res.is_ok()
        assert res.value == NormalizedUnit(scale=28.3465, bias=0.0, term=('Centimeter', 'Centimeters'))

    def test_alias_returns_target(self, table):
        unit = find('i', table).unwrap()
        assert unit is table['in']
        assert unit.scale == 72.0
        assert unit.bias == 0

    def test_missing_unit(self, table):
        res = find('nonexistent', table)
        assert res.error == "Unit 'nonexistent' not found in table 'typography'."
        assert isinstance(res.exception, UnitNotFoundError)
        assert res.value is None

    def test_dangling_alias(self, table):
        res = find('fake', table)
        assert res.error == "Alias 'fake' does not map to a valid unit in the table."
        assert isinstance(res.exception, AliasResolutionError)

    def test_on_normalized_table(self, typography):
        assert find('i', typography).unwrap() == typography['in']
        assert find('pt', typography).unwrap().is_base


class TestPluralize:

    @pytest.mark.parametrize(
        "unit, value, expected",
        [
            ('m', 1, 'Meter'),
            ('ft', 1, 'Foot'),
            ('cubit', 1.0, 'Cubit'),
            ('m', 5, 'Meters'),
            ('ft', 10, 'Feet'),
            ('cubit', 2, 'Cubits'),
            ('m', 0, 'Meters'),
            ('nmi', 2, 'Nautical Miles'),
            ('unknown', 2, 'unknown'),
        ],
    )
    def test_pluralize(self, distance, unit, value, expected):
        assert pluralize(unit, value, distance) == expected
        assert distance.pluralize(unit, value) == expected

    def test_unit_without_term(self):
        table = NormalizedTable({'u': NormalizedUnit(is_base=True)}, 'u', 6, r'^$')
        assert table.pluralize('u', 3) == 'u'

    @pytest.mark.parametrize(
        "value, unit, expected",
        [
            (18.0, 'pt', '18 Points'),
            (1, 'p', '1 Pica'),
            (17.0512389780761234, 'pt', '17.051238978076 Points'),
            (2.5, 'in', '2.5 Inches'),
        ],
    )
    def test_format(self, typography, value, unit, expected):
        assert typography.format(value, unit) == expected

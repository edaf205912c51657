"""Define a table in code and use the table-level operations directly."""
from py_convtable import create_table, convert, find, parse

shoe_sizes = create_table({
    'mm': {'base': True, 'term': 'Millimeter(s)'},
    'bc': {'scale': 8.466666666666667, 'term': 'Barleycorn(s)'},
    'in': {'scale': 25.4, 'minor': 'bc', 'term': 'Inch(es)'},
    'uk': {'scale': 8.466666666666667, 'bias': 203.2, 'term': 'UK size/UK sizes'},
}, 'shoe').unwrap()

print(shoe_sizes.pattern)
print(parse('10in2', shoe_sizes).unwrap())

size = convert('10in2', 'uk', shoe_sizes)
if size.is_ok():
    print(shoe_sizes.format(size.value.value, size.value.unit))

for text in ('ten inches', '10in2bc'):
    print(text, '->', convert(text, 'mm', shoe_sizes).error)

print(find('in', shoe_sizes).unwrap())

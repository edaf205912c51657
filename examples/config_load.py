from py_convtable import TableRegistry, basicConfig, loadTypographyTable

import importlib.resources

registry = TableRegistry()

with importlib.resources.as_file(
        importlib.resources.files('py_convtable').joinpath('assets/temperature.toml')) as config_file:
    basicConfig(registry, str(config_file))

loadTypographyTable(registry)

print(registry)

for text, unit in (('1p6', 'pt'), ('2i', 'cm'), ('1c4', 'mm')):
    result = registry.convert(text, unit, 'typography')
    table = registry.get('typography').unwrap()
    print(f"{text} -> {table.format(result.value.value, unit)}")

print(registry.convert('451F', 'C', 'temperature').unwrap())

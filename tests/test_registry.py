'''
Operation registry tests
'''

from fincalc.operation import Formula
from fincalc.operations import REGISTRY, CATEGORIES, MODULES, register_all
from fincalc.operations import basic
from fincalc.registry import Registry


def test_register_and_lookup():
    registry = Registry()
    registry.register(basic.multiply, '*')
    assert registry.lookup('×') is basic.multiply
    assert registry.lookup('*') is basic.multiply
    assert registry.lookup('/') is None
    assert '*' in registry
    assert len(registry) == 2
    assert sorted(registry) == ['*', '×']
    assert registry.aliases(basic.multiply) == ['×', '*']


def test_last_registration_wins():
    registry = Registry()
    registry.register(basic.add, 'plus')
    registry.register(basic.subtract, 'plus')
    assert registry.lookup('plus') is basic.subtract
    assert registry.lookup('+') is basic.add


def test_empty_symbol_not_registered():
    registry = Registry()
    registry.register(Formula(lambda x: x, 'ANON'))
    assert len(registry) == 0
    anonymous = Formula(lambda x: x, 'ANON')
    registry.register(anonymous, 'anon')
    assert registry.lookup('anon') is anonymous
    assert '' not in registry


def test_all_is_a_copy():
    registry = register_all(Registry())
    snapshot = registry.all()
    snapshot['+'] = basic.subtract
    del snapshot['×']
    assert registry.lookup('+') is basic.add
    assert registry.lookup('×') is basic.multiply


def test_operations_are_distinct():
    registry = Registry()
    registry.register(basic.add, 'plus', 'sum')
    registry.register(basic.subtract)
    assert registry.operations() == [basic.add, basic.subtract]


def test_default_registry_complete():
    for operations in CATEGORIES.values():
        for operation in operations:
            assert REGISTRY.lookup(operation.symbol()) is operation
    for module in MODULES:
        for operation, aliases in module.ALIASES.items():
            for alias in aliases:
                assert REGISTRY.lookup(alias) is operation


def test_categories_cover_every_operation():
    categorized = [operation
                   for operations in CATEGORIES.values()
                   for operation in operations]
    assert len(categorized) == len(set(categorized))
    assert set(categorized) == set(REGISTRY.operations())


def test_no_symbol_clashes():
    # Every alias still resolves to the operation that declared it.
    for module in MODULES:
        for operation in module.OPERATIONS:
            for symbol in (operation.symbol(),) + \
                    module.ALIASES.get(operation, ()):
                assert REGISTRY.lookup(symbol) is operation, symbol


def test_metadata_everywhere():
    for operation in REGISTRY.operations():
        assert operation.symbol()
        assert operation.name()
        assert operation.description()
        assert operation.example()
        assert len(operation.operand_descriptors()) == \
            operation.operand_count()

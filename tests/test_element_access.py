from types import SimpleNamespace

from dante_viewer.data.element_access import (
    ElementCategory,
    collection_size,
    connection_target,
    direct_attributes,
    element_category,
    element_hash,
    format_attribute,
    instance_of,
    iter_collection,
    iter_connection_targets,
    iter_elements,
    qualified_class_name,
)

from conftest import GRAPH, Geometry, JavaList


def test_iter_collection_java_list_and_iterables():
    assert list(iter_collection(JavaList(['a', 'b']))) == ['a', 'b']
    assert list(iter_collection(('x', 'y'))) == ['x', 'y']
    assert list(iter_collection(None)) == []
    assert collection_size(JavaList([1, 2, 3])) == 3
    assert collection_size([1]) == 1
    assert collection_size(None) == 0


def test_iter_elements_uses_element_count(network):
    elements = list(iter_elements(network))
    assert len(elements) == 10
    assert elements[0].getHash() == 'L1'

    plain = SimpleNamespace(elements=['a', 'b'])
    assert list(iter_elements(plain)) == ['a', 'b']


def test_instance_of_matches_exact_class_name(elements):
    link = elements['L1']
    assert instance_of(link, f"{GRAPH}.ELink")
    assert instance_of(link, 'ELink')
    assert not instance_of(link, 'Link')
    assert not instance_of(link, f"{GRAPH}.ELine")
    assert not instance_of(None, 'ELink')


def test_qualified_class_name_of_python_objects():
    name = qualified_class_name(SimpleNamespace())
    assert name == 'types.SimpleNamespace'


def test_element_category(elements):
    expected = {
        'L1': ElementCategory.LINK,
        'R1': ElementCategory.LINE,
        'N1': ElementCategory.NODE,
        'C1': ElementCategory.CARRIAGEWAY_DETECTOR,
        'D1': ElementCategory.LANE_DETECTOR,
        'P1': ElementCategory.POINT,
    }
    for hash_value, category in expected.items():
        assert element_category(elements[hash_value], GRAPH) is category
    assert element_category(SimpleNamespace(), GRAPH) is None


def test_connection_target_method_or_attribute(elements):
    node = elements['N1']
    assert connection_target(SimpleNamespace(to=lambda: node)) is node
    assert connection_target(SimpleNamespace(to=node)) is node
    assert list(iter_connection_targets(elements['L1'])) == [node]
    assert list(iter_connection_targets(elements['P1'])) == []


def test_element_hash(elements):
    assert element_hash(elements['L1']) == 'L1'
    assert element_hash(SimpleNamespace()) != ''


def test_direct_attributes_skip_methods_connections_and_properties(elements):
    attributes = direct_attributes(elements['L1'])
    names = [name for name, _ in attributes]
    assert names == ['id', 'geometry']
    assert isinstance(attributes[1][1], Geometry)


def test_format_attribute():
    assert format_attribute(Geometry([(0, 0)])) == 'Geometry[1 points]'
    assert format_attribute(3.14159265) == '3.1416'
    assert format_attribute(5) == '5'

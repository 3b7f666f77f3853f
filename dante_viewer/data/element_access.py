"""
Access to the external network object model.

The network, its elements and their properties belong to an external graph
library (typically Java classes exposed to Python through an import hook).
Collections follow the Java ``size()``/``get(i)`` convention, class identity
is only available by name. The helpers here hide those details from the rest
of the package and also accept plain Python objects.
"""

import logging
from enum import Enum
from typing import Any, Iterator, List, Optional, Tuple

logger = logging.getLogger(__name__)

# Fields that are shown in their own sections of the info panel
EXCLUDED_FIELDS = ('connections', 'properties')


class ElementCategory(Enum):
    """Element categories of the road network graph, by external class name."""

    LINK = 'ELink'
    LINE = 'ELine'
    NODE = 'ENode'
    CARRIAGEWAY_DETECTOR = 'ECarriageWayDetector'
    LANE_DETECTOR = 'ELaneDetector'
    POINT = 'EPoint'

    @property
    def class_name(self) -> str:
        return self.value


def iter_collection(collection: Any) -> Iterator[Any]:
    """
    Iterate over a Java-style list or any Python iterable.

    Args:
        collection: Object with ``size()`` and ``get(i)``, an iterable or None

    Yields:
        Items in collection order
    """
    if collection is None:
        return
    if hasattr(collection, 'size') and hasattr(collection, 'get'):
        for i in range(int(collection.size())):
            yield collection.get(i)
    else:
        yield from collection


def collection_size(collection: Any) -> int:
    """Number of items in a Java-style list or Python sized collection."""
    if collection is None:
        return 0
    if hasattr(collection, 'size') and callable(collection.size):
        return int(collection.size())
    return len(collection)


def iter_elements(network: Any) -> Iterator[Any]:
    """
    Iterate over all elements of a network.

    Uses ``nElements`` as the element count when the network provides it.
    """
    elements = network.elements
    count = getattr(network, 'nElements', None)
    if count is None or not hasattr(elements, 'get'):
        yield from iter_collection(elements)
        return
    if callable(count):
        count = count()
    for i in range(int(count)):
        yield elements.get(i)


def qualified_class_name(obj: Any) -> str:
    """
    Qualified class name of an object.

    External objects report it through ``getClass().getName()``; for plain
    Python objects the module and qualified name of the type are used.
    """
    get_class = getattr(obj, 'getClass', None)
    if get_class is not None:
        return str(get_class().getName())
    cls = type(obj)
    return f"{cls.__module__}.{cls.__qualname__}"


def instance_of(obj: Any, class_name: str) -> bool:
    """
    Check the exact class of an object by name.

    The class matches when ``class_name`` equals the qualified class name or
    is a trailing dotted part of it. Subclasses do not match.
    """
    if obj is None:
        return False
    name = qualified_class_name(obj)
    return name == class_name or name.endswith('.' + class_name)


def element_category(element: Any, graph_package: str = '') -> Optional[ElementCategory]:
    """
    Determine the category of a network element.

    Args:
        element: Network element
        graph_package: Package of the external graph classes

    Returns:
        The category, or None for elements that are not drawn
    """
    for category in ElementCategory:
        name = f"{graph_package}.{category.class_name}" if graph_package else category.class_name
        if instance_of(element, name):
            return category
    return None


def connection_target(connection: Any) -> Any:
    """Element a connection points to."""
    target = connection.to
    return target() if callable(target) else target


def iter_connection_targets(element: Any) -> Iterator[Any]:
    """Elements the given element is connected to, in connection order."""
    for connection in iter_collection(getattr(element, 'connections', None)):
        yield connection_target(connection)


def element_hash(element: Any) -> str:
    """Hash of an element as reported by the external library."""
    get_hash = getattr(element, 'getHash', None)
    if get_hash is None:
        return format(hash(element) & 0xFFFFFFFF, 'x')
    return str(get_hash())


def element_label(element: Any) -> str:
    """One-line description of an element."""
    to_string = getattr(element, 'toString', None)
    if to_string is not None:
        return str(to_string())
    return str(element)


def _field_names(element: Any) -> List[str]:
    names = list(getattr(element, '__dict__', {}))
    names.extend(name for name in dir(element) if name not in names)
    return [name for name in names if not name.startswith('_') and name not in EXCLUDED_FIELDS]


def direct_attributes(element: Any) -> List[Tuple[str, Any]]:
    """
    Public data fields of an element.

    Methods and the ``connections``/``properties`` fields are left out.

    Returns:
        List of (name, value) tuples in declaration order where available
    """
    attributes = []
    for name in _field_names(element):
        try:
            value = getattr(element, name)
        except AttributeError:
            continue
        if callable(value):
            continue
        attributes.append((name, value))
    return attributes


def format_attribute(value: Any) -> str:
    """Text of an attribute value, ``toString()`` for external objects."""
    try:
        return str(value.toString())
    except AttributeError:
        if isinstance(value, float):
            return f"{value:.5g}"
        return str(value)

"""
Shared fixtures: a small network of fake elements that behave like the
objects of the external graph library (Java-style lists, class names
through getClass()).
"""

import matplotlib

matplotlib.use('Agg')

import matplotlib.pyplot as plt
import pytest

from dante_viewer.config import ViewerConfig

GRAPH = 'nl.fileradar.dante.export.graph'
PROPERTY = 'nl.fileradar.dante.export.property'


class JavaList:
    def __init__(self, items=()):
        self._items = list(items)

    def size(self):
        return len(self._items)

    def get(self, i):
        return self._items[i]

    def add(self, item):
        self._items.append(item)


class JavaClass:
    def __init__(self, name):
        self._name = name

    def getName(self):
        return self._name

    def toString(self):
        return 'class ' + self._name


class JavaObject:
    _java_class = 'java.lang.Object'

    def getClass(self):
        return JavaClass(self._java_class)


class Geometry:
    def __init__(self, points):
        self.points = JavaList(points)

    def toString(self):
        return f"Geometry[{self.points.size()} points]"


class ScalarProperty(JavaObject):
    _java_class = PROPERTY + '.PInteger'

    def __init__(self, name, value):
        self._name = name
        self.value = value

    def getName(self):
        return self._name

    def asInt(self):
        return int(self.value)

    def toString(self):
        return f"{self._name}: {self.value}"


class SeriesProperty(JavaObject):
    _java_class = PROPERTY + '.PReliableFloatArray'

    def __init__(self, name, values, reliability=None):
        self._name = name
        self.values = list(values)
        self.reliability = reliability

    def getName(self):
        return self._name

    def toString(self):
        return f"{self._name}: [{len(self.values)} values]"


class Connection:
    def __init__(self, target):
        self._target = target

    def to(self):
        return self._target


class Element(JavaObject):
    def __init__(self, simple_class, hash_value, points, properties=(), element_id=0):
        self._java_class = f"{GRAPH}.{simple_class}"
        self.id = element_id
        self._hash = hash_value
        self.geometry = Geometry(points)
        self.properties = JavaList(properties)
        self.connections = JavaList()

    def getHash(self):
        return self._hash

    def getProperty(self, name):
        for prop in self.properties._items:
            if prop.getName() == name:
                return prop
        return None

    def listProperties(self):
        return ' '.join(f"({i}) {prop.toString()}" for i, prop in enumerate(self.properties._items))

    def connect(self, other):
        self.connections.add(Connection(other))

    def toString(self):
        return f"{self._java_class.rpartition('.')[2]} {self._hash}"


class FakeNetwork:
    def __init__(self, elements=()):
        self.elements = JavaList(elements)
        self.loaded_folder = None
        self.loaded_data = None

    @property
    def nElements(self):
        return self.elements.size()

    def loadNetwork(self, folder):
        self.loaded_folder = folder

    def loadData(self, data_file):
        self.loaded_data = data_file


def make_network():
    """
    Two links joined by a node, a ramp, an unknown line, three carriageway
    detectors (two on links), a lane detector and a point.
    """
    asm_speed = SeriesProperty('ASM Speed', [float(t) for t in range(288)])
    link1 = Element('ELink', 'L1', [(0, 0), (3, 4)],
                    [ScalarProperty('NWBLink.nLanes', 2), asm_speed], element_id=1)
    link2 = Element('ELink', 'L2', [(3, 4), (6, 8)],
                    [ScalarProperty('NWBLink.nLanes', 0),
                     SeriesProperty('ASM Speed', [1.0] * 100)], element_id=2)
    ramp = Element('ELine', 'R1', [(3, 4), (3, 10)],
                   [ScalarProperty('geometry', 0), ScalarProperty('RampLine.nLanes', 1)])
    other = Element('ELine', 'O1', [(6, 8), (9, 8)])
    node = Element('ENode', 'N1', [(3, 4)])
    det1 = Element('ECarriageWayDetector', 'C1', [(1.5, 2)],
                   [SeriesProperty('speed', [100, 90, 80, 70, 60], [False, True, False, False, False]),
                    SeriesProperty('flow', [1000, 1100, 1200, 1300, 1400])])
    det2 = Element('ECarriageWayDetector', 'C2', [(10, 10)])
    det3 = Element('ECarriageWayDetector', 'C3', [(4.5, 6)],
                   [SeriesProperty('speed', [50, 50, 50, 50, 50]),
                    SeriesProperty('flow', [2000, 2000, 2000, 2000, 2000])])
    lane = Element('ELaneDetector', 'D1', [(4.5, 6)])
    point = Element('EPoint', 'P1', [(0, 0)])

    link1.connect(node)
    node.connect(link2)
    det1.connect(link1)
    det3.connect(link2)

    elements = [link1, link2, ramp, other, node, det1, det2, det3, lane, point]
    return FakeNetwork(elements), {element.getHash(): element for element in elements}


@pytest.fixture
def network():
    return make_network()[0]


@pytest.fixture
def elements():
    return make_network()[1]


@pytest.fixture
def network_and_elements():
    return make_network()


@pytest.fixture
def config():
    return ViewerConfig()


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close('all')
